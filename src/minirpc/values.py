"""MINI-RPC Leaf Value Types

This module defines the value types shared by every MINI-RPC message:

1. Id - The correlation identifier linking a call to its response
2. Method - The name of the method to be invoked
3. Params - The positional or named parameters of an invocation

All types are plain Python values annotated for Pydantic, so they can be
used as model fields and validated on their own through their adapters.
"""

from typing import Annotated

from pydantic import Field, JsonValue, Strict, TypeAdapter

ID_MAX = 2**64 - 1
"""Largest correlation id, ids are unsigned 64-bit integers."""

Id = Annotated[int, Field(strict=True, ge=0, le=ID_MAX)]
"""Correlation id of a call.

Only non-negative integers are accepted. Booleans, floats and numeric
strings are rejected rather than coerced.
"""

Method = Annotated[str, Field(strict=True)]
"""Name of the method to be invoked. Case-sensitive and never trimmed."""

PositionalParams = Annotated[list[JsonValue], Strict()]
NamedParams = Annotated[dict[str, JsonValue], Strict()]

Params = PositionalParams | NamedParams
"""Parameters of an invocation.

An array decodes to the positional form (``list``), an object decodes to
the named form (``dict``). Any other shape is rejected.
"""

IdAdapter: TypeAdapter[Id] = TypeAdapter(Id)
MethodAdapter: TypeAdapter[Method] = TypeAdapter(Method)
ParamsAdapter: TypeAdapter[Params] = TypeAdapter(Params)
