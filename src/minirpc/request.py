"""MINI-RPC Requests

A request is either a single payload or a batch of payloads. A payload is
one of:

1. Call - A method invocation that expects exactly one response
2. Notification - A fire-and-forget invocation that never gets one

The two payloads differ only by the presence of the ``id`` field. Decoding
tries ``Call`` first and ``Notification`` second; both reject unknown
fields, so a document with an ``id`` never becomes a notification and a
document without one never becomes a call.
"""

from typing import Any, Annotated

from pydantic import BaseModel, ConfigDict, PlainValidator, TypeAdapter

from .shapes import each_match, first_match
from .values import Id, Method, Params


class Call(BaseModel):
    """A request which is a call.

    Fields:
        id: Correlation id, echoed back in the response
        method: The name of the method to be invoked
        params: The parameter values to be used during the invocation

    Fields can't be reassigned, but `params` is a plain list or dict: it is
    not hashable and mutating it in place is not prevented.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Id
    method: Method
    params: Params


class Notification(BaseModel):
    """A request which is a notification.

    Fields:
        method: The name of the method to be invoked
        params: The parameter values to be used during the invocation

    As with :class:`Call`, `params` itself is a mutable list or dict.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Method
    params: Params


PAYLOAD_VARIANTS: tuple[type[Call] | type[Notification], ...] = (Call, Notification)
"""Request payload variants, in the order they are tried."""


def _decode_payload(value: Any) -> Call | Notification:
    return first_match(value, PAYLOAD_VARIANTS, "request payload")


def _decode_request(value: Any) -> "Call | Notification | tuple[Call | Notification, ...]":
    if isinstance(value, (list, tuple)):
        return each_match(value, _decode_payload, "request")
    return _decode_payload(value)


Payload = Annotated[Call | Notification, PlainValidator(_decode_payload)]
"""Request payload: a call or a notification."""

Request = Annotated[
    tuple[Payload, ...] | Payload,
    PlainValidator(_decode_request),
]
"""A single request payload, or a batch (tuple) of them in wire order."""

PayloadAdapter: TypeAdapter[Payload] = TypeAdapter(Payload)
RequestAdapter: TypeAdapter[Request] = TypeAdapter(Request)
