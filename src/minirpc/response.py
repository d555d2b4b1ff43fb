"""MINI-RPC Responses

A response is either a single payload or a batch of payloads. A payload is
one of:

1. Failure - Carries an error object, and the call id when it is known
2. Success - Carries the call id and the result of the invocation

Decoding tries ``Failure`` first and ``Success`` second. Both reject
unknown fields, so a document holding both ``error`` and ``result`` is not
a valid response payload.
"""

from typing import Any, Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    JsonValue,
    PlainValidator,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    model_serializer,
)

from .errors import Error
from .shapes import each_match, first_match
from .values import Id


class Failure(BaseModel):
    """A failure response.

    Fields:
        error: The error that occurred
        id: The id of the call, or None if it couldn't be determined
            (e.g. the request failed to parse). Omitted on the wire when None.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    error: Error
    id: Id | None = None

    @model_serializer(mode="wrap")
    def omit_missing_id(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.id is None:
            data.pop("id", None)
        return data


class Success(BaseModel):
    """A success response.

    Fields:
        id: The id of the call
        result: The result of the call, its shape is method-specific

    Fields can't be reassigned, but a list or dict `result` can still be
    mutated in place, and makes the model unhashable.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Id
    result: JsonValue


PAYLOAD_VARIANTS: tuple[type[Failure] | type[Success], ...] = (Failure, Success)
"""Response payload variants, in the order they are tried."""


def _decode_payload(value: Any) -> Failure | Success:
    return first_match(value, PAYLOAD_VARIANTS, "response payload")


def _decode_response(value: Any) -> "Failure | Success | tuple[Failure | Success, ...]":
    if isinstance(value, (list, tuple)):
        return each_match(value, _decode_payload, "response")
    return _decode_payload(value)


Payload = Annotated[Failure | Success, PlainValidator(_decode_payload)]
"""Response payload: a failure or a success."""

Response = Annotated[
    tuple[Payload, ...] | Payload,
    PlainValidator(_decode_response),
]
"""A single response payload, or a batch (tuple) of them in wire order."""

PayloadAdapter: TypeAdapter[Payload] = TypeAdapter(Payload)
ResponseAdapter: TypeAdapter[Response] = TypeAdapter(Response)
