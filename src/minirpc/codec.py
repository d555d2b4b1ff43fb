"""MINI-RPC Codec

This module is the boundary between MINI-RPC values and their wire form:

1. decode / encode - JSON text to values and back
2. decode_value / encode_value - Already-parsed structured values to
   MINI-RPC values and back
3. decode_request / encode_request / decode_response / encode_response -
   Shortcuts for the two envelopes

Every decode function raises :class:`DecodeError` when the input is not a
legal instance of the target type. Encoding emits compact JSON with a
stable field order, so encoded messages can be compared byte for byte.

Example:
    ```python
    request = decode_request('{"id":1,"method":"add","params":[1,2]}')
    assert isinstance(request, Call)

    try:
        decode_request('{"id":1,"method":"add"}')
    except DecodeError as e:
        reply = encode_response(e.to_failure())
    ```
"""

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import Error, ErrorCode
from .request import Request, RequestAdapter
from .response import Failure, Response, ResponseAdapter

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Raised when an input does not match the shape of the target type.

    Args:
        message (str): A human-readable description of the problem
        code (ErrorCode): The protocol code a peer should be told about
        data (dict | list | None): Optional details about the problem

    Example:
        ```python
        try:
            request = decode_request(body)
        except DecodeError as e:
            await send(encode_response(e.to_failure()))
        ```
    """

    def __init__(self, message: str, code: ErrorCode, data: dict | list | None = None):
        super(DecodeError, self).__init__(message)
        self.code = code
        self.data = data

    def to_error(self) -> Error:
        """Convert the exception to a protocol error object.

        Returns:
            Error: An error with this exception's code and its canonical message
        """
        return Error.new(self.code)

    def to_failure(self) -> Failure:
        """Convert the exception to a failure response without an id.

        The id is left out since the input could not be decoded far enough
        to know it.
        """
        return Failure(error=self.to_error())


def _adapter[T](target: TypeAdapter[T] | type[T]) -> TypeAdapter[T]:
    if isinstance(target, TypeAdapter):
        return target
    return TypeAdapter(target)


def decode_value[T](target: TypeAdapter[T] | type[T], obj: Any) -> T:
    """Decode an already-parsed structured value.

    Args:
        target (TypeAdapter[T] | type[T]): The type to decode as
        obj (Any): Objects, arrays, strings, numbers, booleans and None

    Returns:
        T: The decoded value

    Raises:
        DecodeError: If `obj` is not a legal instance of the target type
    """
    try:
        value = _adapter(target).validate_python(obj)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logger.debug("Rejected message", extra={"miniRpcMsg": obj, "errors": errors})
        raise DecodeError(
            "; ".join(err["msg"] for err in errors), ErrorCode.INVALID_REQUEST, errors
        ) from e
    logger.debug("Decoded message", extra={"miniRpcMsg": value})
    return value


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON value")


def decode[T](target: TypeAdapter[T] | type[T], data: str | bytes) -> T:
    """Decode JSON text.

    Args:
        target (TypeAdapter[T] | type[T]): The type to decode as
        data (str | bytes): The JSON text

    Returns:
        T: The decoded value

    Raises:
        DecodeError: If `data` is not valid JSON, with code PARSE_ERROR, or
            if it does not match the target type, with code INVALID_REQUEST
    """
    try:
        obj = json.loads(data, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DecodeError(
            e.msg,
            ErrorCode.PARSE_ERROR,
            {
                "pos": e.pos,
                "lineno": e.lineno,
                "colno": e.colno,
            },
        ) from e
    except UnicodeDecodeError as e:
        raise DecodeError(e.reason, ErrorCode.PARSE_ERROR, {"pos": e.start}) from e
    except ValueError as e:
        # Non-JSON constants and integers past the int string-conversion limit.
        raise DecodeError(str(e), ErrorCode.PARSE_ERROR) from e
    except RecursionError as e:
        raise DecodeError("Document is nested too deeply", ErrorCode.PARSE_ERROR) from e
    return decode_value(target, obj)


def encode_value[T](target: TypeAdapter[T] | type[T], value: T) -> Any:
    """Encode `value` to a plain structured value (dicts, lists, scalars)."""
    return _adapter(target).dump_python(value, mode="json")


def encode[T](target: TypeAdapter[T] | type[T], value: T) -> str:
    """Encode `value` to compact JSON text."""
    return _adapter(target).dump_json(value).decode()


def _envelope(value):
    # Batches are tuples; accept a list from callers building one by hand.
    if isinstance(value, list):
        return tuple(value)
    return value


def decode_request(data: str | bytes) -> Request:
    """Decode a request envelope: one payload, or a batch as a tuple."""
    return decode(RequestAdapter, data)


def encode_request(request: Request) -> str:
    return encode(RequestAdapter, _envelope(request))


def decode_response(data: str | bytes) -> Response:
    """Decode a response envelope: one payload, or a batch as a tuple."""
    return decode(ResponseAdapter, data)


def encode_response(response: Response) -> str:
    return encode(ResponseAdapter, _envelope(response))
