"""MINI-RPC Error Objects

An error object is transported inside a failure response. It carries a
code classifying the failure and a human-readable message.

Codes are either one of the five fixed codes of the protocol or an
implementation-defined server error:

    -32700  Parse error
    -32600  Invalid request
    -32601  Method not found
    -32602  Invalid params
    -32603  Internal error
    other   Server error

Note that these objects are values being transported. Problems decoding a
message locally are reported with :class:`minirpc.codec.DecodeError`.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    TypeAdapter,
)


class ErrorCode(IntEnum):
    """The fixed error codes of the protocol."""

    PARSE_ERROR = -32700
    """Invalid JSON was received by the server."""

    INVALID_REQUEST = -32600
    """The JSON sent is not a valid Request object."""

    METHOD_NOT_FOUND = -32601
    """The method does not exist / is not available."""

    INVALID_PARAMS = -32602
    """Invalid method parameter(s)."""

    INTERNAL_ERROR = -32603
    """Internal MINI-RPC error."""

    @property
    def message(self) -> str:
        """The canonical message for this code."""
        return _CANONICAL_MESSAGES[self]


_CANONICAL_MESSAGES = {
    ErrorCode.PARSE_ERROR: "Parse error",
    ErrorCode.INVALID_REQUEST: "Invalid request",
    ErrorCode.METHOD_NOT_FOUND: "Method not found",
    ErrorCode.INVALID_PARAMS: "Invalid params",
    ErrorCode.INTERNAL_ERROR: "Internal error",
}

_FIXED_CODES = frozenset(ErrorCode)


@dataclass(frozen=True)
class ServerError:
    """An implementation-defined server error code.

    Args:
        code (int): Any integer other than the five fixed codes

    Raises:
        TypeError: If the code is not an integer
        ValueError: If the code is one of the fixed codes, which must be
            expressed with :class:`ErrorCode` instead
    """

    code: int

    def __post_init__(self):
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(
                f"Server error codes must be integers, got {type(self.code).__name__}"
            )
        if self.code in _FIXED_CODES:
            raise ValueError(
                f"{self.code} is reserved for {ErrorCode(self.code).name}, use ErrorCode instead"
            )

    @property
    def message(self) -> str:
        return "Server error"

    def __int__(self) -> int:
        return self.code


def _decode_code(value: Any) -> ErrorCode | ServerError:
    if isinstance(value, (ErrorCode, ServerError)):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"Error codes must be integers, got {type(value).__name__}"
        )
    if value in _FIXED_CODES:
        return ErrorCode(value)
    return ServerError(value)


def _encode_code(value: ErrorCode | ServerError) -> int:
    return int(value)


Code = Annotated[
    ErrorCode | ServerError,
    PlainValidator(_decode_code),
    PlainSerializer(_encode_code, return_type=int),
]
"""Error code, decoded from and encoded to a plain integer."""

CodeAdapter: TypeAdapter[Code] = TypeAdapter(Code)


class Error(BaseModel):
    """Error object of a failure response.

    Fields:
        code: The code classifying the error
        message: A short description of the error

    The message is independent from the code on the wire: the helpers fill
    in the canonical text, but a decoded error keeps whatever was sent.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: Code
    message: Annotated[str, Field(strict=True)]

    @classmethod
    def new(cls, code: ErrorCode | ServerError) -> "Error":
        """Creates a new error for `code` with its canonical message."""
        return cls(code=code, message=code.message)

    @classmethod
    def new_parse_error(cls) -> "Error":
        return cls.new(ErrorCode.PARSE_ERROR)

    @classmethod
    def new_invalid_request(cls) -> "Error":
        return cls.new(ErrorCode.INVALID_REQUEST)

    @classmethod
    def new_method_not_found(cls) -> "Error":
        return cls.new(ErrorCode.METHOD_NOT_FOUND)

    @classmethod
    def new_invalid_params(cls) -> "Error":
        return cls.new(ErrorCode.INVALID_PARAMS)

    @classmethod
    def new_internal_error(cls) -> "Error":
        return cls.new(ErrorCode.INTERNAL_ERROR)

    @classmethod
    def new_server_error(cls, code: int, message: str) -> "Error":
        """Creates a new server error for `code` with an explicit `message`.

        Raises:
            ValueError: If `code` is one of the fixed codes
        """
        return cls(code=ServerError(code), message=message)

    def __str__(self) -> str:
        return self.message
