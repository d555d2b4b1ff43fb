from .codec import (
    DecodeError,
    decode,
    decode_request,
    decode_response,
    decode_value,
    encode,
    encode_request,
    encode_response,
    encode_value,
)
from .errors import Code, CodeAdapter, Error, ErrorCode, ServerError
from .request import Call, Notification, Request, RequestAdapter
from .request import Payload as RequestPayload
from .response import Failure, Response, ResponseAdapter, Success
from .response import Payload as ResponsePayload
from .typed import TypedCall, TypedNotification, TypedSuccess
from .values import Id, IdAdapter, Method, MethodAdapter, Params, ParamsAdapter

__all__ = (
    "DecodeError",
    "decode",
    "decode_request",
    "decode_response",
    "decode_value",
    "encode",
    "encode_request",
    "encode_response",
    "encode_value",
    "Code",
    "CodeAdapter",
    "Error",
    "ErrorCode",
    "ServerError",
    "Call",
    "Notification",
    "Request",
    "RequestAdapter",
    "RequestPayload",
    "Failure",
    "Response",
    "ResponseAdapter",
    "Success",
    "ResponsePayload",
    "TypedCall",
    "TypedNotification",
    "TypedSuccess",
    "Id",
    "IdAdapter",
    "Method",
    "MethodAdapter",
    "Params",
    "ParamsAdapter",
)
