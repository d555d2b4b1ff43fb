"""Typed projections of MINI-RPC messages.

The wire models keep parameters and results as open JSON values. Call
sites that know the shape a method takes or returns can project a wire
message onto a typed model, and erase it back to the wire form:

    ```python
    class AddParams(BaseModel):
        a: float
        b: float

    typed = TypedCall[AddParams].project(call)
    total = typed.params.a + typed.params.b

    reply = TypedSuccess[float](id=typed.id, result=total).erase()
    ```

Projection validates with Pydantic, so any type Pydantic understands can
be used for the parameters and results.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, ValidationError

from .codec import DecodeError
from .errors import ErrorCode
from .request import Call, Notification
from .response import Success
from .values import Id, Method


def _project[T: BaseModel](cls: type[T], data: dict, code: ErrorCode) -> T:
    try:
        return cls.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        raise DecodeError(
            "; ".join(err["msg"] for err in errors), code, errors
        ) from e


class TypedCall[ParamsT](BaseModel):
    """A call whose parameters have a known type."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Id
    method: Method
    params: ParamsT

    @classmethod
    def project(cls, call: Call) -> Self:
        """Validate the parameters of `call` against `ParamsT`.

        Raises:
            DecodeError: With code INVALID_PARAMS if they don't match
        """
        return _project(
            cls,
            {"id": call.id, "method": call.method, "params": call.params},
            ErrorCode.INVALID_PARAMS,
        )

    def erase(self) -> Call:
        """Return the wire form of this call.

        Raises:
            pydantic.ValidationError: If the parameters don't encode to an
                array or an object
        """
        return Call.model_validate(self.model_dump(mode="json"))


class TypedNotification[ParamsT](BaseModel):
    """A notification whose parameters have a known type."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Method
    params: ParamsT

    @classmethod
    def project(cls, notification: Notification) -> Self:
        return _project(
            cls,
            {"method": notification.method, "params": notification.params},
            ErrorCode.INVALID_PARAMS,
        )

    def erase(self) -> Notification:
        return Notification.model_validate(self.model_dump(mode="json"))


class TypedSuccess[ResultT](BaseModel):
    """A success response whose result has a known type."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: Id
    result: ResultT

    @classmethod
    def project(cls, success: Success) -> Self:
        """Validate the result of `success` against `ResultT`.

        Raises:
            DecodeError: With code INTERNAL_ERROR if it doesn't match
        """
        return _project(
            cls,
            {"id": success.id, "result": success.result},
            ErrorCode.INTERNAL_ERROR,
        )

    def erase(self) -> Success:
        return Success.model_validate(self.model_dump(mode="json"))
