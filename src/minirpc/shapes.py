"""Shape-based discrimination of untagged messages.

MINI-RPC messages carry no type tag. Which variant a document is gets
decided by trying each candidate model in a fixed order and keeping the
first one that validates. Every candidate forbids unknown fields, so a
document can only match a variant whose field set it fits exactly.
"""

from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError


def _describe(exc: ValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors(include_url=False)
    )


def first_match[T: BaseModel](value: Any, variants: tuple[type[T], ...], kind: str) -> T:
    """Decode `value` as the first of `variants` it validates against.

    Args:
        value (Any): The structured value to classify
        variants (tuple[type[T], ...]): Candidate models, in priority order
        kind (str): Name of the union, used in error messages

    Returns:
        T: An instance of the first matching variant

    Raises:
        PydanticCustomError: If no variant matches. The message lists the
            field errors of every attempt.
    """
    if isinstance(value, variants):
        return value

    attempts = []
    for variant in variants:
        try:
            return variant.model_validate(value)
        except ValidationError as e:
            attempts.append(f"{variant.__name__} ({_describe(e)})")

    raise PydanticCustomError(
        "no_matching_shape",
        "Input is not a valid {kind}, tried {attempts}",
        {"kind": kind, "attempts": "; ".join(attempts)},
    )


def each_match[T](items: list | tuple, decode_one, kind: str) -> tuple[T, ...]:
    """Decode every element of a batch with `decode_one`, keeping order.

    Raises:
        PydanticCustomError: If any element fails. No partial batch is
            returned; the error names the offending index.
    """
    decoded = []
    for index, item in enumerate(items):
        try:
            decoded.append(decode_one(item))
        except PydanticCustomError as e:
            raise PydanticCustomError(
                "invalid_batch_element",
                "Element {index} of the {kind} batch is invalid: {detail}",
                {"index": index, "kind": kind, "detail": e.message()},
            ) from e
    return tuple(decoded)
