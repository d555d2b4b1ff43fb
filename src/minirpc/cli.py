"""Command line inspector for MINI-RPC messages.

Reads one JSON document, decodes it as a request or a response envelope,
and reports how every payload was classified along with the canonical
encoding. Undecodable documents are answered with the failure response a
peer would send back.
"""

import argparse
import logging
import sys
from typing import Sequence

import logfire

from .codec import (
    DecodeError,
    decode_request,
    decode_response,
    encode_request,
    encode_response,
)
from .request import Call, Notification
from .response import Failure, Success

logger = logging.getLogger(__name__)


def describe(payload: Call | Notification | Failure | Success) -> str:
    """One line summary of a payload's variant and key fields."""
    match payload:
        case Call(id=call_id, method=method, params=params):
            return f"call id={call_id} method={method!r} params={_params_kind(params)}"
        case Notification(method=method, params=params):
            return f"notification method={method!r} params={_params_kind(params)}"
        case Success(id=call_id):
            return f"success id={call_id}"
        case Failure(error=error, id=call_id):
            return (
                f"failure id={'-' if call_id is None else call_id} "
                f"code={int(error.code)} message={error.message!r}"
            )
    raise TypeError(f"Not a MINI-RPC payload: {type(payload).__name__}")


def _params_kind(params: list | dict) -> str:
    if isinstance(params, list):
        return f"positional[{len(params)}]"
    return f"named[{', '.join(params)}]"


def inspect_document(data: str | bytes, kind: str) -> list[str]:
    """Decode `data` as a `kind` envelope and describe it.

    Returns:
        list[str]: One line per payload followed by the canonical encoding

    Raises:
        DecodeError: If `data` is not a valid envelope
    """
    if kind == "request":
        envelope = decode_request(data)
        canonical = encode_request(envelope)
    else:
        envelope = decode_response(data)
        canonical = encode_response(envelope)

    if isinstance(envelope, tuple):
        lines = [f"batch of {len(envelope)}"]
        lines.extend(f"  [{i}] {describe(payload)}" for i, payload in enumerate(envelope))
    else:
        lines = [describe(envelope)]
    lines.append(canonical)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minirpc",
        description="Decode a MINI-RPC message and show how it is classified.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File holding the JSON document. Reads stdin when omitted.",
    )
    parser.add_argument(
        "--kind",
        choices=("request", "response"),
        default="request",
        help="Envelope to decode the document as. Defaults to `request`.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enables debug logging"
    )
    parser.add_argument(
        "--enable-logfire",
        action="store_true",
        help="Enables sending logs to Logfire",
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    if args.enable_logfire:
        logfire.configure(scrubbing=False)
        logging.basicConfig(level=level, handlers=[logfire.LogfireLoggingHandler()])
    else:
        logging.basicConfig(level=level)

    logger.info("Inspecting message", extra={"cliArgs": vars(args)})

    if args.path is None:
        data = sys.stdin.read()
    else:
        with open(args.path, "rb") as file:
            data = file.read()

    try:
        lines = inspect_document(data, args.kind)
    except DecodeError as e:
        logger.warning("Message rejected: %s", e, extra={"errorData": e.data})
        print(encode_response(e.to_failure()))
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
