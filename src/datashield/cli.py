"""Command line entry point: screen one value as a field observer would."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from datashield.config import Settings
from datashield.context import Context
from datashield.policy import PolicyError, load_policy
from datashield.screen import screen
from datashield.utils.stable import stable_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_POLICY_ERROR = 1
EXIT_WARN = 3

__all__ = ["build_parser", "configure_logging", "main"]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datashield",
        description="Score text for sensitive data the way a form field would be screened.",
    )
    parser.add_argument("value", nargs="?", help="Text to screen. Read from stdin when omitted.")
    parser.add_argument("--name", default="", help="Field name attribute.")
    parser.add_argument("--id", dest="field_id", default="", help="Field id attribute.")
    parser.add_argument("--class", dest="class_name", default="", help="Field class list.")
    parser.add_argument("--placeholder", default="", help="Field placeholder text.")
    parser.add_argument("--aria-label", default="", help="Field accessible label.")
    parser.add_argument("--type", dest="field_type", default="text", help="Input type, e.g. text, password, email.")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Treat the page as served over plain HTTP.",
    )
    parser.add_argument(
        "--policy",
        default=None,
        help="Path to a YAML or JSON shield policy. Defaults to DATASHIELD_POLICY_PATH.",
    )
    parser.add_argument(
        "--fail-on-warn",
        action="store_true",
        help=f"Exit with status {EXIT_WARN} when the value would trigger a warning.",
    )
    parser.add_argument("--log-level", default=Settings.LOG_LEVEL, help="Logging level (default: %(default)s).")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(args.log_level)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        policy = load_policy(args.policy, strict=args.policy is not None)
    except PolicyError as exc:
        print(f"datashield: {exc}", file=sys.stderr)
        return EXIT_POLICY_ERROR

    value = args.value if args.value is not None else stdin.read().rstrip("\r\n")
    context = Context.from_field(
        name=args.name,
        id=args.field_id,
        class_name=args.class_name,
        placeholder=args.placeholder,
        aria_label=args.aria_label,
        field_type=args.field_type,
        secure=not args.insecure,
    )

    result = screen(value, context, policy)
    logger.debug("Screened value", extra={"decision": result.decision, "policy_id": result.policy_id})
    print(stable_json(result.to_payload()), file=stdout)

    if args.fail_on_warn and result.warn:
        return EXIT_WARN
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - manual invocation hook
    sys.exit(main())
