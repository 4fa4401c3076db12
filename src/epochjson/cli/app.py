import argparse
import logging
import sys

from pydantic import ValidationError

from epochjson.config.resolution import resolve_log_level
from epochjson.config.serializer import load_serializer_config
from epochjson.errors import CodecError

logger = logging.getLogger(__name__)


def _common_options(default) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=default,
        help="set logging level (default: WARNING)",
    )
    common.add_argument(
        "--config",
        "-c",
        default=default,
        help="path to a serializer config YAML (field -> codec bindings)",
    )
    return common


def main() -> None:
    # Subcommand copies must not reset values parsed before the subcommand
    common = _common_options(argparse.SUPPRESS)

    parser = argparse.ArgumentParser(
        prog="epochjson",
        description="Convert unix epoch timestamps in JSON records.",
        parents=[_common_options(None)],
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_show = sub.add_parser(
        "show",
        help="print a reputation document, its decoded date and the re-encoded document",
        parents=[common],
    )
    p_show.add_argument("path", help="path to the JSON document")
    p_show.add_argument(
        "--out",
        "-o",
        default=None,
        help="also write the re-encoded document to this path",
    )

    p_decode = sub.add_parser(
        "decode",
        help="print the date-time for a unix timestamp",
        parents=[common],
    )
    p_decode.add_argument("seconds", help="whole seconds since 1970-01-01T00:00:00Z")

    p_encode = sub.add_parser(
        "encode",
        help="print the unix timestamp for an ISO 8601 date-time",
        parents=[common],
    )
    p_encode.add_argument("value", help="ISO 8601 date-time (naive values are read as UTC)")

    args = parser.parse_args()

    try:
        config = load_serializer_config(args.config)
    except (FileNotFoundError, TypeError, ValueError) as exc:
        parser.error(str(exc))

    level = resolve_log_level(args.log_level, config.log_level)
    logging.basicConfig(level=level.value, format="%(message)s")

    try:
        if args.cmd == "show":
            from epochjson.cli.commands.show import handle as handle_show

            handle_show(path=args.path, config=config, out=args.out)
        elif args.cmd == "decode":
            from epochjson.cli.commands.timestamp import decode as handle_decode

            handle_decode(seconds=args.seconds, naive=config.naive)
        elif args.cmd == "encode":
            from epochjson.cli.commands.timestamp import encode as handle_encode

            handle_encode(value=args.value)
    except (CodecError, ValidationError, ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
