# SPDX-License-Identifier: MIT
"""Command-line interface for encoding and decoding hashids."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Callable, Sequence
from uuid import UUID

import logfire

from ..bench import format_results, run_benchmarks
from ..core import Hashids
from ..errors import ConfigurationError, InvalidHashidError
from ..observability.monitoring import init_logfire
from ..runtime.settings import Settings, load_settings
from ..utils import ErrorHandler, LoggingErrorHandler

LOG_LEVELS = ["fatal", "error", "warn", "notice", "info", "debug", "trace"]

Command = Callable[[argparse.Namespace, Hashids, ErrorHandler], int]


def _print_version() -> None:
    """Print the installed package version."""
    try:
        pkg_version = version("idmask")
    except PackageNotFoundError:  # pragma: no cover - fallback for source trees
        pkg_version = "unknown"
    print(f"idmask {pkg_version}")


def _configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure Logfire from the settings level and verbosity flags."""
    index = LOG_LEVELS.index(settings.log_level) + args.verbose - args.quiet
    index = max(0, min(len(LOG_LEVELS) - 1, index))
    init_logfire(settings.logfire_token, LOG_LEVELS[index])  # type: ignore[arg-type]


def _cmd_encode(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print the hashid for the given numbers."""
    hashid = codec.encode(args.numbers)
    if not hashid:
        handler.handle("Numbers must be within the unsigned 64-bit range")
        return 1
    print(hashid)
    return 0


def _cmd_decode(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print the numbers encoded in a hashid, one per line."""
    try:
        numbers = codec.decode_strict(args.hashid)
    except InvalidHashidError as exc:
        handler.handle("Cannot decode hashid", exc)
        return 1
    for number in numbers:
        print(number)
    return 0


def _cmd_encode_hex(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print the hashid for a hexadecimal string."""
    hashid = codec.encode_hex(args.hex)
    if not hashid:
        handler.handle(f"Not a hexadecimal string: {args.hex!r}")
        return 1
    print(hashid)
    return 0


def _cmd_decode_hex(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print the hexadecimal string encoded in a hashid."""
    result = codec.decode_hex(args.hashid)
    if not result:
        handler.handle(f"Cannot decode hashid {args.hashid!r} as hex")
        return 1
    print(result)
    return 0


def _cmd_encode_uuid(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print the hashid for a UUID."""
    print(codec.encode_uuid(args.uuid))
    return 0


def _cmd_decode_uuid(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print the UUID encoded in a hashid."""
    try:
        value = codec.decode_uuid(args.hashid)
    except InvalidHashidError as exc:
        handler.handle("Cannot decode hashid as UUID", exc)
        return 1
    print(value)
    return 0


def _cmd_bench(
    args: argparse.Namespace, codec: Hashids, handler: ErrorHandler
) -> int:
    """Print encode/decode timings."""
    print(format_results(run_benchmarks(codec, args.iterations)))
    return 0


def _non_negative_int(value: str) -> int:
    """Parse ``value`` as an integer that is zero or greater."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"{value} is negative")
    return number


def _add_common_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Attach options shared by every subcommand."""
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument(
        "--salt", help="Salt for the shuffles. Overrides IDMASK_SALT."
    )
    parser.add_argument(
        "--min-length",
        type=_non_negative_int,
        help="Minimum hashid length. Overrides IDMASK_MIN_LENGTH.",
    )
    parser.add_argument(
        "--alphabet", help="Digit characters. Overrides IDMASK_ALPHABET."
    )
    parser.add_argument(
        "--separators",
        help="Separator candidate characters. Overrides IDMASK_SEPARATORS.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (repeatable)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Decrease logging verbosity (repeatable)",
    )
    return parser


def _add_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    common: argparse.ArgumentParser,
    name: str,
    func: Command,
    help_text: str,
) -> argparse.ArgumentParser:
    """Create a subcommand parser dispatching to ``func``."""
    parser = subparsers.add_parser(
        name,
        parents=[common],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        help=help_text,
        description=help_text,
    )
    parser.set_defaults(func=func)
    return parser


def _build_parser() -> argparse.ArgumentParser:
    """Return an argument parser configured with subcommands."""
    parser = argparse.ArgumentParser(
        prog="idmask",
        description=(
            "Encode non-negative integers into short salt-keyed hashids and"
            " decode them back."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the idmask version and exit.",
    )
    common = _add_common_args(argparse.ArgumentParser(add_help=False))
    subparsers = parser.add_subparsers(dest="command")

    encode = _add_subparser(
        subparsers, common, "encode", _cmd_encode, "Encode numbers into a hashid"
    )
    encode.add_argument("numbers", nargs="+", type=int, help="Numbers to encode")

    decode = _add_subparser(
        subparsers, common, "decode", _cmd_decode, "Decode a hashid into numbers"
    )
    decode.add_argument("hashid", help="Hashid to decode")

    encode_hex = _add_subparser(
        subparsers,
        common,
        "encode-hex",
        _cmd_encode_hex,
        "Encode a hexadecimal string into a hashid",
    )
    encode_hex.add_argument("hex", help="Hexadecimal digits to encode")

    decode_hex = _add_subparser(
        subparsers,
        common,
        "decode-hex",
        _cmd_decode_hex,
        "Decode a hashid into an uppercase hexadecimal string",
    )
    decode_hex.add_argument("hashid", help="Hashid to decode")

    encode_uuid = _add_subparser(
        subparsers, common, "encode-uuid", _cmd_encode_uuid, "Encode a UUID"
    )
    encode_uuid.add_argument("uuid", type=UUID, help="UUID to encode")

    decode_uuid = _add_subparser(
        subparsers,
        common,
        "decode-uuid",
        _cmd_decode_uuid,
        "Decode a hashid into a UUID",
    )
    decode_uuid.add_argument("hashid", help="Hashid to decode")

    bench = _add_subparser(
        subparsers, common, "bench", _cmd_bench, "Time encode and decode calls"
    )
    bench.add_argument(
        "--iterations",
        type=_non_negative_int,
        default=10_000,
        help="Calls per scenario",
    )
    return parser


def _apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> None:
    """Override settings fields based on CLI arguments."""
    for name in ("salt", "min_length", "alphabet", "separators"):
        value: Any = getattr(args, name, None)
        if value is not None:  # branch: override settings when flag provided
            setattr(settings, name, value)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and dispatch to the requested subcommand."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.version:
        _print_version()
        return
    if args.command is None:
        parser.print_help()
        raise SystemExit(1)

    handler = LoggingErrorHandler()
    try:
        settings = load_settings(args.config)
    except (RuntimeError, FileNotFoundError) as exc:
        parser.error(str(exc))
    _apply_args_to_settings(args, settings)
    _configure_logging(args, settings)
    try:
        codec = Hashids.from_settings(settings)
    except ConfigurationError as exc:
        handler.handle("Invalid encoder configuration", exc)
        raise SystemExit(2) from exc

    try:
        code = args.func(args, codec, handler)
    finally:
        logfire.force_flush()
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    # Allow module to be executed as a standalone script
    main()
