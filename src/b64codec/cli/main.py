"""Main CLI entry point for b64codec."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..adapters import decode_to_bytes, encode_to_str
from ..exceptions import Base64Error


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the b64codec CLI.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="b64codec: Base64 encoder/decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  b64codec --encode "hello"                  Encode UTF-8 text
  b64codec --encode 9646e9 --hex             Encode hex bytes
  b64codec --decode aGVsbG8=                 Decode to UTF-8 text
  b64codec --decode lkbp --hex --url-safe    Decode to hex, URL-safe alphabet
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--encode", metavar="DATA", type=str, help="Encode DATA to Base64")
    action.add_argument("--decode", metavar="TEXT", type=str, help="Decode Base64 TEXT")

    parser.add_argument(
        "--hex",
        action="store_true",
        help="Read encode input / print decode output as hex instead of UTF-8",
    )
    parser.add_argument(
        "--url-safe",
        action="store_true",
        help="Use the URL-safe alphabet (-_ instead of +/, no padding)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"b64codec {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.encode is not None:
        try:
            data = bytes.fromhex(args.encode) if args.hex else args.encode.encode("utf-8")
        except ValueError as e:
            print(f"Error: Invalid hex input: {e}", file=sys.stderr)
            return 1

        print(encode_to_str(data, url_safe=args.url_safe))
        return 0

    if args.decode is not None:
        try:
            decoded = decode_to_bytes(args.decode, url_safe=args.url_safe)
        except Base64Error as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if args.hex:
            print(decoded.hex())
            return 0

        try:
            print(decoded.decode("utf-8"))
        except UnicodeDecodeError:
            print("Error: Decoded data is not UTF-8 text, use --hex", file=sys.stderr)
            return 1
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
