"""Main CLI entry point for sigcodec."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..exceptions import SigcodecError
from .commands import check_file, decode_file, encode_file, print_sizes


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the sigcodec CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="sigcodec: 7-bit safe byte codec for embedded signature data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sigcodec --encode payload.bin > payload.txt      Encode raw bytes
  sigcodec --decode payload.txt > payload.bin      Decode encoded text
  sigcodec --check payload.txt                     Validate encoded text
  sigcodec --sizes 100                             Show packed size for 100 bytes
  sigcodec --version                               Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--encode",
        metavar="FILE",
        type=str,
        help="Encode raw bytes from FILE ('-' for stdin) to stdout",
    )
    action.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode encoded text from FILE ('-' for stdin) to stdout",
    )
    action.add_argument(
        "--check",
        metavar="FILE",
        type=str,
        help="Check whether FILE holds a valid encoding",
    )
    action.add_argument(
        "--sizes",
        metavar="N",
        type=int,
        help="Show how N raw bytes map onto packed cells",
    )

    parser.add_argument(
        "--mutf8",
        action="store_true",
        help="Read/write encoded text as modified UTF-8 (zero as 0xC0 0x80)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sigcodec {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)-24s %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.encode is not None:
            encode_file(args.encode, sys.stdout.buffer, mutf8=args.mutf8)
            return 0
        if args.decode is not None:
            decode_file(args.decode, sys.stdout.buffer, mutf8=args.mutf8)
            return 0
        if args.check is not None:
            return 0 if check_file(args.check, mutf8=args.mutf8) else 1
        if args.sizes is not None:
            print_sizes(args.sizes)
            return 0
    except (SigcodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read input: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
