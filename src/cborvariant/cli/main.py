"""Main CLI entry point for cborvariant."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec.decoder import decode, iter_decode
from ..debug import to_debug_string
from ..exceptions import CborError
from ..utils.io import read_file
from ..utils.sizing import encoded_size

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the cborvariant CLI.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="cborvariant",
        description="cborvariant: compact CBOR encoder/decoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cborvariant data.cbor                  Show the first item in a file
  cborvariant --all stream.cbor          Show every concatenated item
  cborvariant --hex 8201f6               Decode hex input
  cborvariant --version                  Show version
        """,
    )

    parser.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        type=str,
        help="File containing CBOR data",
    )

    parser.add_argument(
        "--hex",
        metavar="HEX",
        type=str,
        help="Decode a hex string instead of a file",
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Decode every item of a stream of concatenated items",
    )

    parser.add_argument(
        "--size",
        action="store_true",
        help="Show the encoded size of each item",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"cborvariant {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load input
    if args.hex is not None:
        try:
            data = bytes.fromhex(args.hex)
        except ValueError as e:
            print(f"Error: Invalid hex input: {e}", file=sys.stderr)
            return 1
    elif args.file:
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1
        try:
            data = read_file(file_path)
        except CborError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        # If no input specified, show help
        parser.print_help()
        return 0

    try:
        values = list(iter_decode(data)) if args.all else [decode(data)]
    except CborError as e:
        print(f"Error decoding CBOR: {e}", file=sys.stderr)
        return 1

    logger.debug("Decoded %d item(s) from %d bytes", len(values), len(data))

    for value in values:
        if args.size:
            print(f"[{encoded_size(value)} bytes] {to_debug_string(value)}")
        else:
            print(to_debug_string(value))

    return 0


if __name__ == "__main__":
    sys.exit(main())
