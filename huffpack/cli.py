"""Command line: compress or decompress a file."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NamedTuple, Sequence

from huffpack.encoding import CorruptArchiveError, compress_file, decompress_file

PROG = "huffpack"

USAGE = (
    "Incorrect arguments!\n"
    "Usage:\n"
    "To compress file: {prog} -c -f <decompressed_file> -o <compressed_file>\n"
    "To decompress file: {prog} -d -f <compressed_file> -o <decompressed_file>"
)


class ArgumentError(Exception):
    """Raised for a command line that cannot be used."""


class Arguments(NamedTuple):
    mode: str
    input_file: str
    output_file: str


def parse_args(argv: Sequence[str]) -> Arguments:
    """Parse exactly five arguments: a mode and the -f and -o options."""
    args = list(argv)
    if len(args) != 5:
        raise ArgumentError("Incorrect arguments!")
    mode = input_file = output_file = ""
    items = iter(args)
    for arg in items:
        if arg in ("-c", "-d"):
            mode = arg
        elif arg in ("-f", "--file"):
            value = next(items, None)
            if value is None:
                raise ArgumentError("Missing input file!")
            input_file = value
            if not os.path.exists(input_file):
                raise ArgumentError("Input file does not exist!")
        elif arg in ("-o", "--output"):
            value = next(items, None)
            if value is None:
                raise ArgumentError("Missing output file!")
            output_file = value
        else:
            raise ArgumentError("Incorrect argument!")
    return Arguments(mode, input_file, output_file)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
        if args.mode not in ("-c", "-d"):
            raise ArgumentError("Unknown mode!")
        if not os.path.exists(args.input_file):
            raise ArgumentError("Input file doesn't exist!")
        if not args.output_file:
            raise ArgumentError("Output file is not given!")
    except ArgumentError:
        print(USAGE.format(prog=PROG))
        return 0

    try:
        if os.path.getsize(args.input_file) == 0:
            print("0\n0\n0")
            Path(args.output_file).write_bytes(b"")
            return 0
        if args.mode == "-c":
            lines = compress_file(args.input_file, args.output_file).lines("compress")
        else:
            lines = decompress_file(args.input_file, args.output_file).lines("decompress")
    except (CorruptArchiveError, OSError) as error:
        print(f"{PROG}: {error}", file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())