"""Archive format: frequency table followed by packed Huffman codes."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO as BinaryStream

from huffpack.tree import HuffmanTree

_INT = struct.Struct("<i")
_HEADER = struct.Struct("<ii")
_ENTRY_SIZE = 1 + _INT.size


class CorruptArchiveError(ValueError):
    """Raised when compressed data cannot be decoded."""


@dataclass
class SizeReport:
    """Sizes in bytes of the original data, the packed codes and the table."""

    original_size: int = 0
    compressed_size: int = 0
    table_size: int = 0

    def lines(self, mode: str) -> list[str]:
        """The sizes in the order printed for ``compress`` or ``decompress``."""
        if mode == "compress":
            values = (self.original_size, self.compressed_size, self.table_size)
        elif mode == "decompress":
            values = (self.compressed_size, self.original_size, self.table_size)
        else:
            return []
        return [str(value) for value in values]


@dataclass
class BinaryIO:
    """Reads and writes the parts of an archive, recording their sizes."""

    report: SizeReport = field(default_factory=SizeReport)

    def write_frequency_table(self, output: BinaryStream, tree: HuffmanTree) -> None:
        output.write(_HEADER.pack(tree.number_of_chars, tree.alphabet_power))
        size = _HEADER.size
        for symbol, frequency in tree.chars_frequency.items():
            output.write(bytes([symbol]) + _INT.pack(frequency))
            size += _ENTRY_SIZE
        self.report.table_size = size
        self.report.original_size = tree.number_of_chars

    def write_bits(self, output: BinaryStream, data: bytes, tree: HuffmanTree) -> None:
        packed = bytearray()
        accumulator = 0
        filled = 0
        for symbol in data:
            try:
                code = tree.table[symbol]
            except KeyError:
                raise ValueError(f"symbol {symbol} has no code") from None
            for bit in code:
                accumulator = (accumulator << 1) | (bit == "1")
                filled += 1
                if filled == 8:
                    packed.append(accumulator)
                    accumulator = 0
                    filled = 0
        if filled:
            packed.append(accumulator << (8 - filled))
        output.write(packed)
        self.report.compressed_size = len(packed)

    def read_frequency_table(self, input: BinaryStream, tree: HuffmanTree) -> None:
        header = input.read(_HEADER.size)
        if len(header) < _HEADER.size:
            raise CorruptArchiveError("truncated archive header")
        number_of_chars, alphabet_power = _HEADER.unpack(header)
        size = _HEADER.size
        self.report.original_size = number_of_chars
        for _ in range(alphabet_power):
            entry = input.read(_ENTRY_SIZE)
            if len(entry) < _ENTRY_SIZE:
                raise CorruptArchiveError("truncated frequency table")
            (frequency,) = _INT.unpack(entry[1:])
            tree.add_symbol(entry[0], frequency)
            size += _ENTRY_SIZE
        self.report.table_size = size

    def read_bits(self, input: BinaryStream, tree: HuffmanTree) -> bytes:
        """Decode the rest of ``input`` with the tree; return the original bytes."""
        root = tree.root
        if root is None:
            raise CorruptArchiveError("no code tree to decode with")
        data = input.read()
        target = self.report.original_size
        single_symbol = root.is_leaf()
        decoded = bytearray()
        node = root
        for byte in data:
            for shift in range(7, -1, -1):
                if (byte >> shift) & 1 == 0:
                    node = node.left
                elif single_symbol:
                    decoded.append(node.symbol)
                else:
                    node = node.right
                if node is None:
                    raise CorruptArchiveError("bit sequence leaves the code tree")
                if len(decoded) == target:
                    break
                if node.is_leaf() and node is not root:
                    decoded.append(node.symbol)
                    node = root
        self.report.compressed_size = len(data)
        return bytes(decoded)


def compress_file(
    filename: str | os.PathLike[str], output_file: str | os.PathLike[str]
) -> SizeReport:
    """Compress ``filename`` into ``output_file``."""
    data = Path(filename).read_bytes()
    tree = HuffmanTree()
    tree.count_bytes(data)
    tree.build()
    tree.build_table()
    binary_io = BinaryIO()
    with open(output_file, "wb") as output:
        binary_io.write_frequency_table(output, tree)
        binary_io.write_bits(output, data, tree)
    return binary_io.report


def decompress_file(
    filename: str | os.PathLike[str], output_file: str | os.PathLike[str]
) -> SizeReport:
    """Restore the data archived in ``filename`` into ``output_file``."""
    binary_io = BinaryIO()
    tree = HuffmanTree()
    with open(filename, "rb") as input:
        binary_io.read_frequency_table(input, tree)
        try:
            tree.build()
        except ValueError as error:
            raise CorruptArchiveError(str(error)) from None
        tree.build_table()
        decoded = binary_io.read_bits(input, tree)
    Path(output_file).write_bytes(decoded)
    return binary_io.report