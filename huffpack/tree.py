"""Huffman code tree built from byte frequencies."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from pathlib import Path


def _signed(symbol: int) -> int:
    """Sort key that orders bytes as signed 8-bit values."""
    return symbol - 256 if symbol >= 128 else symbol


@dataclass(eq=False)
class HuffmanNode:
    """A node of the code tree; leaves carry a symbol."""

    frequency: int
    symbol: int | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree:
    """Frequency table, code tree and code table for a byte alphabet.

    Symbols are kept ordered as signed bytes, which fixes both the
    shape of the tree and the order of the stored frequency table.
    """

    def __init__(self) -> None:
        self.chars_frequency: dict[int, int] = {}
        self.table: dict[int, str] = {}
        self.root: HuffmanNode | None = None
        self.alphabet_power = 0
        self.number_of_chars = 0

    def _reorder(self) -> None:
        self.chars_frequency = dict(
            sorted(self.chars_frequency.items(), key=lambda item: _signed(item[0]))
        )

    def count_file(self, path: str | os.PathLike[str]) -> None:
        """Count the bytes of a file."""
        self.count_bytes(Path(path).read_bytes())

    def count_bytes(self, data: bytes) -> None:
        """Add the byte counts of ``data`` to the frequency table."""
        for symbol, count in Counter(data).items():
            self.chars_frequency[symbol] = self.chars_frequency.get(symbol, 0) + count
        self._reorder()
        self.number_of_chars = len(data)
        self.alphabet_power = len(self.chars_frequency)

    def add_symbol(self, symbol: int, frequency: int) -> None:
        """Record a symbol's frequency unless the symbol is already known."""
        if symbol not in self.chars_frequency:
            self.chars_frequency[symbol] = frequency
            self._reorder()

    def build(self) -> None:
        """Build the code tree by repeatedly joining the two rarest nodes."""
        nodes = [
            HuffmanNode(frequency, symbol)
            for symbol, frequency in self.chars_frequency.items()
        ]
        if not nodes:
            raise ValueError("cannot build a tree without symbols")
        while len(nodes) > 1:
            nodes.sort(key=lambda node: node.frequency)
            left, right, *nodes = nodes
            nodes.append(HuffmanNode(left.frequency + right.frequency, None, left, right))
        self.root = nodes[0]

    def build_table(self) -> dict[int, str]:
        """Derive the code of every symbol from the tree."""
        self.table = {}
        root = self.root
        if root is None:
            return self.table
        if root.is_leaf():
            self.table[root.symbol] = "1"
            return self.table

        def walk(node: HuffmanNode | None, code: str) -> None:
            if node is None:
                return
            if node.is_leaf():
                self.table[node.symbol] = code
                return
            walk(node.left, code + "0")
            walk(node.right, code + "1")

        walk(root, "")
        return self.table