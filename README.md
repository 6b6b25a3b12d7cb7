# huffpack

A small Huffman coding archiver. It compresses a file into a compact binary
form, which is a frequency table followed by packed Huffman codes. It can
also turn that form back into the uncompressed bytes.

## Installation

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Command line

Compress a file:

```
huffpack -c -f input.txt -o input.huf
```

Decompress it again:

```
huffpack -d -f input.huf -o restored.txt
```

`--file` and `--output` are long forms of `-f` and `-o`. You can give the
mode and the two options in any order. The command takes exactly these five
arguments.

Each run prints three numbers, one per line:

- When compressing, it prints the size of the uncompressed data, then the size
  of the packed code stream, then the size of the frequency table. All sizes
  are in bytes.
- When decompressing, it prints the size of the packed code stream, then the
  size of the restored data, then the size of the frequency table.

An empty input file produces an empty output file and prints `0` three times.

The program prints a usage message in these cases:

- the arguments are wrong,
- the input file does not exist,
- no output file is given.

If an archive cannot be decoded, or a file cannot be read or written, the
program prints an error to standard error and exits with status 1.

## Library use

```python
from huffpack.encoding import compress_file, decompress_file

report = compress_file("input.txt", "input.huf")
print("\n".join(report.lines("compress")))

report = decompress_file("input.huf", "restored.txt")
print("\n".join(report.lines("decompress")))
```

Both functions return a `SizeReport`. When an archive cannot be decoded,
`decompress_file` raises `CorruptArchiveError`, which is a `ValueError`.

You can also build a code table yourself with `huffpack.tree.HuffmanTree`:

```python
from huffpack.tree import HuffmanTree

tree = HuffmanTree()
tree.count_bytes(b"abracadabra")
tree.build()
codes = tree.build_table()  # maps each byte value to its code, e.g. "01"
```

- `HuffmanTree.count_file` counts the bytes of a file on disk.
- `HuffmanTree.add_symbol` adds a symbol and its count by hand. It does
  nothing if the symbol is already in the table.
- `BinaryIO` in `huffpack.encoding` writes the frequency table and the packed
  bits to binary streams, and reads them back. `BinaryIO.read_bits` returns
  the decoded bytes.

## File format

All integers are 32-bit little-endian signed values.

1. The number of bytes before compression.
2. The number of distinct symbols.
3. One entry per symbol: the symbol byte, then its count. Entries are ordered
   by the byte read as a signed 8-bit value, so bytes 0x80 to 0xFF come before
   0x00 to 0x7F.
4. The Huffman codes of the data, packed starting from the most significant
   bit. The last byte is padded with zero bits.

If the data has only one distinct symbol, that symbol gets the one-bit code
`1`.