"""Huffman coding archiver: build code trees, compress and decompress files."""

__version__ = "0.1.0"
__all__ = ["__version__"]