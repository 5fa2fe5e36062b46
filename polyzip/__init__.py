"""Small file compressor with run-length encoding and an unfinished adaptive Huffman mode."""

__version__ = "1.0.0"
__all__ = ["__version__"]