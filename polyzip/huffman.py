"""Adaptive Huffman coding of files, built on :class:`polyzip.tree.Tree`."""

import sys

from polyzip.tree import Tree

_SYMBOL_SIZE = 4


def _symbols(stream):
    """Yield native-order signed 4-byte integers; a trailing partial chunk is dropped."""
    while len(chunk := stream.read(_SYMBOL_SIZE)) == _SYMBOL_SIZE:
        yield int.from_bytes(chunk, sys.byteorder, signed=True)


def compress_huffman(input_path, output_path):
    """Feed every symbol of ``input_path`` into an adaptive tree.

    The output file is created (and truncated) but no encoded data is
    written to it yet. Returns an empty string; raises ``OSError`` when
    either file cannot be opened.
    """
    with open(input_path, "rb") as source, open(output_path, "wb"):
        tree = Tree()
        for symbol in _symbols(source):
            tree.add_symbol(symbol)
    return ""


def decompress_huffman(input_path, output_path):
    """Open ``input_path`` and create an empty ``output_path``.

    Returns an empty string; raises ``OSError`` when either file cannot be
    opened.
    """
    with open(input_path, "rb"), open(output_path, "wb"):
        pass
    return ""