# polyzip

`polyzip` is a small file compressor with two modes:

- **RLE**: run-length encoding. Each run of identical bytes is written
  as the decimal length of the run followed by the byte, so `aaab`
  becomes `3a1b`.
- **Huffman**: an adaptive Huffman tree. This mode is unfinished (see
  *Limitations*).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
polyzip --rle --c <INPUT_PATH> <OUTPUT_PATH>
polyzip --rle --d <INPUT_PATH> <OUTPUT_PATH>
polyzip --huffman --c <INPUT_PATH> <OUTPUT_PATH>
polyzip --huffman --d <INPUT_PATH> <OUTPUT_PATH>
```

`--c` compresses and `--d` decompresses. The command always prints a
banner first.

For RLE, `<OUTPUT_PATH>` is used as a prefix: the result is written to
the prefix followed by the input file's name, with the extension `.rle`
when compressing and `.txt` when decompressing. End a directory prefix
with a path separator:

```
polyzip --rle --c notes/report.txt out/     # writes out/report.rle
polyzip --rle --d out/report.rle restored/  # writes restored/report.txt
```

For Huffman, `<OUTPUT_PATH>` is the path of the output file itself.

Exit status:

- `1` when fewer than four arguments are given (a usage line is printed),
  or when a file cannot be opened or written;
- `0` otherwise. An unrecognised mode or option does nothing and still
  exits with `0`. Arguments after the fourth are ignored.

## Library use

```python
from polyzip.rle import compress_rle, decompress_rle

compressed = compress_rle("notes/report.txt", "out/")   # "out/report.rle"
restored = decompress_rle(compressed, "restored/")      # "restored/report.txt"
```

Both functions return the path of the file they wrote and raise
`OSError` when a file cannot be opened. When decompressing, a byte with
no digits before it is dropped and trailing digits are ignored.

Path helpers live in `polyzip.utils` and use the platform's path
separator:

```python
from polyzip.utils import (
    get_file_extension,
    get_file_name,
    get_path_without_extension,
    get_path_with_custom_extension,
)

get_file_extension("/path/to/file.archive.tar.gz")     # "archive.tar.gz"
get_file_extension("/path/to/.hiddenfile")             # ""
get_file_name("/path/to/file.txt")                     # "file"
get_path_without_extension("/path/to/file.txt")        # "/path/to/file"
get_path_with_custom_extension("path/to/file", "txt")  # "path/to/file.txt"
```

`polyzip.node` provides `Node`, a binary search tree node ordered by
weight, with the functions `insert_node`, `delete_node`, `find_minimum`,
`search_by_symbol` and `search_by_weight`.

`polyzip.tree` provides `Tree`, an adaptive Huffman tree that starts as a
single not-yet-transmitted node. `Tree.add_symbol` increases the weight
of a known symbol or adds a new leaf for an unseen one.

`polyzip.huffman` provides `compress_huffman` and `decompress_huffman`.

## Limitations

- Huffman mode produces no encoded data. `compress_huffman` reads the
  input as native-order 4-byte integers and feeds them into a `Tree`, but
  the output file it creates is left empty. `decompress_huffman` only
  creates an empty output file. Weights are not rebalanced as symbols are
  added.
- The RLE format stores run lengths as decimal digits in front of each
  byte, so input that contains digits cannot be decompressed back to the
  original.
- RLE decompression always names its output with a `.txt` extension,
  whatever the original file's extension was.