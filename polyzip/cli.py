"""Command-line entry point for the RLE and Huffman compressors."""

import sys

from polyzip.huffman import compress_huffman, decompress_huffman
from polyzip.rle import compress_rle, decompress_rle

BANNER = "\n".join(
    [
        "▗▄▄▖  ▄▄▄  █ ▄   ▄ ▄▄▄▄▄ ▄ ▄▄▄▄",
        "▐▌ ▐▌█   █ █ █   █  ▄▄▄▀ ▄ █   █",
        "▐▛▀▘ ▀▄▄▄▀ █  ▀▀▀█ █▄▄▄▄ █ █▄▄▄▀",
        "▐▌         █ ▄   █       █ █     ",
        "              ▀▀▀          ▀    ",
        "This program compresses files using RLE encoding.",
    ]
)

USAGE = "Usage: ./polyzip --rle --<c|d> <INPUT_PATH> <OUTPUT_PATH> <CUSTOM_NAME>?"

_CODECS = {
    "--rle": (compress_rle, decompress_rle),
    "--huffman": (compress_huffman, decompress_huffman),
}

_MODES = {"--c": 0, "--d": 1}


def _match(argument, options):
    return next((value for key, value in options.items() if argument.startswith(key)), None)


def main(argv=None):
    """Run the command line and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(BANNER)

    if len(args) < 4:
        print("\n/!\\ Error during program call.")
        print(USAGE)
        return 1

    codec = _match(args[0], _CODECS)
    mode = _match(args[1], _MODES)
    if codec is None or mode is None:
        return 0

    try:
        codec[mode](args[2], args[3])
    except OSError as error:
        print(f"/!\\ Error during file handling: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())