"""Run-length encoding of files as ``<count><byte>`` pairs."""

import re
from itertools import groupby

from polyzip.utils import get_file_name, get_path_with_custom_extension

_RUN = re.compile(rb"(\d*)(\D)")


def _encode(data):
    return b"".join(
        str(sum(1 for _ in run)).encode("ascii") + bytes([value])
        for value, run in groupby(data)
    )


def _decode(data):
    return b"".join(
        char * (int(digits) if digits else 0) for digits, char in _RUN.findall(data)
    )


def _output_path(input_path, output_path, extension):
    return get_path_with_custom_extension(output_path + get_file_name(input_path), extension)


def compress_rle(input_path, output_path):
    """Compress ``input_path`` into ``output_path`` + name + ``.rle``.

    ``output_path`` is used as a prefix, so a directory must end with a
    separator. Returns the path of the written file.
    """
    with open(input_path, "rb") as source:
        encoded = _encode(source.read())
    final_path = _output_path(input_path, output_path, "rle")
    with open(final_path, "wb") as target:
        target.write(encoded)
    return final_path


def decompress_rle(input_path, output_path):
    """Expand ``input_path`` into ``output_path`` + name + ``.txt``.

    A byte preceded by no digits is dropped; trailing digits are ignored.
    Returns the path of the written file.
    """
    with open(input_path, "rb") as source:
        decoded = _decode(source.read())
    final_path = _output_path(input_path, output_path, "txt")
    with open(final_path, "wb") as target:
        target.write(decoded)
    return final_path