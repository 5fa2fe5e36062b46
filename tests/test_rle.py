import os

import pytest

from polyzip.rle import compress_rle, decompress_rle


def _prefix(path):
    return str(path) + os.sep


def _write(path, content):
    path.write_bytes(content)
    return str(path)


def test_round_trip_restores_content(tmp_path):
    content = b"Hello, woooorld!\nAAAAAAAAAAAAbbbb ccc\n"
    source = _write(tmp_path / "test.txt", content)
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    compressed = compress_rle(source, _prefix(out_dir))
    restored = decompress_rle(compressed, _prefix(out_dir))
    with open(restored, "rb") as handle:
        assert handle.read() == content


def test_compress_documented_example(tmp_path):
    source = _write(tmp_path / "sample.txt", b"aaab")
    result = compress_rle(source, _prefix(tmp_path))
    assert result == os.path.join(str(tmp_path), "sample.rle")
    with open(result, "rb") as handle:
        assert handle.read() == b"3a1b"


def test_decompress_documented_example(tmp_path):
    source = _write(tmp_path / "sample.rle", b"3a1b")
    result = decompress_rle(source, _prefix(tmp_path))
    assert result == os.path.join(str(tmp_path), "sample.txt")
    with open(result, "rb") as handle:
        assert handle.read() == b"aaab"


def test_long_runs_use_multi_digit_counts(tmp_path):
    content = b"x" * 120 + b"y"
    source = _write(tmp_path / "long.txt", content)
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    compressed = compress_rle(source, _prefix(out_dir))
    with open(compressed, "rb") as handle:
        assert handle.read() == b"120x1y"
    restored = decompress_rle(compressed, _prefix(out_dir))
    with open(restored, "rb") as handle:
        assert handle.read() == content


def test_compress_empty_file(tmp_path):
    source = _write(tmp_path / "empty.txt", b"")
    result = compress_rle(source, _prefix(tmp_path))
    with open(result, "rb") as handle:
        assert handle.read() == b""


def test_decompress_ignores_trailing_digits(tmp_path):
    source = _write(tmp_path / "tail.rle", b"2z12")
    result = decompress_rle(source, _prefix(tmp_path))
    with open(result, "rb") as handle:
        assert handle.read() == b"zz"


def test_compress_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        compress_rle(str(tmp_path / "missing.txt"), _prefix(tmp_path))


def test_decompress_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        decompress_rle(str(tmp_path / "missing.rle"), _prefix(tmp_path))