import pytest

from lzhuffcrypt.file_io import read, write


def test_write_concatenates_parts(tmp_path):
    target = tmp_path / "out.bin"
    write(target, [b"ab", b"cd"])
    assert target.read_bytes() == b"abcd"


def test_read_strips_one_trailing_newline(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"x\n\n")
    assert read(source) == b"x\n"


def test_read_without_trailing_newline(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"line1\nline2")
    assert read(source) == b"line1\nline2"


def test_read_newline_only_gives_empty(tmp_path):
    source = tmp_path / "in.txt"
    source.write_bytes(b"\n")
    assert read(source) == b""


def test_read_empty_file_is_rejected(tmp_path):
    source = tmp_path / "empty.txt"
    source.write_bytes(b"")
    with pytest.raises(ValueError):
        read(source)


def test_read_missing_file_is_rejected(tmp_path):
    with pytest.raises(FileNotFoundError):
        read(tmp_path / "missing.txt")


def test_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    write(target, [b"\x00\xff", b"binary\r"])
    assert read(target) == b"\x00\xffbinary\r"