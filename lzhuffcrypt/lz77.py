"""LZ77 coding into a textual token stream.

Each token is ``<offset>_<length>_<next byte>_``; the final token may end in
``00`` instead of a next byte when the match runs to the end of the input.
"""

from __future__ import annotations

from collections.abc import Iterator

WINDOW_SIZE = 32 * 1024
DELIMITER = b"_"
EOF_SIGN = b"00"
_LENGTH_CAP = 256


def _match_length(data: bytes, start: int, pos: int) -> int:
    """Length of the match of ``data[pos:]`` against ``data[start:]``.

    The match never reaches past ``pos`` on the left side and stops growing
    once it is longer than the length cap.
    """
    length = 1
    while (
        start + length < pos
        and pos + length < len(data)
        and length <= _LENGTH_CAP
        and data[start + length] == data[pos + length]
    ):
        length += 1
    return length


def _longest_match(data: bytes, pos: int) -> tuple[int, int]:
    best_start, best_length = pos, 0
    target = data[pos]
    for start in range(max(0, pos - WINDOW_SIZE), pos):
        if data[start] != target:
            continue
        length = _match_length(data, start, pos)
        if length > best_length:
            best_start, best_length = start, length
    return best_start, best_length


def compress(data: bytes) -> bytes:
    """Encode ``data`` as a stream of LZ77 tokens."""
    data = bytes(data)
    out = bytearray()
    pos = 0
    while pos < len(data):
        start, length = _longest_match(data, pos)
        out += f"{pos - start}_{length}_".encode("ascii")
        following = pos + length
        if following < len(data):
            out.append(data[following])
            out += DELIMITER
        else:
            out += EOF_SIGN
        pos += length + 1
    return bytes(out)


def _tokens(data: bytes) -> Iterator[tuple[bytes, bytes, bytes]]:
    fields = data.split(DELIMITER)
    if fields[-1] == b"":
        fields.pop()
    remaining = iter(fields)
    for offset in remaining:
        length = next(remaining, None)
        char = next(remaining, None)
        if length is None or char is None:
            raise ValueError("truncated LZ77 token")
        if char == b"":
            # The literal byte was the delimiter itself.
            next(remaining, None)
            char = DELIMITER
        yield offset, length, char


def _parse_number(field: bytes) -> int:
    if not field.isdigit():
        raise ValueError(f"invalid number in LZ77 token: {field!r}")
    return int(field)


def decompress(data: bytes) -> bytes:
    """Decode a stream of LZ77 tokens produced by :func:`compress`."""
    out = bytearray()
    for offset_field, length_field, char in _tokens(bytes(data)):
        offset = _parse_number(offset_field)
        length = _parse_number(length_field)
        start = len(out) - offset
        if start < 0:
            raise ValueError(f"LZ77 offset {offset} points before the start")
        out += out[start : start + length]
        if char != EOF_SIGN:
            out += char
    return bytes(out)