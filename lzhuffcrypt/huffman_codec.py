"""Huffman compression with a textual key line describing the code table."""

from __future__ import annotations

from .huffman_tree import huffman_codes

BYTE_LEN = 8
NUM_SYMBOLS = 256
# Placeholder for bytes absent from the input; never a valid bit string.
CHAR_NOT_FOUND_CODE = "_"


def compress(data: bytes) -> tuple[bytes, bytes]:
    """Huffman-code ``data``.

    Returns the key line (256 codes and the bit count, newline terminated)
    and the packed bits, zero-padded to a whole number of bytes.
    """
    data = bytes(data)
    codes = huffman_codes(data)
    bits = "".join(codes[value] for value in data)

    byte_count = -(-len(bits) // BYTE_LEN)
    padded = bits.ljust(byte_count * BYTE_LEN, "0")
    packed = int(padded, 2).to_bytes(byte_count, "big") if padded else b""

    table = " ".join(codes.get(symbol) or CHAR_NOT_FOUND_CODE for symbol in range(NUM_SYMBOLS))
    keys = f"{table} {len(bits)}\n".encode("ascii")
    return keys, packed


def _parse_keys(keys: bytes | str) -> tuple[dict[str, int], int]:
    text = keys.decode("ascii") if isinstance(keys, (bytes, bytearray)) else keys
    tokens = text.split()
    if len(tokens) <= NUM_SYMBOLS:
        raise ValueError("Huffman key line is incomplete")
    table = {code: symbol for symbol, code in enumerate(tokens[:NUM_SYMBOLS])}
    size_field = tokens[NUM_SYMBOLS]
    if not size_field.isdigit():
        raise ValueError(f"invalid bit count in Huffman key line: {size_field!r}")
    return table, int(size_field)


def decompress(keys: bytes | str, compressed: bytes) -> bytes:
    """Decode ``compressed`` using the key line produced by :func:`compress`."""
    table, size = _parse_keys(keys)

    bits = "".join(f"{value:08b}" for value in bytes(compressed))
    if size % BYTE_LEN:
        bits = bits[:size]

    out = bytearray()
    token = ""
    for bit in bits:
        token += bit
        symbol = table.get(token)
        if symbol is not None:
            out.append(symbol)
            token = ""
    return bytes(out)