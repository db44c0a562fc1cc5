"""Byte-wise Caesar cipher: every byte is shifted by a key modulo 256."""

from __future__ import annotations


def _shift_table(shift: int) -> bytes:
    return bytes((value + shift) % 256 for value in range(256))


def encrypt(key: int, data: bytes) -> bytes:
    """Shift every byte of ``data`` up by ``key`` (taken modulo 256)."""
    return bytes(data).translate(_shift_table(key % 256))


def decrypt(key: int, data: bytes) -> bytes:
    """Shift every byte of ``data`` down by ``key`` (taken modulo 256)."""
    return bytes(data).translate(_shift_table(-(key % 256)))