import pytest
from hypothesis import given
from hypothesis import strategies as st

from lzhuffcrypt.cipher import decrypt, encrypt


def test_encrypt_shifts_each_byte():
    assert encrypt(1, b"abc") == b"bcd"


def test_encrypt_wraps_around():
    assert encrypt(1, b"\xff") == b"\x00"


def test_decrypt_wraps_around():
    assert decrypt(1, b"\x00") == b"\xff"


def test_key_is_taken_modulo_256():
    data = b"some text"
    assert encrypt(257, data) == encrypt(1, data)
    assert decrypt(256, data) == data


def test_zero_key_is_identity():
    assert encrypt(0, b"unchanged") == b"unchanged"


@pytest.mark.parametrize("key", [0, 1, 13, 128, 255])
def test_length_is_preserved(key):
    data = bytes(range(256))
    assert len(encrypt(key, data)) == 256


@given(st.integers(min_value=0, max_value=255), st.binary())
def test_round_trip(key, data):
    assert decrypt(key, encrypt(key, data)) == data