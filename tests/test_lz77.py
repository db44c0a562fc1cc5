import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lzhuffcrypt.lz77 import compress, decompress


def test_single_byte():
    assert compress(b"a") == b"0_0_a_"


def test_match_running_to_end_uses_eof_sign():
    assert compress(b"aa") == b"0_0_a_1_1_00"


def test_delimiter_byte_is_escaped_by_doubling():
    assert compress(b"_") == b"0_0___"


def test_empty_input():
    assert compress(b"") == b""
    assert decompress(b"") == b""


@pytest.mark.parametrize(
    "data",
    [b"_", b"__", b"a_b_c", b"00", b"0_0", b"abcabcabc", b"\x00\xff\n\r", b"a" * 600],
)
def test_round_trip_examples(data):
    assert decompress(compress(data)) == data


def test_match_length_is_capped():
    tokens = re.findall(rb"(\d+)_(\d+)_(?:a_|00)", compress(b"a" * 1000))
    lengths = [int(length) for _, length in tokens]
    assert max(lengths) == 257


def test_repetitive_input_shrinks():
    data = b"ab" * 1000
    assert len(compress(data)) < len(data)


def test_offset_before_start_is_rejected():
    with pytest.raises(ValueError):
        decompress(b"5_1_a_")


def test_non_numeric_field_is_rejected():
    with pytest.raises(ValueError):
        decompress(b"x_1_a_")


def test_truncated_token_is_rejected():
    with pytest.raises(ValueError):
        decompress(b"0_")


@settings(max_examples=60, deadline=None)
@given(st.binary(max_size=300))
def test_round_trip(data):
    assert decompress(compress(data)) == data


@settings(max_examples=40, deadline=None)
@given(st.text(alphabet="ab_0", max_size=200))
def test_round_trip_with_special_characters(text):
    data = text.encode()
    assert decompress(compress(data)) == data