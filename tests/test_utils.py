import pytest

from dmrtrunk.utils import (
    base11,
    convert_base10_to_base11_group_number,
    convert_base11_group_number_to_base10,
    convert_p3_group_number_to_cai,
    parse_iso7bit_to_iso8bit,
    parse_utf16,
)


def _pack7(text: bytes) -> bytes:
    bits = 0
    for ch in text:
        bits = (bits << 7) | (ch & 0x7F)
    total = len(text) * 7
    pad = (-total) % 8
    return (bits << pad).to_bytes((total + pad) // 8, "big")


@pytest.mark.parametrize("k", range(0, 8))
def test_base11_of_power_of_eleven(k):
    assert base11(11**k) == 10**k


@pytest.mark.parametrize("value", [0, 1, 5, 10])
def test_base11_single_digits_unchanged(value):
    assert base11(value) == value


@pytest.mark.parametrize("gid", [0, 10000000, 12345678])
def test_base10_to_base11_out_of_range(gid):
    assert convert_base10_to_base11_group_number(gid) == 0


def test_base11_to_base10_zero():
    assert convert_base11_group_number_to_base10(0) == 0


def test_small_group_numbers_keep_low_digits():
    assert convert_base10_to_base11_group_number(9) == 9
    assert convert_base11_group_number_to_base10(9) == 9


def test_group_number_encoding_is_monotonic():
    gids = [1, 10, 100, 1000, 10000, 100000, 1000000, 9999999]
    encoded = [convert_base10_to_base11_group_number(g) for g in gids]
    assert encoded == sorted(encoded)


def test_p3_group_number_to_cai():
    assert convert_p3_group_number_to_cai(32800000) == 1045677


def test_p3_group_number_to_cai_wraps_to_32_bits():
    result = convert_p3_group_number_to_cai(0)
    assert 0 <= result <= 0xFFFFFFFF


def test_parse_utf16_big_endian():
    text = "Hello, ţară"
    assert parse_utf16(text.encode("utf-16-be")) == text


def test_parse_utf16_drops_odd_byte():
    payload = "ok".encode("utf-16-be") + b"\x41"
    assert parse_utf16(payload) == "ok"


def test_parse_utf16_empty():
    assert parse_utf16(b"") == ""


def test_iso7_all_ones_gives_eight_chars_per_seven_bytes():
    assert parse_iso7bit_to_iso8bit(b"\xff" * 7, 8) == b"\x7f" * 8


@pytest.mark.parametrize(
    "text", [b"A", b"hello", b"hello wo", b"hellohello", b"The quick brown fox!"]
)
def test_iso7_round_trip(text):
    assert parse_iso7bit_to_iso8bit(_pack7(text), len(text)) == text


def test_iso7_result_length_and_range():
    result = parse_iso7bit_to_iso8bit(bytes(range(0, 250, 13)), 15)
    assert len(result) == 15
    assert all(b <= 0x7F for b in result)


def test_iso7_zero_size():
    assert parse_iso7bit_to_iso8bit(b"\x12\x34", 0) == b""


def test_iso7_short_payload_padded_with_zero():
    assert parse_iso7bit_to_iso8bit(b"", 3) == b"\x00\x00\x00"