"""Group number conversions and text payload decoding."""

_UINT32 = 0xFFFFFFFF


def convert_p3_group_number_to_cai(group_number: int) -> int:
    """Convert an MPT1343 style group number to a CAI address (32-bit wrap)."""
    np_ = group_number // 100000
    rest = group_number - np_ * 100000
    fgn = rest // 10000
    gn = rest - fgn * 1000
    cai = (np_ - 328) * 0x8000 + (fgn - 20) * 100 + (gn - 900) + 1048577
    return cai & _UINT32


def base11(value: int) -> int:
    """Return the base-11 digits of value written as a decimal number."""
    result = 0
    place = 1
    while value >= 1:
        value, digit = divmod(value, 11)
        result += digit * place
        place *= 10
    return result & _UINT32


def _decimal_digits(value: int, count: int = 7) -> list[int]:
    digits = []
    for _ in range(count):
        value, digit = divmod(value, 10)
        digits.append(digit)
    return digits


def convert_base11_group_number_to_base10(group_number: int) -> int:
    """Turn an on-air group number back into its decimal talkgroup id."""
    if group_number < 1:
        return 0
    encoded = base11(group_number)
    if encoded < 99999:
        return encoded
    d = _decimal_digits(encoded)
    big_three = (d[6] * 121 + d[5] * 11 + d[4]) * 10000
    small_four = d[3] * 1000 + d[2] * 100 + d[1] * 10 + d[0]
    return big_three + small_four


def convert_base10_to_base11_group_number(gid: int) -> int:
    """Turn a decimal talkgroup id (1..9999999) into its on-air group number."""
    if gid > 9999999 or gid < 1:
        return 0
    d = _decimal_digits(gid)
    return (
        d[0]
        + d[1] * 11
        + d[2] * 121
        + d[3] * 1331
        + d[4] * 14641
        + d[5] * 146410
        + d[6] * 1464100
    )


def parse_utf16(msg: bytes) -> str:
    """Decode a big-endian UTF-16 payload; a trailing odd byte is ignored."""
    usable = len(msg) - len(msg) % 2
    return bytes(msg[:usable]).decode("utf-16-be", errors="replace")


def parse_iso7bit_to_iso8bit(msg: bytes, bit7_size: int) -> bytes:
    """Unpack bit7_size 7-bit characters packed MSB first into bytes.

    Bits missing from a short payload are read as zero.
    """
    if bit7_size <= 0:
        return b""
    needed_bits = bit7_size * 7
    needed_bytes = (needed_bits + 7) // 8
    data = bytes(msg[:needed_bytes]).ljust(needed_bytes, b"\x00")
    stream = int.from_bytes(data, "big") >> (needed_bytes * 8 - needed_bits)
    return bytes(
        (stream >> (7 * (bit7_size - 1 - k))) & 0x7F for k in range(bit7_size)
    )