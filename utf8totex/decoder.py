"""Strict UTF-8 decoding, one codepoint at a time."""

from __future__ import annotations


class DecodeError(ValueError):
    """Raised when the bytes at a position are not valid UTF-8.

    Args:
        position: Byte offset of the offending sequence.
        reason: Short description of the problem.
    """

    def __init__(self, position: int, reason: str):
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at byte {position}")


# Lowest codepoint each sequence length may encode; anything below is overlong.
_MIN_BY_LENGTH = {2: 0x80, 3: 0x800, 4: 0x10000}


def decode_char(data: bytes, pos: int) -> tuple[int, int]:
    """Decode the codepoint starting at `pos`.

    A NUL byte terminates input just like the end of the buffer.

    Args:
        data: UTF-8 encoded input.
        pos: Zero-based byte offset to decode from.

    Returns:
        tuple[int, int]: The codepoint and the number of bytes it occupies
            (1-4), or ``(0, 0)`` at end of input.

    Raises:
        DecodeError: If the sequence is truncated, overlong, encodes a
            surrogate, exceeds U+10FFFF, or starts with an invalid byte.

    Examples:
        decode_char(b"caf\\xc3\\xa9", 3)  # (0xE9, 2)
        decode_char(b"abc", 3)  # (0, 0)
    """
    if pos >= len(data):
        return 0, 0

    lead = data[pos]
    if lead == 0:
        return 0, 0
    if lead < 0x80:
        return lead, 1

    if 0xC2 <= lead <= 0xDF:
        length, codepoint = 2, lead & 0x1F
    elif 0xE0 <= lead <= 0xEF:
        length, codepoint = 3, lead & 0x0F
    elif 0xF0 <= lead <= 0xF4:
        length, codepoint = 4, lead & 0x07
    elif 0x80 <= lead <= 0xBF:
        raise DecodeError(pos, "Unexpected continuation byte")
    else:
        raise DecodeError(pos, f"Invalid lead byte 0x{lead:02X}")

    if pos + length > len(data):
        raise DecodeError(pos, "Truncated UTF-8 sequence")

    for offset in range(1, length):
        byte = data[pos + offset]
        if byte & 0xC0 != 0x80:
            raise DecodeError(pos, "Invalid continuation byte")
        codepoint = (codepoint << 6) | (byte & 0x3F)

    if codepoint < _MIN_BY_LENGTH[length]:
        raise DecodeError(pos, "Overlong UTF-8 sequence")
    if 0xD800 <= codepoint <= 0xDFFF:
        raise DecodeError(pos, "Encoded surrogate")
    if codepoint > 0x10FFFF:
        raise DecodeError(pos, "Codepoint beyond U+10FFFF")

    return codepoint, length
