from __future__ import annotations

"""Permissive UTF-8 codec (domain layer).

Decoding never raises. Malformed input is absorbed locally:
  - a byte that cannot start a sequence is skipped
  - a sequence cut off by the end of the buffer stops decoding
  - a sequence with a bad continuation byte becomes U+FFFD

Encoding is purely structural: any non-negative integer produces bytes,
including values above U+10FFFF and surrogates.
"""

import logging
from typing import Final, Iterator, Union

logger = logging.getLogger(__name__)

REPLACEMENT_CODEPOINT: Final[int] = 0xFFFD

BytesLike = Union[bytes, bytearray, memoryview]


# -----------------------------------------------------------------------------
# Decoding
# -----------------------------------------------------------------------------

def _leading(byte: int) -> tuple[int, int] | None:
    """Return (payload, sequence length) for a leading byte, or None."""
    if byte & 0x80 == 0:
        return byte, 1
    if byte & 0xE0 == 0xC0:
        return byte & 0x1F, 2
    if byte & 0xF0 == 0xE0:
        return byte & 0x0F, 3
    if byte & 0xF8 == 0xF0:
        return byte & 0x07, 4
    return None


def iter_decode(data: BytesLike) -> Iterator[int]:
    """Yield codepoints from a UTF-8 byte buffer, left to right.

    The iterator is single-pass; call again with the same buffer to restart.
    """
    buf = bytes(data)
    size = len(buf)
    i = 0
    while i < size:
        lead = _leading(buf[i])
        if lead is None:
            logger.debug("Skipping invalid leading byte 0x%02X at offset %d", buf[i], i)
            i += 1
            continue

        cp, length = lead
        if i + length > size:
            logger.debug("Truncated %d-byte sequence at offset %d; stopping", length, i)
            return

        for j in range(i + 1, i + length):
            byte = buf[j]
            if byte & 0xC0 != 0x80:
                logger.debug("Bad continuation byte 0x%02X at offset %d", byte, j)
                cp = REPLACEMENT_CODEPOINT
                break
            cp = (cp << 6) | (byte & 0x3F)

        yield cp
        i += length


def decode(data: BytesLike) -> list[int]:
    return list(iter_decode(data))


# -----------------------------------------------------------------------------
# Encoding
# -----------------------------------------------------------------------------

def encode(cp: int) -> bytes:
    """Encode one codepoint into 1-4 bytes chosen by magnitude.

    Raises:
        ValueError: if `cp` is negative.
    """
    if cp < 0:
        raise ValueError("Codepoint must be non-negative, got %r" % (cp,))

    if cp <= 0x7F:
        return bytes((cp,))
    if cp <= 0x7FF:
        return bytes((
            0xC0 | ((cp >> 6) & 0x1F),
            0x80 | (cp & 0x3F),
        ))
    if cp <= 0xFFFF:
        return bytes((
            0xE0 | ((cp >> 12) & 0x0F),
            0x80 | ((cp >> 6) & 0x3F),
            0x80 | (cp & 0x3F),
        ))
    return bytes((
        0xF0 | ((cp >> 18) & 0x07),
        0x80 | ((cp >> 12) & 0x3F),
        0x80 | ((cp >> 6) & 0x3F),
        0x80 | (cp & 0x3F),
    ))
