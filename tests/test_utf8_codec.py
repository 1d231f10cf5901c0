"""
Tests for the permissive UTF-8 codec.

The recovery policies are deliberate and asserted explicitly here:
stray bytes are dropped, truncated tails stop decoding, and a bad
continuation byte becomes U+FFFD while the whole claimed span is skipped.
"""

import pytest

from hangul_cyr.domain.utf8_codec import REPLACEMENT_CODEPOINT, decode, encode, iter_decode

pytestmark = pytest.mark.codec


def test_decode_matches_python_for_valid_text():
    text = "Hi, 안녕하세요! Привет 😀"
    assert decode(text.encode("utf-8")) == [ord(ch) for ch in text]


def test_decode_accepts_bytearray_and_memoryview():
    raw = "가나".encode("utf-8")
    assert decode(bytearray(raw)) == [0xAC00, 0xB098]
    assert decode(memoryview(raw)) == [0xAC00, 0xB098]


def test_decode_empty():
    assert decode(b"") == []


def test_iter_decode_is_lazy_and_single_pass():
    it = iter_decode(b"AB")
    assert next(it) == 0x41
    assert list(it) == [0x42]
    assert list(it) == []


@pytest.mark.parametrize("cp", range(0x80))
def test_ascii_round_trip(cp):
    assert encode(cp) == bytes([cp])
    assert decode(encode(cp)) == [cp]


def test_bmp_round_trip_matches_python_encoder():
    for cp in range(0x80, 0x10000):
        if 0xD800 <= cp <= 0xDFFF:
            continue
        raw = encode(cp)
        assert raw == chr(cp).encode("utf-8")
        assert decode(raw) == [cp]


def test_supplementary_round_trip():
    for cp in list(range(0x10000, 0x110000, 0x3F1)) + [0x10000, 0x1F600, 0x10FFFF]:
        raw = encode(cp)
        assert len(raw) == 4
        assert raw == chr(cp).encode("utf-8")
        assert decode(raw) == [cp]


@pytest.mark.parametrize("cp,size", [
    (0x7F, 1), (0x80, 2), (0x7FF, 2), (0x800, 3), (0xFFFF, 3), (0x10000, 4), (0x10FFFF, 4),
])
def test_encode_length_boundaries(cp, size):
    assert len(encode(cp)) == size


def test_encode_above_unicode_max_is_structural():
    assert encode(0x110000) == b"\xf4\x90\x80\x80"
    assert decode(encode(0x110000)) == [0x110000]
    assert len(encode(0xFFFFFFFF)) == 4


def test_encode_surrogate_is_not_rejected():
    assert encode(0xD800) == b"\xed\xa0\x80"
    assert decode(b"\xed\xa0\x80") == [0xD800]


def test_encode_negative_raises():
    with pytest.raises(ValueError):
        encode(-1)


# -----------------------------------------------------------------------------
# Malformed input
# -----------------------------------------------------------------------------

def test_truncated_sequence_yields_nothing():
    assert decode(b"\xe0") == []


def test_truncated_sequence_keeps_earlier_codepoints():
    assert decode(b"A\xea\xb0") == [0x41]


def test_truncation_stops_the_whole_buffer():
    # The lead claims three bytes but only two remain, so "B" is never reached.
    assert decode(b"\xe0B") == []


def test_bad_continuation_emits_replacement():
    assert decode(b"\xc2\x20") == [REPLACEMENT_CODEPOINT]


def test_bad_continuation_skips_claimed_span():
    # 0x20 belongs to the failed sequence; decoding resumes at "A".
    assert decode(b"\xc2\x20A") == [REPLACEMENT_CODEPOINT, 0x41]
    # 0xA1 is a valid continuation but still inside the claimed span.
    assert decode(b"\xe2\x28\xa1X") == [REPLACEMENT_CODEPOINT, 0x58]


def test_stray_continuation_byte_is_skipped():
    assert decode(b"\x80") == []
    assert decode(b"\x80A") == [0x41]


@pytest.mark.parametrize("lead", [0xF8, 0xFC, 0xFE, 0xFF])
def test_invalid_leading_bytes_are_skipped(lead):
    assert decode(bytes([lead]) + b"A") == [0x41]


def test_overlong_forms_are_accepted():
    assert decode(b"\xc0\x80") == [0]
    assert decode(b"\xc1\xbf") == [0x7F]
