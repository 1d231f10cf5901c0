from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hangul_cyr.domain.cyrillic_tables import DEFAULT_TABLES, PhoneticTables
from hangul_cyr.domain.hangul_decompose import SyllableIndices, decompose, jamo_for
from hangul_cyr.domain.utf8_codec import encode


@dataclass(frozen=True)
class CyrillicSegment:
    text: str
    role: str  # "initial" | "vowel" | "final"
    jamo: str


@dataclass(frozen=True)
class CyrillicResult:
    text: str
    indices: SyllableIndices
    segments: list[CyrillicSegment]


def _lookup(indices: SyllableIndices, tables: PhoneticTables) -> str:
    # Order is fixed: initial, vowel, final
    return tables.initials[indices.l] + tables.vowels[indices.v] + tables.finals[indices.t]


def transliterate(cp: int, tables: PhoneticTables = DEFAULT_TABLES) -> str:
    """Return the Cyrillic approximation of a syllable, or the character itself.

    Pass-through text is the structural UTF-8 bytes decoded with
    `surrogateescape`: plain `chr(cp)` for valid scalar values, escaped bytes
    for surrogates and values above U+10FFFF, so re-encoding with
    `surrogateescape` always gives back `encode(cp)`.
    """
    indices = decompose(cp)
    if indices is not None:
        return _lookup(indices, tables)
    return encode(cp).decode("utf-8", errors="surrogateescape")


def transliterate_bytes(cp: int, tables: PhoneticTables = DEFAULT_TABLES) -> bytes:
    indices = decompose(cp)
    if indices is not None:
        return _lookup(indices, tables).encode("utf-8")
    return encode(cp)


def transliterate_syllable(cp: int, tables: PhoneticTables = DEFAULT_TABLES) -> Optional[CyrillicResult]:
    """Segment-level breakdown of one syllable; None for non-syllables."""
    indices = decompose(cp)
    if indices is None:
        return None

    lead, vowel, tail = jamo_for(indices)
    parts = (
        (tables.initials[indices.l], "initial", lead),
        (tables.vowels[indices.v], "vowel", vowel),
        (tables.finals[indices.t], "final", tail),
    )
    segments = [CyrillicSegment(text=text, role=role, jamo=jamo) for text, role, jamo in parts if jamo]

    return CyrillicResult(
        text=_lookup(indices, tables),
        indices=indices,
        segments=segments,
    )


def transliterate_text(text: str, tables: PhoneticTables = DEFAULT_TABLES) -> str:
    if not text:
        return ""
    return "".join(transliterate(ord(ch), tables) for ch in text)
