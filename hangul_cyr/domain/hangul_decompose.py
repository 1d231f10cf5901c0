from __future__ import annotations

"""Hangul syllable decomposition helpers (domain layer).

It centralises:
- The Unicode Hangul Syllables block constants
- Compatibility jamo ordering (used only for display)
- Pure functions mapping a syllable codepoint to (L, V, T) indices and back

Primary API:
- decompose(cp)
"""

from dataclasses import dataclass
from typing import Final


# -----------------------------------------------------------------------------
# Unicode Hangul Syllables algorithm constants
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00
L_COUNT: Final[int] = 19
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT
S_COUNT: Final[int] = L_COUNT * N_COUNT


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


@dataclass(frozen=True)
class SyllableIndices:
    l: int  # initial, 0..18
    v: int  # vowel, 0..20
    t: int  # final, 0..27 (0 = none)


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def is_syllable(cp: int) -> bool:
    return S_BASE <= cp < S_BASE + S_COUNT


def decompose(cp: int) -> SyllableIndices | None:
    """Split a precomposed syllable codepoint into its (L, V, T) indices.

    Returns:
        The indices, or None if `cp` is outside [0xAC00, 0xD7A3].

    Notes:
        SIndex = cp - SBase
        L = SIndex // (VCount * TCount)
        V = (SIndex % (VCount * TCount)) // TCount
        T = SIndex % TCount
    """
    if not is_syllable(cp):
        return None

    s_index = cp - S_BASE
    return SyllableIndices(
        l=s_index // N_COUNT,
        v=(s_index % N_COUNT) // T_COUNT,
        t=s_index % T_COUNT,
    )


def compose(indices: SyllableIndices) -> int:
    """Inverse of `decompose()`.

    Raises:
        ValueError: if any index is outside its table bounds.
    """
    l, v, t = indices.l, indices.v, indices.t
    if not (0 <= l < L_COUNT and 0 <= v < V_COUNT and 0 <= t < T_COUNT):
        raise ValueError("Invalid syllable indices: l=%r v=%r t=%r" % (l, v, t))
    return S_BASE + (l * V_COUNT + v) * T_COUNT + t


def jamo_for(indices: SyllableIndices) -> tuple[str, str, str]:
    """Return the compatibility jamo (lead, vowel, tail) for the indices."""
    return CHOSEONG[indices.l], JUNGSEONG[indices.v], JONGSEONG[indices.t]
