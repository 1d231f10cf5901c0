from __future__ import annotations

import pytest

from hangul_cyr.domain.hangul_decompose import (
    L_COUNT,
    S_BASE,
    S_COUNT,
    T_COUNT,
    V_COUNT,
    SyllableIndices,
    compose,
    decompose,
    is_syllable,
    jamo_for,
)

pytestmark = pytest.mark.syllables


def test_block_constants() -> None:
    assert S_COUNT == 11172
    assert S_BASE + S_COUNT - 1 == 0xD7A3


def test_every_syllable_decomposes_within_bounds() -> None:
    seen = set()
    for cp in range(0xAC00, 0xD7A4):
        idx = decompose(cp)
        assert idx is not None
        assert 0 <= idx.l < L_COUNT
        assert 0 <= idx.v < V_COUNT
        assert 0 <= idx.t < T_COUNT
        assert compose(idx) == cp
        seen.add(idx)
    assert len(seen) == S_COUNT


@pytest.mark.parametrize("cp", [0, 0x41, 0x3131, 0x1100, 0xABFF, 0xD7A4, 0xFFFD, 0x1F600])
def test_outside_block_is_not_applicable(cp: int) -> None:
    assert is_syllable(cp) is False
    assert decompose(cp) is None


@pytest.mark.parametrize("syllable,expected", [
    ("가", SyllableIndices(0, 0, 0)),
    ("각", SyllableIndices(0, 0, 1)),
    ("한", SyllableIndices(18, 0, 4)),
    ("국", SyllableIndices(0, 13, 1)),
    ("힣", SyllableIndices(18, 20, 27)),
])
def test_known_decompositions(syllable: str, expected: SyllableIndices) -> None:
    assert decompose(ord(syllable)) == expected


def test_compose_rejects_out_of_range_indices() -> None:
    with pytest.raises(ValueError):
        compose(SyllableIndices(19, 0, 0))
    with pytest.raises(ValueError):
        compose(SyllableIndices(0, 0, -1))


def test_jamo_for() -> None:
    assert jamo_for(SyllableIndices(18, 0, 4)) == ("ㅎ", "ㅏ", "ㄴ")
    assert jamo_for(SyllableIndices(11, 0, 0)) == ("ㅇ", "ㅏ", "")
