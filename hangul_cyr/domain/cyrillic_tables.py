from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml

from hangul_cyr.domain.hangul_decompose import L_COUNT, T_COUNT, V_COUNT

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Defaults (used unless a valid YAML override is configured)
# ---------------------------------------------------------------------

# Initial consonants, Unicode order (ㄱ ㄲ ㄴ ㄷ ㄸ ㄹ ㅁ ㅂ ㅃ ㅅ ㅆ ㅇ ㅈ ㅉ ㅊ ㅋ ㅌ ㅍ ㅎ)
INITIALS: Final[tuple[str, ...]] = (
    "г", "кк", "н", "д", "тт", "р", "м", "б", "пп",
    "с", "сс", "", "ч", "чч", "чх", "к", "т", "п", "х",
)

# Vowels, Unicode order (ㅏ ㅐ ㅑ ㅒ ㅓ ㅔ ㅕ ㅖ ㅗ ㅘ ㅙ ㅚ ㅛ ㅜ ㅝ ㅞ ㅟ ㅠ ㅡ ㅢ ㅣ)
VOWELS: Final[tuple[str, ...]] = (
    "а", "э", "я", "е", "о", "э", "ё", "е",
    "о", "ва", "вэ", "ве", "ё",
    "у", "во", "ве", "ви", "ю",
    "ы", "и", "и",
)

# Finals, Unicode order; index 0 is "no final", ㅇ (21) is approximated as н
FINALS: Final[tuple[str, ...]] = (
    "",
    "к", "к", "кс",
    "н", "ндж", "нх",
    "т",
    "ль", "льк", "льм", "льб", "льс", "льт", "льп", "льх",
    "м",
    "п", "пс",
    "т", "т",
    "н",
    "т", "т",
    "к",
    "т",
    "п",
    "т",
)


@dataclass(frozen=True)
class PhoneticTables:
    initials: tuple[str, ...]
    vowels: tuple[str, ...]
    finals: tuple[str, ...]


DEFAULT_TABLES: Final[PhoneticTables] = PhoneticTables(
    initials=INITIALS,
    vowels=VOWELS,
    finals=FINALS,
)


# ---------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------

def validate_tables(tables: PhoneticTables) -> PhoneticTables:
    """Check table sizes and contents.

    Raises:
        ValueError: describing the first problem found.
    """
    expected = (
        ("initials", tables.initials, L_COUNT),
        ("vowels", tables.vowels, V_COUNT),
        ("finals", tables.finals, T_COUNT),
    )
    for name, values, size in expected:
        if len(values) != size:
            raise ValueError("Table %r must have %d entries, got %d" % (name, size, len(values)))
        for i, value in enumerate(values):
            if not isinstance(value, str):
                raise ValueError("Table %r entry %d is not a string: %r" % (name, i, value))

    for i, value in enumerate(tables.vowels):
        if not value:
            raise ValueError("Table 'vowels' entry %d is empty" % i)

    return tables


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

_YAML_CACHE: dict[str, PhoneticTables] = {}
_YAML_CACHE_MTIME_NS: dict[str, int] = {}


def _project_root() -> Path:
    # hangul_cyr/domain/cyrillic_tables.py -> hangul_cyr/domain -> hangul_cyr -> <project_root>
    return Path(__file__).resolve().parents[2]


def default_tables_path() -> Path:
    return _project_root() / "data" / "cyrillic_tables.yaml"


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, list):
        return tuple(value)
    return ()


def load_tables(path: str | Path | None = None) -> PhoneticTables:
    """Load phonetic tables from YAML.

    Failure is non-fatal; `DEFAULT_TABLES` is returned and a warning logged.

    Expected shape:
        initials: [..19 strings..]
        vowels:   [..21 strings..]
        finals:   [..28 strings..]
    """
    p = Path(path) if path is not None else default_tables_path()
    cache_key = str(p.resolve())

    try:
        if not p.exists():
            logger.warning("Tables file %s not found; using built-in tables", p)
            return DEFAULT_TABLES

        mtime_ns = p.stat().st_mtime_ns
        if cache_key in _YAML_CACHE and _YAML_CACHE_MTIME_NS.get(cache_key) == mtime_ns:
            return _YAML_CACHE[cache_key]

        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        parsed = data if isinstance(data, dict) else {}

        tables = validate_tables(PhoneticTables(
            initials=_as_tuple(parsed.get("initials")),
            vowels=_as_tuple(parsed.get("vowels")),
            finals=_as_tuple(parsed.get("finals")),
        ))
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.warning("Unable to load tables from %s (%s); using built-in tables", p, e)
        return DEFAULT_TABLES

    _YAML_CACHE[cache_key] = tables
    _YAML_CACHE_MTIME_NS[cache_key] = mtime_ns
    return tables
