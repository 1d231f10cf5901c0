from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from hangul_cyr.domain.cyrillic_tables import DEFAULT_TABLES, PhoneticTables
from hangul_cyr.domain.hangul_decompose import is_syllable
from hangul_cyr.domain.transliteration import transliterate_bytes, transliterate_syllable
from hangul_cyr.domain.utf8_codec import decode

logger = logging.getLogger(__name__)

_EMPTY_MARK = "∅"


def process_line(data: bytes, tables: PhoneticTables = DEFAULT_TABLES) -> bytes:
    """decode -> transliterate each codepoint -> concatenate."""
    return b"".join(transliterate_bytes(cp, tables) for cp in decode(data))


@dataclass
class LineStats:
    lines: int = 0
    codepoints: int = 0
    syllables: int = 0
    passthrough: int = 0


class LineProcessor:
    """Transliterate input lines and keep running counts."""

    def __init__(self, tables: PhoneticTables = DEFAULT_TABLES) -> None:
        self._tables = tables
        self._stats = LineStats()

    @property
    def tables(self) -> PhoneticTables:
        return self._tables

    @property
    def stats(self) -> LineStats:
        return self._stats

    def process(self, data: bytes) -> bytes:
        out: list[bytes] = []
        for cp in decode(data):
            if is_syllable(cp):
                self._stats.syllables += 1
            else:
                self._stats.passthrough += 1
            self._stats.codepoints += 1
            out.append(transliterate_bytes(cp, self._tables))
        self._stats.lines += 1
        return b"".join(out)

    def explain(self, data: bytes) -> list[str]:
        """Describe each syllable in the line, e.g. "한 = ㅎ+ㅏ+ㄴ → х+а+н"."""
        lines: list[str] = []
        for cp in decode(data):
            result = transliterate_syllable(cp, self._tables)
            if result is None:
                continue
            jamo = "+".join(seg.jamo for seg in result.segments)
            cyr = "+".join(seg.text or _EMPTY_MARK for seg in result.segments)
            lines.append("{} = {} → {}".format(chr(cp), jamo, cyr))
        return lines


def _iter_lines(reader: BinaryIO) -> Iterator[bytes]:
    # Only "\n" terminates a line; "\r" is payload like any other byte.
    for raw in reader:
        yield raw[:-1] if raw.endswith(b"\n") else raw


def run_stream(
    reader: BinaryIO,
    writer: BinaryIO,
    processor: LineProcessor,
    *,
    prompt: Optional[str] = None,
    explain: bool = False,
) -> LineStats:
    """Console harness: optional prompt, then one output line per input line."""
    if prompt:
        writer.write(prompt.encode("utf-8") + b"\n")
        writer.flush()

    for line in _iter_lines(reader):
        writer.write(processor.process(line) + b"\n")
        if explain:
            for note in processor.explain(line):
                writer.write(b"  " + note.encode("utf-8") + b"\n")
        writer.flush()

    stats = processor.stats
    logger.info(
        "Processed %d line(s): %d codepoint(s), %d syllable(s), %d passed through",
        stats.lines, stats.codepoints, stats.syllables, stats.passthrough,
    )
    return stats

