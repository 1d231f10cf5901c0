"""Hangul -> Cyrillic console transliterator.

Usage:
    python main.py                      read lines from stdin until EOF
    python main.py 안녕하세요            transliterate the arguments
    python main.py --input notes.txt --explain
    python main.py --tables my_tables.yaml --no-prompt

Make sure your console is set to UTF-8.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from hangul_cyr.domain.cyrillic_tables import DEFAULT_TABLES, PhoneticTables, load_tables
from hangul_cyr.services.line_processor import LineProcessor, run_stream
from hangul_cyr.services.settings_store import HarnessSettings, SettingsStore, normalise_log_level

logger = logging.getLogger("hangul_cyr")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Transliterate Hangul syllables in UTF-8 text into Russian Cyrillic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to transliterate (default: read lines from stdin)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Read lines from this file instead of stdin",
    )
    parser.add_argument(
        "--settings",
        help="Path to settings.yaml (default: next to main.py)",
    )
    parser.add_argument(
        "--tables",
        help="YAML file overriding the phonetic tables",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print the input prompt",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print a jamo breakdown for every syllable",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _resolve_tables(args: argparse.Namespace, settings: HarnessSettings) -> PhoneticTables:
    path = args.tables or settings.tables_path
    if not path:
        return DEFAULT_TABLES
    return load_tables(path)


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = _build_parser().parse_args(argv)

    settings = SettingsStore(settings_path=args.settings).get_settings()
    level = normalise_log_level(args.log_level or settings.log_level)
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    processor = LineProcessor(_resolve_tables(args, settings))
    out = sys.stdout.buffer

    if args.text:
        line = " ".join(args.text).encode("utf-8", errors="surrogateescape")
        out.write(processor.process(line) + b"\n")
        if args.explain:
            for note in processor.explain(line):
                out.write(b"  " + note.encode("utf-8") + b"\n")
        out.flush()
        return 0

    prompt = None
    if settings.show_prompt and not args.no_prompt:
        prompt = settings.prompt

    try:
        if args.input is not None:
            with args.input.open("rb") as reader:
                run_stream(reader, out, processor, prompt=prompt, explain=args.explain)
        else:
            run_stream(sys.stdin.buffer, out, processor, prompt=prompt, explain=args.explain)
    except KeyboardInterrupt:
        return 130
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
