from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PROMPT: Final[str] = "Enter UTF-8 text:"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class HarnessSettings:
    prompt: str = DEFAULT_PROMPT
    show_prompt: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    tables_path: Optional[str] = None


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the line harness settings

    Notes:
      - A missing or malformed file is treated as empty (all defaults).
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # Default to project root next to main.py.
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings from %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except OSError as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to persist settings to %s: %s", self._path, e)

    def get_settings(self) -> HarnessSettings:
        s = self.load()

        prompt = s.get("prompt", DEFAULT_PROMPT)
        if not isinstance(prompt, str):
            prompt = DEFAULT_PROMPT

        show_prompt = s.get("show_prompt", True)
        if not isinstance(show_prompt, bool):
            show_prompt = True

        tables_path = s.get("tables_path")
        if not isinstance(tables_path, str) or not tables_path.strip():
            tables_path = None

        return HarnessSettings(
            prompt=prompt,
            show_prompt=show_prompt,
            log_level=normalise_log_level(s.get("log_level")),
            tables_path=tables_path,
        )

    def _set(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)

    def set_prompt(self, value: str) -> None:
        self._set("prompt", str(value))

    def set_show_prompt(self, value: bool) -> None:
        self._set("show_prompt", bool(value))

    def set_log_level(self, value: str) -> None:
        self._set("log_level", normalise_log_level(value))

    def set_tables_path(self, value: str | None) -> None:
        s = self.load()
        if value:
            s["tables_path"] = str(value)
        else:
            s.pop("tables_path", None)
        self.save(s)


def normalise_log_level(value: Any) -> str:
    if isinstance(value, str):
        level = value.strip().upper()
        if level in _LOG_LEVELS:
            return level
    return DEFAULT_LOG_LEVEL
