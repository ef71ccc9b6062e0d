from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Final

import yaml

from dero.domain.options import (
    DEFAULT_ESCAPE_END,
    DEFAULT_ESCAPE_START,
    DEFAULT_PUNCTUATION,
    DeroSettings,
)

logger = logging.getLogger(__name__)


SETTINGS_ENV_VAR: Final[str] = "DERO_SETTINGS"


def _project_root() -> Path:
    # dero/services/settings_store.py -> dero/services -> dero -> <project_root>
    return Path(__file__).resolve().parents[2]


def default_settings_path() -> Path:
    env = os.environ.get(SETTINGS_ENV_VAR, "").strip()
    if env:
        return Path(env)
    return _project_root() / "settings.yaml"


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Turn the raw mapping into DeroSettings, key by key

    Expected shape (every key optional):

        escape:
          start: "["
          end: "]"
        punctuation: ".,?!"      # or a list of single characters
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        if settings_path is None:
            self._path = default_settings_path()
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def settings(self) -> DeroSettings:
        return parse_settings(self.load())


# ---------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------

def _delimiter(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _punctuation(value: Any) -> frozenset[str]:
    if isinstance(value, str) and value:
        return frozenset(value)
    if isinstance(value, list) and value and all(isinstance(c, str) and len(c) == 1 for c in value):
        return frozenset(value)
    if value is not None:
        logger.warning("Ignoring malformed punctuation setting: %r", value)
    return DEFAULT_PUNCTUATION


def parse_settings(data: dict[str, Any]) -> DeroSettings:
    escape = data.get("escape") or {}
    if not isinstance(escape, dict):
        logger.warning("Ignoring malformed escape setting: %r", escape)
        escape = {}

    start = _delimiter(escape.get("start"), DEFAULT_ESCAPE_START)
    end = _delimiter(escape.get("end"), DEFAULT_ESCAPE_END)
    if start == end:
        # Identical delimiters could never close a span.
        logger.warning("Escape delimiters must differ (%r); using defaults", start)
        start, end = DEFAULT_ESCAPE_START, DEFAULT_ESCAPE_END

    return DeroSettings(
        escape_start=start,
        escape_end=end,
        punctuation=_punctuation(data.get("punctuation")),
    )


# ---------------------------------------------------------------------
# Cached access
# ---------------------------------------------------------------------

_CACHE: DeroSettings | None = None
_CACHE_PATH: Path | None = None
_CACHE_MTIME_NS: int | None = None


def get_settings() -> DeroSettings:
    """Return settings from the default path, re-reading only when the file changes.

    Failure is non-fatal; defaults will be used.
    """
    global _CACHE, _CACHE_PATH, _CACHE_MTIME_NS

    path = default_settings_path()
    try:
        mtime_ns: int | None = path.stat().st_mtime_ns
    except OSError:
        mtime_ns = None

    if _CACHE is not None and _CACHE_PATH == path and _CACHE_MTIME_NS == mtime_ns:
        return _CACHE

    logger.debug("Loading settings from %s", path)
    settings = SettingsStore(path).settings() if mtime_ns is not None else DeroSettings()
    _CACHE = settings
    _CACHE_PATH = path
    _CACHE_MTIME_NS = mtime_ns
    return settings


def clear_settings_cache() -> None:
    global _CACHE, _CACHE_PATH, _CACHE_MTIME_NS
    _CACHE = None
    _CACHE_PATH = None
    _CACHE_MTIME_NS = None
