"""
config.py - Runtime settings for skriv

Settings come from ``config/skriv.yaml`` (optional) and are then overridden
by environment variables, which may be supplied through a ``.env`` file.

    SKRIV_LANGUAGE            active UI language (nb, nn, en)
    SKRIV_REPEAT_THRESHOLD    a stem is overused when its count exceeds this
    SKRIV_LONG_SENTENCE       words for a "long" sentence
    SKRIV_VERY_LONG_SENTENCE  words for a "very long" sentence
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .paths import CONFIG_DIR
from .logging_helper import get_logger

log = get_logger()

CONFIG_FILE = CONFIG_DIR / "skriv.yaml"

_INT_OVERRIDES = {
    "SKRIV_REPEAT_THRESHOLD": "repeat_threshold",
    "SKRIV_LONG_SENTENCE": "long_sentence",
    "SKRIV_VERY_LONG_SENTENCE": "very_long_sentence",
}


@dataclass(frozen=True)
class Settings:
    language: str = "nb"
    # count > 2 means "three or more", the radar's default
    repeat_threshold: int = 2
    medium_sentence: int = 10
    long_sentence: int = 20
    very_long_sentence: int = 30


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8-sig') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning(f"Ignoring {path}: expected a mapping, got {type(data).__name__}")
        return {}
    return data


def _as_int(value: Any) -> int:
    """int() for config values; booleans and fractional numbers are rejected."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(value)
    return int(value)


def _checked(data: Dict[str, Any], path: Path) -> Dict[str, Any]:
    """Keep the known keys whose values have the right type."""
    checked: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in Settings.__dataclass_fields__:
            continue
        if key == "language":
            if isinstance(value, str) and value.strip():
                checked[key] = value.strip()
            else:
                log.warning(f"Ignoring {key}={value!r} in {path}: not a language code")
            continue
        try:
            checked[key] = _as_int(value)
        except (TypeError, ValueError):
            log.warning(f"Ignoring {key}={value!r} in {path}: not an integer")
    return checked


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from YAML (if present) and the environment."""
    load_dotenv()

    settings = Settings()
    path = Path(path) if path else CONFIG_FILE
    if path.exists():
        data = _read_yaml(path)
        unknown = sorted(str(k) for k in data if k not in Settings.__dataclass_fields__)
        if unknown:
            log.warning(f"Unknown settings in {path}: {', '.join(unknown)}")
        settings = replace(settings, **_checked(data, path))

    language = os.getenv("SKRIV_LANGUAGE")
    if language:
        settings = replace(settings, language=language.strip())

    for env_name, field_name in _INT_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        try:
            settings = replace(settings, **{field_name: int(raw)})
        except ValueError:
            log.warning(f"Ignoring {env_name}={raw!r}: not an integer")

    return settings
