"""Utility helpers for normalization, logging, and config."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from errors import InvalidModeError
from models import ShellOptions
from modes import resolve_mode

NON_ALPHA_PATTERN = re.compile(r"[^a-z]+")

_app_dir: Path | None = None


def _choose_app_dir() -> Path:
    """
    Pick a writable app directory.

    Preferred location is user home, with local workspace fallback when blocked.
    """
    preferred = Path.home() / ".anagram_finder"
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError:
        fallback = Path(".anagram_finder")
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def app_dir() -> Path:
    """Return the app directory, creating it on first use."""
    global _app_dir
    if _app_dir is None:
        _app_dir = _choose_app_dir()
    return _app_dir


def setup_logging() -> None:
    """Configure file logging once per app run."""
    logging.basicConfig(
        filename=str(app_dir() / "app.log"),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``debug`` to its number, defaulting to INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config from the user home config file. The file is never written."""
    config_path = path or app_dir() / "config.json"
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to load config from %s", config_path)
        return {}
    if not isinstance(data, dict):
        logging.error("Ignoring config %s: expected a JSON object", config_path)
        return {}
    return data


def options_from_config(config: dict[str, Any]) -> ShellOptions:
    """Build shell options from a loaded config, skipping unknown mode names."""
    default_modes: list[str] = []
    for name in config.get("default_modes", []) or []:
        try:
            mode = resolve_mode(name)
        except InvalidModeError:
            logging.warning("Ignoring unknown mode in config: %r", name)
            continue
        if mode.name not in default_modes:
            default_modes.append(mode.name)

    return ShellOptions(
        default_modes=default_modes,
        log_level=str(config.get("log_level", "INFO")),
        show_mode_table=bool(config.get("show_mode_table", True)),
    )


def normalize_token(token: str) -> str:
    """
    Normalize a token for anagram comparison.

    Steps:
    1) Lowercase.
    2) Drop everything outside ``a``-``z`` (digits, punctuation, whitespace,
       accented letters).
    """
    return NON_ALPHA_PATTERN.sub("", token.lower())


def signature(token: str) -> str:
    """Canonical sorted-signature for an anagram token."""
    return "".join(sorted(token))
