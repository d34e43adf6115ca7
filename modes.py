"""Registry of built-in replacement modes."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from errors import InvalidModeError
from models import TransformationMode

LATIN = TransformationMode(
    name="LATIN",
    rules=MappingProxyType({"i": "j", "u": "v", "w": "vv"}),
    description="Classical Latin spelling: i/j, u/v and w/vv are interchangeable.",
)

MODERN = TransformationMode(
    name="MODERN",
    rules=MappingProxyType({"v": "w", "s": "z", "c": "k"}),
    description="Modernised spelling: v/w, s/z and c/k are interchangeable.",
)

# Insertion order is the application order when several modes are active.
MODE_REGISTRY: dict[str, TransformationMode] = {mode.name: mode for mode in (LATIN, MODERN)}


def mode_names() -> list[str]:
    return list(MODE_REGISTRY)


def resolve_mode(mode: TransformationMode | str) -> TransformationMode:
    """
    Look up a registered mode by instance or by name.

    Names are matched case-insensitively after trimming whitespace.
    """
    if isinstance(mode, TransformationMode):
        registered = MODE_REGISTRY.get(mode.name)
        if registered is None or registered != mode:
            raise InvalidModeError(mode.name, mode_names())
        return registered
    if not isinstance(mode, str):
        raise InvalidModeError(mode, mode_names())

    registered = MODE_REGISTRY.get(mode.strip().upper())
    if registered is None:
        raise InvalidModeError(mode, mode_names())
    return registered


def apply_modes(text: str, modes: Iterable[TransformationMode]) -> str:
    """Apply each mode in turn to ``text``."""
    out = text
    for mode in modes:
        out = mode.transform(out)
    return out
