"""Data models for replacement modes and shell options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TransformationMode:
    """
    A named character-rewrite rule applied before normalization.

    Each key of ``rules`` is a single character; its value replaces that
    character and may be empty or several characters long. Characters without
    a rule pass through unchanged. Matching is case-sensitive.
    """

    name: str
    rules: Mapping[str, str] = field(hash=False)
    description: str = ""

    def transform(self, text: str) -> str:
        return "".join(self.rules.get(char, char) for char in text)

    def describe(self) -> str:
        """Render the rules as ``i -> j, u -> v``."""
        return ", ".join(f"{source} -> {target}" for source, target in self.rules.items())


@dataclass(slots=True)
class ShellOptions:
    """Settings read from the config file for the interactive shell."""

    default_modes: list[str] = field(default_factory=list)
    log_level: str = "INFO"
    show_mode_table: bool = True
