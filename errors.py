"""Exceptions raised by the anagram matcher and mode registry."""

from __future__ import annotations


class AnagramError(ValueError):
    """Base class for errors surfaced to the interactive shell."""


class InvalidInputError(AnagramError):
    """Raised when a comparison operand is missing."""

    def __init__(self, message: str = "Input strings must not be None.") -> None:
        super().__init__(message)


class InvalidModeError(AnagramError):
    """Raised for a replacement mode name that is not registered."""

    def __init__(self, value: object, valid_names: list[str]) -> None:
        self.value = value
        names = ", ".join(valid_names)
        super().__init__(f"'{value}' is not a valid replacement mode. Please enter one of: {names}.")
