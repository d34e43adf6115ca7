"""Anagram matching engine with replacement modes."""

from __future__ import annotations

from collections import defaultdict

from errors import InvalidInputError
from models import TransformationMode
from modes import MODE_REGISTRY, apply_modes, resolve_mode
from utils import normalize_token, signature


class AnagramMatcher:
    """
    Compare strings for anagrams and remember every string compared.

    ``are_anagrams`` is not a pure predicate: both operands are recorded under
    their signature whether or not they match, so that ``get_anagrams`` can
    later report them. The signature index only grows.

    Active modes are applied in registry order, not activation order, since
    modes do not commute.

    Instances hold mutable state and do no locking; share one across threads
    only behind a lock held around each call.
    """

    def __init__(self) -> None:
        self.index: dict[str, set[str]] = defaultdict(set)
        self._active: set[str] = set()

    def __len__(self) -> int:
        return len(self.index)

    def activate_mode(self, mode: TransformationMode | str) -> None:
        self._active.add(resolve_mode(mode).name)

    def deactivate_mode(self, mode: TransformationMode | str) -> None:
        self._active.discard(resolve_mode(mode).name)

    def clear_modes(self) -> None:
        self._active.clear()

    def get_active_modes(self) -> set[str]:
        """Return a copy of the active mode names."""
        return set(self._active)

    def active_modes(self) -> list[TransformationMode]:
        """Active modes in application order."""
        return [mode for name, mode in MODE_REGISTRY.items() if name in self._active]

    def group_key(self, text: str) -> str:
        """Signature of ``text`` after active modes and normalization."""
        return signature(normalize_token(apply_modes(text, self.active_modes())))

    def are_anagrams(self, first: str | None, second: str | None) -> bool:
        """
        Check whether two strings are anagrams under the active modes.

        Raises InvalidInputError if either string is None. Both strings are
        added to the index, including when they do not match.
        """
        if first is None or second is None:
            raise InvalidInputError()

        first_key = self.group_key(first)
        second_key = self.group_key(second)

        self.index[first_key].add(first)
        self.index[second_key].add(second)

        return first_key == second_key

    def get_anagrams(self, word: str | None) -> set[str]:
        """Known anagrams of ``word``, excluding the exact string itself."""
        if word is None:
            return set()

        matches = self.index.get(self.group_key(word), set())
        return {candidate for candidate in matches if candidate != word}

    def known_words(self) -> set[str]:
        return {word for words in self.index.values() for word in words}
