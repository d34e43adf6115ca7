"""Interactive line-based shell for the anagram finder."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from errors import AnagramError, InvalidModeError
from matcher import AnagramMatcher
from models import ShellOptions
from modes import MODE_REGISTRY, mode_names
from utils import load_config, options_from_config, resolve_log_level, setup_logging

HEADER_LINE = "*" * 71
MENU = """
{rule}
[1] Check if two strings are anagrams
[2] Get anagrams of a string
[3] Add anagram match replacement mode: {modes}
[4] Remove anagram match replacement mode: {modes}
[5] Exit
{rule}
"""


class AnagramShell:
    """Menu loop that reads commands from ``stdin`` and writes results to ``stdout``."""

    def __init__(
        self,
        matcher: AnagramMatcher | None = None,
        options: ShellOptions | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.logger = logging.getLogger(__name__)
        self.matcher = matcher if matcher is not None else AnagramMatcher()
        self.options = options if options is not None else ShellOptions()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

        for name in self.options.default_modes:
            self.matcher.activate_mode(name)

        quoted = ", ".join(f"'{name}'" for name in mode_names())
        self.menu = MENU.format(rule="*" * 115, modes=quoted)
        self.commands = {
            "1": self._check_anagrams,
            "2": self._get_anagrams,
            "3": self._add_mode,
            "4": self._remove_mode,
        }

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _read(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _print_banner(self) -> None:
        self._write(HEADER_LINE)
        self._write("Welcome to the Anagram Finder!")
        if self.options.show_mode_table:
            self._write("Here are the current replacements for each mode:")
            for mode in MODE_REGISTRY.values():
                self._write(f"Mode '{mode.name}' with replacements: {mode.describe()}")

    def run(self) -> None:
        self._print_banner()
        while True:
            active = ", ".join(sorted(self.matcher.get_active_modes())) or "none"
            self._write(f"Currently active replacement modes: {active}")
            self._write("Choose an option by entering its number and hitting return:")
            self._write(self.menu)
            try:
                option = self._read().strip()
                if option == "5":
                    self._write("Exiting...")
                    return
                command = self.commands.get(option)
                if command is None:
                    raise AnagramError(f"'{option}' is not a valid option. Please enter a number from 1 to 5.")
                command()
            except EOFError:
                self.logger.info("Input closed, leaving shell")
                self._write("Exiting...")
                return
            except AnagramError as exc:
                self.logger.error("Command failed: %s", exc)
                self._write(f"Error: {exc}")
                self._write("\nBack to main menu...\n")

    def _check_anagrams(self) -> None:
        self._write("Please enter the two texts (hit enter to confirm after each text):")
        first = self._read()
        second = self._read()
        if self.matcher.are_anagrams(first, second):
            self._write(f"{first} and {second} are anagrams!")
        else:
            self._write(f"{first} and {second} are not anagrams!")
        self.logger.info("Compared %r and %r", first, second)
        self._write("Back to main menu...")

    def _get_anagrams(self) -> None:
        self._write("Please enter a string to find its anagrams in the list of known anagrams:")
        word = self._read()
        anagrams = self.matcher.get_anagrams(word)
        if anagrams:
            self._write(f"Known anagrams for {word}: {', '.join(sorted(anagrams))}")
        else:
            self._write(f"No known anagrams for {word}")

    def _add_mode(self) -> None:
        self._write(f"Please enter {' or '.join(repr(n) for n in mode_names())} to add as a replacement mode:")
        name = self._read()
        try:
            self.matcher.activate_mode(name)
        except InvalidModeError:
            self.logger.warning("Rejected mode activation: %r", name)
            raise
        self._write(f"Mode '{name.strip().upper()}' has been activated.")

    def _remove_mode(self) -> None:
        self._write(f"Please enter {' or '.join(repr(n) for n in mode_names())} to remove the replacement mode:")
        name = self._read()
        try:
            self.matcher.deactivate_mode(name)
        except InvalidModeError:
            self.logger.warning("Rejected mode deactivation: %r", name)
            raise
        self._write(f"Mode '{name.strip().upper()}' has been deactivated.")


def main() -> None:
    setup_logging()
    options = options_from_config(load_config())
    logging.getLogger().setLevel(resolve_log_level(options.log_level))
    logging.getLogger(__name__).info("Starting shell with default modes %s", options.default_modes)
    AnagramShell(options=options).run()


if __name__ == "__main__":
    main()
