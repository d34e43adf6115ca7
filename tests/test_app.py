import io

from app import AnagramShell
from matcher import AnagramMatcher
from models import ShellOptions


def run_shell(lines: list[str], matcher: AnagramMatcher | None = None, options: ShellOptions | None = None) -> str:
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    AnagramShell(matcher=matcher, options=options, stdin=stdin, stdout=stdout).run()
    return stdout.getvalue()


def test_shell_checks_and_lists_anagrams() -> None:
    output = run_shell(["1", "Evil", "Vile", "1", "Evil", "life", "2", "Evil", "5"])
    assert "Evil and Vile are anagrams!" in output
    assert "Evil and life are not anagrams!" in output
    assert "Known anagrams for Evil: Vile" in output
    assert output.rstrip().endswith("Exiting...")


def test_shell_reports_no_anagrams() -> None:
    output = run_shell(["2", "nothing", "5"])
    assert "No known anagrams for nothing" in output


def test_shell_toggles_modes() -> None:
    matcher = AnagramMatcher()
    output = run_shell(["3", "latin", "1", "wuhuw", "vvvhvvv", "5"], matcher=matcher)
    assert "Mode 'LATIN' has been activated." in output
    assert "Currently active replacement modes: LATIN" in output
    assert "wuhuw and vvvhvvv are anagrams!" in output
    assert matcher.get_active_modes() == {"LATIN"}
    assert matcher.get_anagrams("wuhuw") == {"vvvhvvv"}

    output = run_shell(["4", "LATIN", "5"], matcher=matcher)
    assert "Mode 'LATIN' has been deactivated." in output
    assert matcher.get_active_modes() == set()


def test_shell_uses_empty_matcher_it_is_given() -> None:
    matcher = AnagramMatcher()
    shell = AnagramShell(matcher=matcher, stdin=io.StringIO("1\nevil\nvile\n5\n"), stdout=io.StringIO())
    assert shell.matcher is matcher
    shell.run()
    assert matcher.get_anagrams("evil") == {"vile"}


def test_shell_recovers_from_errors() -> None:
    output = run_shell(["9", "3", "gothic", "1", "a", "a", "5"])
    assert "Error: '9' is not a valid option. Please enter a number from 1 to 5." in output
    assert "Error: 'gothic' is not a valid replacement mode." in output
    assert "a and a are anagrams!" in output


def test_shell_exits_on_end_of_input() -> None:
    output = run_shell(["1", "only one line"])
    assert output.rstrip().endswith("Exiting...")


def test_shell_applies_default_modes_and_banner() -> None:
    matcher = AnagramMatcher()
    output = run_shell(["5"], matcher=matcher, options=ShellOptions(default_modes=["MODERN"]))
    assert matcher.get_active_modes() == {"MODERN"}
    assert "Mode 'LATIN' with replacements: i -> j, u -> v, w -> vv" in output
    assert "Currently active replacement modes: MODERN" in output

    quiet = run_shell(["5"], options=ShellOptions(show_mode_table=False))
    assert "with replacements" not in quiet
