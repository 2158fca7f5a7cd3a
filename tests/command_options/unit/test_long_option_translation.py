"""Tests for long-to-short option translation."""

from __future__ import annotations

from shellsuite.command_options import normalize_arguments


def test_normalize_arguments_translates_every_recognized_long_option() -> None:
    argv = ["--path", "/src", "--validator", "shellcheck", "--flags", " -x", "--debug"]

    assert normalize_arguments(argv) == ["-p", "/src", "-v", "shellcheck", "-f", " -x", "-x"]


def test_normalize_arguments_passes_unknown_tokens_through_unchanged() -> None:
    argv = ["--bogus", "value with spaces", "-q"]

    assert normalize_arguments(argv) == ["--bogus", "value with spaces", "-q"]


def test_normalize_arguments_keeps_values_with_whitespace_as_single_tokens() -> None:
    argv = ["--flags", " -e SC1090 -e SC2034"]

    assert normalize_arguments(argv) == ["-f", " -e SC1090 -e SC2034"]


def test_normalize_arguments_never_rewrites_an_option_value() -> None:
    argv = ["--flags", "--debug", "--path", "--validator"]

    assert normalize_arguments(argv) == ["-f", "--debug", "-p", "--validator"]


def test_normalize_arguments_handles_empty_vector() -> None:
    assert normalize_arguments([]) == []


def test_normalize_arguments_keeps_value_after_grouped_short_options() -> None:
    assert normalize_arguments(["-xf", "--debug"]) == ["-xf", "--debug"]
    assert normalize_arguments(["-xp", "--path", "--validator", "shfmt"]) == [
        "-xp",
        "--path",
        "-v",
        "shfmt",
    ]


def test_normalize_arguments_treats_attached_values_as_complete() -> None:
    argv = ["-p/tmp/dev", "--debug", "-fv", "--validator", "shellcheck"]

    assert normalize_arguments(argv) == ["-p/tmp/dev", "-x", "-fv", "-v", "shellcheck"]
