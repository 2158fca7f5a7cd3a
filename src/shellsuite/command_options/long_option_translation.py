"""Translation of GNU-style long options to their short equivalents."""

from __future__ import annotations

from collections.abc import Sequence

LONG_TO_SHORT_OPTIONS = {
    "--flags": "-f",
    "--path": "-p",
    "--validator": "-v",
    "--debug": "-x",
}

# Short options that consume the following token as their value.
VALUE_OPTIONS = frozenset({"-f", "-p", "-v"})


def normalize_arguments(argv: Sequence[str]) -> list[str]:
    """Rewrite recognized long options to short form and pass everything else through.

    The token right after a value-taking option is its value and is never
    rewritten, so ``-f --debug`` and ``-xf --debug`` keep ``--debug`` as the
    flags value.
    """
    normalized: list[str] = []
    expecting_value = False
    for token in argv:
        if expecting_value:
            normalized.append(token)
            expecting_value = False
            continue
        short = LONG_TO_SHORT_OPTIONS.get(token, token)
        normalized.append(short)
        expecting_value = _takes_next_token(short)
    return normalized


def _takes_next_token(token: str) -> bool:
    """Whether a short-option group such as ``-xf`` leaves its value to the next token."""
    if not token.startswith("-") or token.startswith("--"):
        return False
    for index, letter in enumerate(token[1:], start=1):
        if f"-{letter}" in VALUE_OPTIONS:
            # Anything after a value-taking letter is its attached value.
            return index == len(token) - 1
    return False
