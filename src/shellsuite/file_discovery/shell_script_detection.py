"""Selection of tracked files that look like shell scripts."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path, PurePosixPath

from shellsuite.reporting import get_logger

from .tracked_files import TrackedEntry, display_path, list_tracked_entries

SHELL_SCRIPT_SUFFIXES = frozenset({".sh", ".bash", ".dash", ".ksh"})
SHEBANG_PATTERN = re.compile(r"\b(?:sh|bash|dash|ksh)\b")

EntryLister = Callable[[Path], Iterable[TrackedEntry]]

logger = get_logger("file_discovery")


def is_shell_script_entry(entry: TrackedEntry) -> bool:
    """Regular file that is executable or carries a shell suffix."""
    if not entry.is_regular_file:
        return False
    return entry.is_executable or PurePosixPath(entry.path).suffix in SHELL_SCRIPT_SUFFIXES


def has_shell_shebang(first_line: str) -> bool:
    return first_line.startswith("#!") and SHEBANG_PATTERN.search(first_line) is not None


def iter_candidate_files(
    repository_path: Path, *, list_entries: EntryLister | None = None
) -> Iterator[str]:
    """Yield relative paths of tracked shell scripts, warning about skipped files."""
    entry_lister = list_entries or list_tracked_entries
    for entry in entry_lister(repository_path):
        if not is_shell_script_entry(entry):
            continue
        first_line = _read_first_line(repository_path / entry.path)
        if first_line is not None and has_shell_shebang(first_line):
            yield entry.path
        else:
            logger.warning("Skipping %s...", display_path(entry.path))


def _read_first_line(file_path: Path) -> str | None:
    try:
        with file_path.open("rb") as handle:
            raw_line = handle.readline()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", display_path(str(file_path)), exc)
        return None
    return raw_line.decode("utf-8", errors="replace").rstrip("\r\n")
