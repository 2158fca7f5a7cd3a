"""Listing of version-controlled files via ``git ls-tree``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shellsuite.process_execution import (
    CommandCapturer,
    CommandFailedError,
    capture_command_output,
)

REGULAR_FILE_MODE = "100644"
EXECUTABLE_FILE_MODE = "100755"


class FileEnumerationError(Exception):
    """Raised when the tracked-file listing cannot be produced or parsed."""


@dataclass(frozen=True)
class TrackedEntry:
    """One record of ``git ls-tree`` output."""

    mode: str
    object_type: str
    object_id: str
    path: str

    @property
    def is_regular_file(self) -> bool:
        return self.object_type == "blob" and self.mode in (
            REGULAR_FILE_MODE,
            EXECUTABLE_FILE_MODE,
        )

    @property
    def is_executable(self) -> bool:
        return self.mode == EXECUTABLE_FILE_MODE


def list_tracked_entries(
    repository_path: Path, *, capture: CommandCapturer | None = None
) -> list[TrackedEntry]:
    """List every file tracked at HEAD under ``repository_path``, in git order.

    Paths are relative to ``repository_path``.
    """
    command_capturer = capture or capture_command_output
    command = ("git", "-C", str(repository_path), "ls-tree", "-r", "-z", "HEAD")
    try:
        output = command_capturer(command)
    except CommandFailedError as exc:
        raise FileEnumerationError(
            f"Failed to list tracked files in {repository_path}: {exc}"
        ) from exc
    return parse_ls_tree_output(output)


def display_path(path: str) -> str:
    """Render a tracked path for log output, escaping bytes that are not UTF-8."""
    raw = path.encode("utf-8", errors="surrogateescape")
    return raw.decode("utf-8", errors="backslashreplace")


def parse_ls_tree_output(output: bytes) -> list[TrackedEntry]:
    """Parse NUL-terminated ``<mode> <type> <object>\\t<path>`` records."""
    entries: list[TrackedEntry] = []
    for raw_record in output.split(b"\0"):
        if not raw_record:
            continue
        record = raw_record.decode("utf-8", errors="surrogateescape")
        header, separator, path = record.partition("\t")
        fields = header.split()
        if not separator or len(fields) != 3:
            raise FileEnumerationError(f"Unexpected ls-tree record: {record!r}")
        mode, object_type, object_id = fields
        entries.append(
            TrackedEntry(mode=mode, object_type=object_type, object_id=object_id, path=path)
        )
    return entries
