"""Tracked shell-script discovery exports."""

from .shell_script_detection import (
    SHEBANG_PATTERN,
    SHELL_SCRIPT_SUFFIXES,
    has_shell_shebang,
    is_shell_script_entry,
    iter_candidate_files,
)
from .tracked_files import (
    FileEnumerationError,
    TrackedEntry,
    display_path,
    list_tracked_entries,
    parse_ls_tree_output,
)

__all__ = [
    "SHEBANG_PATTERN",
    "SHELL_SCRIPT_SUFFIXES",
    "has_shell_shebang",
    "is_shell_script_entry",
    "iter_candidate_files",
    "FileEnumerationError",
    "TrackedEntry",
    "display_path",
    "list_tracked_entries",
    "parse_ls_tree_output",
]
