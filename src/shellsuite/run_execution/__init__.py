"""Run execution domain exports."""

from .lint_run_use_case import ValidationFailure, dispatch_candidates, execute_lint_run
from .preflight_check import PreflightError, run_self_check
from .run_contracts import LintOutcome

__all__ = [
    "LintOutcome",
    "PreflightError",
    "ValidationFailure",
    "dispatch_candidates",
    "execute_lint_run",
    "run_self_check",
]
