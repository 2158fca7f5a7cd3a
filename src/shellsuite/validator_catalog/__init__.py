"""Validator catalog exports."""

from .validator_kinds import UnknownValidatorError, ValidatorKind, ValidatorSpec, resolve_validator

__all__ = ["UnknownValidatorError", "ValidatorKind", "ValidatorSpec", "resolve_validator"]
