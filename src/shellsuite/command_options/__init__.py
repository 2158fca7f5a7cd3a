"""Command-line option domain exports."""

from .long_option_translation import LONG_TO_SHORT_OPTIONS, VALUE_OPTIONS, normalize_arguments
from .run_settings import (
    FLAGS_DELIMITER,
    OptionUsageError,
    RunConfig,
    build_run_config,
    require_path_defined_first,
    validate_flags,
)

__all__ = [
    "LONG_TO_SHORT_OPTIONS",
    "VALUE_OPTIONS",
    "normalize_arguments",
    "FLAGS_DELIMITER",
    "OptionUsageError",
    "RunConfig",
    "build_run_config",
    "require_path_defined_first",
    "validate_flags",
]
