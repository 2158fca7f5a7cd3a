"""Command line interface entry point."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from shellsuite.command_options import (
    OptionUsageError,
    build_run_config,
    normalize_arguments,
    require_path_defined_first,
    validate_flags,
)
from shellsuite.configuration import RuntimeSettings, load_runtime_settings
from shellsuite.file_discovery import FileEnumerationError
from shellsuite.platform_support import PlatformError, ensure_supported_architecture
from shellsuite.reporting import (
    configure_reporting,
    enable_tracing,
    get_logger,
    prepare_log_file,
    report_fatal,
)
from shellsuite.run_execution import PreflightError, ValidationFailure, execute_lint_run
from shellsuite.validator_catalog import (
    UnknownValidatorError,
    ValidatorKind,
    ValidatorSpec,
    resolve_validator,
)

FATAL_ERRORS = (
    OptionUsageError,
    UnknownValidatorError,
    PlatformError,
    PreflightError,
    FileEnumerationError,
    ValidationFailure,
)

logger = get_logger("cli")


def _validate_flags_option(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    if value is None:
        return None
    return validate_flags(value)


@dataclass(frozen=True)
class CliState:
    """Process-level state handed to option callbacks through the click context."""

    settings: RuntimeSettings
    log_file_owned: bool = True


def _enable_tracing_option(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    """Switch the reporter to DEBUG as soon as -x is seen, before other options are checked."""
    if not value:
        return False
    enable_tracing()
    state = ctx.find_object(CliState)
    if state is not None and not state.log_file_owned:
        logger.debug("Could not hand %s back to the sudo user.", state.settings.log_file)
    return True


def _resolve_validator_option(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> ValidatorSpec | None:
    """Resolve the validator against the path given earlier on the command line."""
    if value is None:
        return None
    path = require_path_defined_first(ctx.params.get("path"))
    state = ctx.find_object(CliState)
    settings = state.settings if state is not None else load_runtime_settings()
    return resolve_validator(value, path, container_runtime=settings.container_runtime)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="shellsuite")
@click.option(
    "-p",
    "--path",
    "path",
    type=click.Path(exists=True, file_okay=False, resolve_path=True, path_type=Path),
    help="Directory of the git checkout to lint.",
)
@click.option(
    "-v",
    "--validator",
    "validator",
    metavar="[" + "|".join(kind.value for kind in ValidatorKind) + "]",
    callback=_resolve_validator_option,
    help="Validator to run; must come after --path.",
)
@click.option(
    "-f",
    "--flags",
    "flags",
    callback=_validate_flags_option,
    help="Flags passed to the validator; must start with a space.",
)
@click.option(
    "-x",
    "--debug",
    "debug",
    is_flag=True,
    default=False,
    is_eager=True,
    callback=_enable_tracing_option,
    help="Trace every external command before it runs.",
)
def cli(
    path: Path | None, validator: ValidatorSpec | None, flags: str | None, debug: bool
) -> None:
    """Lint every shell script tracked by git under a directory."""
    config = build_run_config(path=path, validator=validator, flags=flags, debug=debug)
    if config.debug:
        logger.debug("Run configuration: %s", config)
    execute_lint_run(config)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    settings = load_runtime_settings()
    try:
        log_file_owned = prepare_log_file(settings.log_file)
        configure_reporting(settings.log_file)
    except OSError as exc:
        click.echo(f"Cannot open log file {settings.log_file}: {exc}", err=True)
        return 1

    try:
        ensure_supported_architecture()
        cli.main(
            args=normalize_arguments(argv),
            prog_name="shellsuite",
            standalone_mode=False,
            obj=CliState(settings=settings, log_file_owned=log_file_owned),
        )
    except FATAL_ERRORS as exc:
        report_fatal(str(exc))
        return 1
    except click.ClickException as exc:
        exc.show()
        report_fatal(exc.format_message())
        return 1
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
