"""Main CLI application for keymapdoc."""

import logging
import sys
from typing import Annotated

import typer

from keymapdoc import __version__
from keymapdoc.cli.commands import register_all_commands
from keymapdoc.cli.decorators.error_handling import print_stack_trace_if_verbose
from keymapdoc.config import KeymapDocSettings, load_settings
from keymapdoc.core.errors import ConfigError
from keymapdoc.core.logging import setup_logging, setup_logging_from_settings
from keymapdoc.core.structlog_logger import get_struct_logger


__all__ = ["app", "main", "__version__"]


logger = get_struct_logger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(self, settings: KeymapDocSettings, verbose: int = 0) -> None:
        self.settings = settings
        self.verbose = verbose


app = typer.Typer(
    name="keymapdoc",
    help=f"""keymapdoc v{__version__}

Extract the layers of a ZMK keymap and translate every binding into a
short label laid out on a 3x10 grid plus thumb cluster.""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """keymapdoc command line."""
    if version:
        print(f"keymapdoc v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    # Until settings are known, only warnings and errors reach stderr
    setup_logging()

    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        logger.error("configuration_error", error=str(e))
        raise typer.Exit(1) from e

    if log_file:
        settings = settings.model_copy(update={"log_file": log_file})

    if verbose:
        level_name = "INFO" if verbose == 1 else "DEBUG"
        setup_logging(
            json_logs=settings.json_logs,
            log_level_name=level_name,
            log_file=str(settings.log_file) if settings.log_file else None,
        )
    else:
        setup_logging_from_settings(settings)

    ctx.obj = AppContext(settings=settings, verbose=verbose)


register_all_commands(app)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        exit_code = 0
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.error("unexpected_error", error=str(e), exc_info=True)
        print_stack_trace_if_verbose()
        exit_code = 1

    logging.shutdown()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
