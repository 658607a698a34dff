"""Turn keymapdoc exceptions raised by CLI commands into exit codes."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from keymapdoc.core.errors import ConfigError, KeymapDocError, KeymapError
from keymapdoc.core.structlog_logger import get_struct_logger


__all__ = ["handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)

_ERROR_EVENTS: dict[type[KeymapDocError], str] = {
    KeymapError: "keymap_error",
    ConfigError: "configuration_error",
}


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a command so a failure logs one event and exits with status 1.

    Unreadable keymaps and bad configuration are expected failures and are
    logged without a traceback; anything else is logged as
    ``unexpected_error``.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except KeymapDocError as e:
            event = _ERROR_EVENTS.get(type(e), "keymapdoc_error")
            logger.error(event, error=e.message, **e.context)
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except Exception as e:
            logger.error("unexpected_error", error=str(e))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print the current traceback to stderr when debug logging is on (-vv)."""
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
