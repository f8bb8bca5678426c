"""
Commands of the common-api CLI.

Each module registers its commands on the main group through a
``register_*_commands(cli)`` function. The shared context, option
decorators and output helpers live here.
"""

import sys
from typing import Optional

import click

from .. import __prog_name__
from ..api import CommonAPIClient
from ..config import ConfigManager
from ..loading import Loading, LoadingKind
from ..utils import (
    OutputFormat,
    print_csv,
    print_error,
    print_info,
    print_json,
    print_success,
    print_table,
    print_warning,
)


class CommonApiContext:
    """CLI context object for sharing state between commands."""

    def __init__(self):
        self.config_manager: ConfigManager = None  # type: ignore[assignment]
        self.verbose: bool = False
        self.quiet: bool = False
        self.output_format: OutputFormat = OutputFormat.TABLE

    def create_client(self, quiet: bool = False) -> CommonAPIClient:
        """Create a client whose loading indicator writes to stderr."""
        def show(kind: LoadingKind, message: Optional[str]) -> None:
            click.echo(message or kind.default_message, err=True)

        loading = Loading(None if quiet or self.quiet else show)
        return CommonAPIClient(self.config_manager.get(), loading)


pass_context = click.make_pass_decorator(CommonApiContext, ensure=True)


def common_options(f):
    """Common options for all commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice(['table', 'json', 'csv']),
        default='table',
        help='Output format'
    )(f)
    return f


def require_config(f):
    """Decorator to require a configured server."""
    @click.pass_context
    def wrapper(click_ctx, *args, **kwargs):
        ctx = click_ctx.ensure_object(CommonApiContext)
        config = ctx.config_manager.get()

        if not config.is_configured():
            print_error(
                "Server URL not configured.",
                f"Run '{__prog_name__} configure --server URL' first."
            )
            sys.exit(1)

        if config.is_token_expired():
            print_warning(f"The stored token has expired. Run '{__prog_name__} login' to re-authenticate.")

        return click_ctx.invoke(f, *args, **kwargs)

    wrapper.__name__ = f.__name__
    wrapper.__doc__ = f.__doc__
    return wrapper


__all__ = [
    "CommonApiContext",
    "pass_context",
    "common_options",
    "require_config",
    "OutputFormat",
    "print_csv",
    "print_error",
    "print_info",
    "print_json",
    "print_success",
    "print_table",
    "print_warning",
]
