"""
Configuration/settings commands for the common-api CLI.

Commands:
- configure: Configure CLI settings
- config-clear: Clear all configuration
"""

from typing import Optional

import click

from .. import __prog_name__
from . import (
    CommonApiContext,
    pass_context,
    print_success,
    print_info,
)
from ..config import DEFAULT_API_PREFIX, DEFAULT_SERVER_URL


def register_settings_commands(cli: click.Group) -> None:
    """Register configuration commands with the CLI."""

    @cli.command('configure')
    @click.option(
        '--server', '-s',
        help=f'API server URL (default: {DEFAULT_SERVER_URL})'
    )
    @click.option(
        '--prefix',
        help=f'Path prefix of the API endpoints (default: {DEFAULT_API_PREFIX})'
    )
    @click.option(
        '--app-code',
        help='Code of the client application'
    )
    @click.option(
        '--timeout', '-t',
        type=int,
        help='Request timeout in seconds'
    )
    @click.option(
        '--max-retries',
        type=int,
        help='Max retries for transient errors (0 to disable)'
    )
    @click.option(
        '--no-verify-ssl',
        is_flag=True,
        help='Disable SSL certificate verification'
    )
    @click.option(
        '--download-dir',
        type=click.Path(file_okay=False),
        help='Default directory for exported files'
    )
    @click.option(
        '--page-size',
        type=int,
        help='Default page size of list commands'
    )
    @click.option(
        '--show',
        is_flag=True,
        help='Show current configuration'
    )
    @pass_context
    def configure(
        ctx: CommonApiContext,
        server: Optional[str],
        prefix: Optional[str],
        app_code: Optional[str],
        timeout: Optional[int],
        max_retries: Optional[int],
        no_verify_ssl: bool,
        download_dir: Optional[str],
        page_size: Optional[int],
        show: bool
    ):
        """
        Configure common-api CLI settings.

        \b
        Examples:
          common-api configure --server https://api.example.com
          common-api configure --prefix /api/v1 --timeout 60
          common-api configure --show
        """
        config_manager = ctx.config_manager

        if show:
            config = config_manager.get()
            click.echo("\nCurrent Configuration:")
            click.echo(f"  Server URL:      {config.server_url}")
            click.echo(f"  API Prefix:      {config.api_prefix or '(none)'}")
            click.echo(f"  App Code:        {config.app_code or '(not set)'}")
            click.echo(f"  Token:           {'*' * 20 + '...' if config.token else '(not authenticated)'}")
            click.echo(f"  Timeout:         {config.timeout}s")
            click.echo(f"  Max Retries:     {config.max_retries}")
            click.echo(f"  Verify SSL:      {config.verify_ssl}")
            click.echo(f"  Download Dir:    {config.download_dir or '(current directory)'}")
            click.echo(f"  Page Size:       {config.page_size}")
            click.echo(f"  Config Path:     {config_manager.get_config_path()}")
            return

        # Interactive configuration if no options provided
        if not any([server, prefix is not None, app_code, timeout, max_retries is not None,
                    no_verify_ssl, download_dir, page_size]):
            click.echo("Interactive configuration setup:")

            current = config_manager.get()

            server = click.prompt(
                "API Server URL",
                default=current.server_url or DEFAULT_SERVER_URL
            )

            prefix = click.prompt(
                "API path prefix",
                default=current.api_prefix,
                show_default=True
            )

            timeout = click.prompt(
                "Request timeout (seconds)",
                default=current.timeout,
                type=int
            )

            max_retries = click.prompt(
                "Max retries for transient errors (0 to disable)",
                default=current.max_retries,
                type=int
            )

        updates = {}
        if server:
            updates['server_url'] = server
        if prefix is not None:
            updates['api_prefix'] = prefix
        if app_code:
            updates['app_code'] = app_code
        if timeout:
            updates['timeout'] = timeout
        if max_retries is not None:
            updates['max_retries'] = max_retries
        if no_verify_ssl:
            updates['verify_ssl'] = False
        if download_dir:
            updates['download_dir'] = download_dir
        if page_size:
            updates['page_size'] = page_size

        if updates:
            config_manager.update(**updates)
            print_success("Configuration saved successfully.")
            print_info(f"Run '{__prog_name__} login' to authenticate with your credentials.")
        else:
            print_info("No changes made.")

    @cli.command('config-clear')
    @click.confirmation_option(prompt='Are you sure you want to clear all configuration?')
    @pass_context
    def config_clear(ctx: CommonApiContext):
        """Clear all stored configuration."""
        ctx.config_manager.clear()
        print_success("Configuration cleared.")
