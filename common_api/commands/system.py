"""
System commands for the common-api CLI.
"""

import sys

import click

from ..exceptions import CommonApiError
from ..utils import OutputFormat, setup_logging
from . import CommonApiContext, common_options, pass_context, print_error, print_json, require_config


def register_system_commands(cli: click.Group) -> None:
    """Register system commands with the CLI."""

    @cli.command('system-info')
    @common_options
    @pass_context
    @require_config
    def system_info(ctx: CommonApiContext, verbose: bool, quiet: bool, output_format: str):
        """Show the name, version and current time of the server."""
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)

        try:
            with ctx.create_client(quiet=True) as client:
                info = client.system.get_info(show_loading=False)
                server_time = client.system.get_time()
        except CommonApiError as e:
            print_error(str(e))
            sys.exit(1)

        data = info.to_dict() if info is not None else {}
        data['server_time'] = server_time
        if fmt == OutputFormat.JSON:
            print_json(data)
            return

        click.echo("\nServer Information:")
        click.echo(f"  Server:      {client.base_url}")
        click.echo(f"  Name:        {data.get('name', '-')}")
        click.echo(f"  Version:     {data.get('version', '-')}")
        click.echo(f"  Vendor:      {data.get('vendor', '-')}")
        click.echo(f"  Build Time:  {data.get('build_time', '-')}")
        click.echo(f"  Server Time: {server_time or '-'}")
