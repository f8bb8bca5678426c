"""
common-api CLI - Command Line Interface for the common API server.

This module provides the main CLI entry point. Commands are registered
from the ``commands`` package:
- Configuration management
- Authentication (login, logout, whoami)
- Entity operations (list, get, delete, restore, purge, export, import)
- System information
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import click

from . import __version__, __prog_name__
from .config import get_config_manager
from .commands import CommonApiContext
from .commands.auth import register_auth_commands
from .commands.entities import register_entity_commands
from .commands.settings import register_settings_commands
from .commands.system import register_system_commands
from .utils import print_error

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--config-dir',
    type=click.Path(path_type=Path),
    envvar='COMMON_API_CONFIG_DIR',
    help='Custom configuration directory'
)
@click.pass_context
def cli(ctx, config_dir: Optional[Path]):
    """
    common-api - Command line client of the common API server.

    Manages organizations, people, dictionaries, regions, apps, devices
    and the other shared resources through the REST API.

    \b
    Quick Start:
      1. Configure server:         common-api configure --server https://api.example.com
      2. Login with credentials:   common-api login
      3. List records:             common-api list department
      4. Export records:           common-api export employee excel -o ./exports

    \b
    Environment Variables:
      COMMON_API_TOKEN        - Bearer token (from login)
      COMMON_API_SERVER_URL   - API server URL
      COMMON_API_CONFIG_DIR   - Custom configuration directory
    """
    ctx.ensure_object(CommonApiContext)
    ctx.obj.config_manager = get_config_manager(config_dir)


register_settings_commands(cli)
register_auth_commands(cli)
register_entity_commands(cli)
register_system_commands(cli)


def main():
    """Main entry point for the CLI."""
    try:
        cli(auto_envvar_prefix='COMMON_API')
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
