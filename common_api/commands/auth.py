"""
Authentication commands for the common-api CLI.

Commands:
- login: Log in with username and password
- logout: End the session and clear the stored token
- whoami: Show authentication status
"""

import sys
import time
from typing import Optional

import click

from .. import __prog_name__
from . import (
    CommonApiContext,
    pass_context,
    print_success,
    print_error,
    print_info,
    print_warning,
)
from ..exceptions import AuthenticationError, CommonApiError
from ..utils import confirm_action, setup_logging


def register_auth_commands(cli: click.Group) -> None:
    """Register authentication commands with the CLI."""

    @cli.command('login')
    @click.option('--username', '-u', help='Username')
    @click.option('--password', '-p', help='Password (will prompt if not provided)')
    @click.option('--server', '-s', help='Server URL (overrides configured server)')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @pass_context
    def login(
        ctx: CommonApiContext,
        username: Optional[str],
        password: Optional[str],
        server: Optional[str],
        verbose: bool
    ):
        """
        Log in with username and password and store the access token.

        \b
        Examples:
          common-api login
          common-api login -u admin
          common-api login -u admin -p secret --server https://api.example.com
        """
        setup_logging(verbose)
        config_manager = ctx.config_manager

        if server:
            config_manager.update(server_url=server)

        config = config_manager.get()
        if not config.server_url:
            print_error(
                "Server URL not configured.",
                f"Run '{__prog_name__} configure --server URL' first."
            )
            sys.exit(1)

        if not username:
            username = click.prompt("Username")

        if not password:
            password = click.prompt("Password", hide_input=True)

        print_info(f"Logging in to {config.base_url}...")

        try:
            with ctx.create_client(quiet=True) as client:
                response = client.user_authenticate.login_by_username(username, password)
        except AuthenticationError as e:
            print_error(f"Login failed: {e}")
            sys.exit(1)
        except CommonApiError as e:
            print_error(str(e))
            sys.exit(1)

        token = response.token if response is not None else None
        if token is None or not token.value:
            print_error("Login succeeded but no token received.")
            sys.exit(1)

        update_data = {'token': token.value, 'token_expires_at': 0}
        if token.max_age:
            update_data['token_expires_at'] = int(time.time()) + int(token.max_age)
        config_manager.update(**update_data)

        name = response.user.username if response.user else username
        print_success(f"Logged in as {name}. Token saved.")
        if token.max_age:
            click.echo(f"  Token expires in: {token.max_age} seconds")

    @cli.command('logout')
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    def logout(ctx: CommonApiContext, yes: bool):
        """
        End the session on the server and clear the stored token.
        """
        if not yes:
            if not confirm_action("Clear stored authentication token?"):
                print_info("Cancelled.")
                return

        config_manager = ctx.config_manager
        config = config_manager.get()
        if config.is_authenticated() and not config.is_token_expired():
            try:
                with ctx.create_client(quiet=True) as client:
                    client.user_authenticate.logout()
            except CommonApiError as e:
                print_warning(f"Server logout failed: {e}")

        config_manager.update(token='', token_expires_at=0)
        print_success("Logged out successfully.")

    @cli.command('whoami')
    @click.option('--remote', is_flag=True, help='Ask the server for the login info')
    @pass_context
    def whoami(ctx: CommonApiContext, remote: bool):
        """
        Show current authentication status.
        """
        config = ctx.config_manager.get()

        if not config.is_authenticated():
            click.echo("\nAuthentication Status: " + click.style("Not authenticated", fg="red"))
            click.echo(f"  Server: {config.server_url or '(not configured)'}")
            print_info(f"Run '{__prog_name__} login' to authenticate.")
            return

        click.echo("\nAuthentication Status: " + click.style("Authenticated", fg="green"))
        click.echo(f"  Server: {config.base_url}")
        token = config.token
        click.echo(f"  Token:  {token[:20]}...{token[-10:]}" if len(token) > 30 else f"  Token:  {token}")

        if config.token_expires_at:
            remaining = config.token_expires_at - int(time.time())
            if remaining > 0:
                hours, remainder = divmod(remaining, 3600)
                minutes, seconds = divmod(remainder, 60)
                if hours > 0:
                    click.echo(f"  Expires: in {hours}h {minutes}m {seconds}s")
                elif minutes > 0:
                    click.echo(f"  Expires: in {minutes}m {seconds}s")
                else:
                    click.echo(f"  Expires: in {seconds}s " + click.style("(expiring soon!)", fg="yellow"))
            else:
                click.echo("  Expires: " + click.style("EXPIRED", fg="red"))
                print_info(f"Run '{__prog_name__} login' to re-authenticate.")

        if remote:
            try:
                with ctx.create_client(quiet=True) as client:
                    info = client.user_authenticate.get_login_info()
            except CommonApiError as e:
                print_error(str(e))
                sys.exit(1)
            if info is not None and info.user is not None:
                click.echo(f"  User:   {info.user.username} ({info.user.name or '-'})")
            if info is not None and info.roles:
                click.echo(f"  Roles:  {', '.join(info.roles)}")
