"""
Entity commands for the common-api CLI.

Commands:
- list: List records of a resource
- get: Show one record
- delete / restore / purge: Change the lifecycle state of a record
- export: Export records to a file
- import: Import records from a file
"""

import sys
from typing import Any, Dict, Optional, Tuple

import click

from ..api import CommonAPIClient
from ..exceptions import CommonApiError
from ..utils import (
    OutputFormat,
    confirm_action,
    parse_criteria,
    parse_typed_value,
    print_records,
    setup_logging,
)
from . import (
    CommonApiContext,
    common_options,
    pass_context,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
    require_config,
)

#: Columns shown by ``list`` when the records have them.
LIST_COLUMNS = ("id", "code", "name", "username", "state", "create_time")

ENTITY_NAMES = sorted(name.replace("_", "-") for name in CommonAPIClient.RESOURCES)

FORMATS = ("xml", "json", "excel", "csv")


def coerce_criteria(api, items: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Parse ``key=value`` criteria and convert each value to a type the
    criterion of ``api`` accepts.

    Criteria accepting text keep the raw text, so codes like ``007`` are not
    turned into numbers.
    """
    field_types = {field.name: field.types for field in api.criteria}
    criteria = {}
    for key, raw in parse_criteria(items, typed=False).items():
        types = field_types.get(key, ())
        if bool in types and raw.lower() in ("true", "false"):
            criteria[key] = raw.lower() == "true"
        elif str in types:
            if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "\"'":
                raw = raw[1:-1]
            criteria[key] = raw
        else:
            criteria[key] = parse_typed_value(raw)
    return criteria


def _resource(client: CommonAPIClient, entity: str, method: str):
    api = client.resource(entity)
    if not hasattr(api, method):
        print_error(f"The resource '{entity}' does not support '{method}'.")
        sys.exit(1)
    return getattr(api, method)


def _print_record(record, fmt: OutputFormat) -> None:
    data = record.to_dict() if hasattr(record, "to_dict") else record
    if fmt == OutputFormat.JSON or not isinstance(data, dict):
        print_json(data)
        return
    print_records([{"field": key, "value": value} for key, value in data.items()], ("field", "value"), fmt)


def register_entity_commands(cli: click.Group) -> None:
    """Register entity commands with the CLI."""

    entity_argument = click.argument('entity', type=click.Choice(ENTITY_NAMES))

    @cli.command('list')
    @entity_argument
    @common_options
    @click.option('--page', '-p', type=int, default=1, help='Page number (starting at 1)')
    @click.option('--size', '-n', type=int, help='Records per page')
    @click.option('--sort-field', help='Field to sort by')
    @click.option('--sort-order', type=click.Choice(['asc', 'desc'], case_sensitive=False), help='Sort order')
    @click.option('--criteria', '-c', multiple=True, help='Filter as key=value (repeatable)')
    @pass_context
    @require_config
    def list_records(
        ctx: CommonApiContext,
        entity: str,
        verbose: bool,
        quiet: bool,
        output_format: str,
        page: int,
        size: Optional[int],
        sort_field: Optional[str],
        sort_order: Optional[str],
        criteria: Tuple[str, ...]
    ):
        """
        List records of a resource.

        \b
        Examples:
          common-api list department
          common-api list employee -c organization_code=HQ -c deleted=false
          common-api list user --sort-field create_time --sort-order desc -f json
        """
        setup_logging(verbose, quiet)
        ctx.quiet = quiet
        fmt = OutputFormat(output_format)

        if page < 1:
            print_error("The page number must be at least 1.")
            sys.exit(1)

        try:
            with ctx.create_client() as client:
                list_fn = _resource(client, entity, 'list')
                api = client.resource(entity)
                page_request = {
                    'page_index': page - 1,
                    'page_size': size or client.config.page_size,
                }
                sort_request = None
                if sort_field or sort_order:
                    sort_request = {'sort_field': sort_field, 'sort_order': sort_order}
                result = list_fn(
                    page_request=page_request,
                    criteria=coerce_criteria(api, criteria) or None,
                    sort_request=sort_request,
                )
        except (TypeError, ValueError) as e:
            print_error(str(e))
            sys.exit(1)
        except CommonApiError as e:
            print_error(str(e))
            sys.exit(1)

        if result is None:
            print_info("No records found.")
            return

        records = [item.to_dict() for item in result.content]
        if fmt == OutputFormat.JSON:
            print_json(result.to_dict())
            return

        fields = set().union(*(record.keys() for record in records)) if records else set()
        columns = [column for column in LIST_COLUMNS if column in fields] or sorted(fields)
        print_records(records, columns, fmt)
        if fmt == OutputFormat.TABLE and not quiet:
            click.echo(f"\nPage {result.page_index + 1}/{max(result.total_pages, 1)} "
                       f"(Total: {result.total_count} records)")

    @cli.command('get')
    @entity_argument
    @click.argument('key')
    @common_options
    @click.option('--code', 'by_code', is_flag=True, help='Treat KEY as a code instead of an ID')
    @click.option('--dict', 'dict_code', help='Code of the dictionary (dict-entry with --code only)')
    @pass_context
    @require_config
    def get_record(
        ctx: CommonApiContext,
        entity: str,
        key: str,
        verbose: bool,
        quiet: bool,
        output_format: str,
        by_code: bool,
        dict_code: Optional[str]
    ):
        """
        Show one record by its ID, or by its code with --code.

        \b
        Examples:
          common-api get department 1001
          common-api get organization HQ --code
          common-api get dict-entry MALE --code --dict gender
        """
        setup_logging(verbose, quiet)
        ctx.quiet = quiet
        fmt = OutputFormat(output_format)

        try:
            with ctx.create_client() as client:
                if by_code:
                    get_fn = _resource(client, entity, 'get_by_code')
                    if dict_code is not None:
                        record = get_fn(dict_code, key)
                    else:
                        record = get_fn(key)
                else:
                    record = _resource(client, entity, 'get')(key)
        except (TypeError, ValueError) as e:
            print_error(str(e))
            sys.exit(1)
        except CommonApiError as e:
            print_error(str(e))
            sys.exit(1)

        if record is None:
            print_info("Record not found.")
            return
        _print_record(record, fmt)

    def lifecycle_command(name: str, verb: str, confirm: bool = False):
        @cli.command(name, help=f"Mark a record as {verb} by its ID.")
        @entity_argument
        @click.argument('id')
        @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
        @click.option('-q', '--quiet', is_flag=True, help='Suppress non-essential output')
        @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
        @pass_context
        @require_config
        def command(ctx: CommonApiContext, entity: str, id: str, verbose: bool, quiet: bool, yes: bool):
            setup_logging(verbose, quiet)
            ctx.quiet = quiet

            if confirm and not yes:
                if not confirm_action(f"{verb.capitalize()} {entity} '{id}'? This cannot be undone."):
                    print_info("Cancelled.")
                    return

            try:
                with ctx.create_client() as client:
                    result = _resource(client, entity, name)(id)
            except (TypeError, ValueError) as e:
                print_error(str(e))
                sys.exit(1)
            except CommonApiError as e:
                print_error(str(e))
                sys.exit(1)

            if result is not None:
                print_success(f"{verb.capitalize()} {entity} '{id}' at {result}.")
            else:
                print_success(f"{verb.capitalize()} {entity} '{id}'.")
        return command

    lifecycle_command('delete', 'deleted')
    lifecycle_command('restore', 'restored')
    lifecycle_command('purge', 'purged', confirm=True)

    @cli.command('export')
    @entity_argument
    @click.argument('file_format', metavar='FORMAT', type=click.Choice(FORMATS, case_sensitive=False))
    @click.option('--output-dir', '-o', type=click.Path(file_okay=False), help='Directory to save the file to')
    @click.option('--criteria', '-c', multiple=True, help='Filter as key=value (repeatable)')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @click.option('-q', '--quiet', is_flag=True, help='Suppress non-essential output')
    @pass_context
    @require_config
    def export_records(
        ctx: CommonApiContext,
        entity: str,
        file_format: str,
        output_dir: Optional[str],
        criteria: Tuple[str, ...],
        verbose: bool,
        quiet: bool
    ):
        """
        Export records of a resource to a file.

        \b
        Examples:
          common-api export department excel
          common-api export employee csv -o ./exports -c deleted=false
        """
        setup_logging(verbose, quiet)
        ctx.quiet = quiet

        try:
            with ctx.create_client() as client:
                api = client.resource(entity)
                export_fn = _resource(client, entity, 'export')
                downloaded = export_fn(
                    file_format.lower(),
                    criteria=coerce_criteria(api, criteria) or None,
                    auto_download=False,
                )
                if downloaded is None:
                    print_warning(f"The server returned no {entity} export file.")
                    return
                path = downloaded.save(output_dir or client.config.download_dir or '.')
        except (TypeError, ValueError) as e:
            print_error(str(e))
            sys.exit(1)
        except CommonApiError as e:
            print_error(str(e))
            sys.exit(1)
        except OSError as e:
            print_error(f"Cannot save the exported file: {e}")
            sys.exit(1)

        print_success(f"Exported {entity} records to: {path}")

    @cli.command('import')
    @entity_argument
    @click.argument('file_format', metavar='FORMAT', type=click.Choice(FORMATS, case_sensitive=False))
    @click.argument('file', type=click.Path(exists=True, dir_okay=False))
    @click.option('--parallel', is_flag=True, help='Let the server import records in parallel')
    @click.option('--threads', type=int, help='Number of server threads for a parallel import')
    @click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
    @click.option('-q', '--quiet', is_flag=True, help='Suppress non-essential output')
    @pass_context
    @require_config
    def import_records(
        ctx: CommonApiContext,
        entity: str,
        file_format: str,
        file: str,
        parallel: bool,
        threads: Optional[int],
        verbose: bool,
        quiet: bool
    ):
        """
        Import records of a resource from a file.

        \b
        Examples:
          common-api import department excel departments.xlsx
          common-api import employee json employees.json --parallel --threads 4
        """
        setup_logging(verbose, quiet)
        ctx.quiet = quiet

        try:
            with ctx.create_client() as client:
                count = _resource(client, entity, 'import_file')(
                    file_format.lower(), file, parallel=parallel, threads=threads
                )
        except (TypeError, ValueError) as e:
            print_error(str(e))
            sys.exit(1)
        except CommonApiError as e:
            print_error(str(e))
            sys.exit(1)

        print_success(f"Imported {count} {entity} records from {file}.")
