"""
Utility functions for the common API client and its CLI.
"""

import csv
import io
import json
import logging
import re
import sys
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import unquote

import click

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_CONTENT_DISPOSITION_RE = re.compile(r"filename\*=(?:UTF-8'')?([^;]+)|filename=\"([^\"]+)\"")


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING if not verbose else logging.DEBUG)


def print_success(message: str) -> None:
    click.echo(click.style("✓ ", fg="green") + message)


def print_error(message: str, details: Optional[str] = None) -> None:
    click.echo(click.style("✗ ", fg="red") + message, err=True)
    if details:
        click.echo(click.style(f"  {details}", dim=True), err=True)


def print_warning(message: str) -> None:
    click.echo(click.style("! ", fg="yellow") + message)


def print_info(message: str) -> None:
    click.echo(click.style("ℹ ", fg="blue") + message)


def print_json(data: Any, indent: int = 2) -> None:
    """Print data as formatted JSON."""
    click.echo(json.dumps(data, indent=indent, ensure_ascii=False, default=str))


def _cell(value: Any) -> str:
    return "-" if value is None else str(value)


def print_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print rows as an aligned plain-text table."""
    cells = [[_cell(v) for v in row] for row in rows]
    widths = [len(_ANSI_RE.sub("", h)) for h in headers]
    for row in cells:
        for i, value in enumerate(row[:len(widths)]):
            widths[i] = max(widths[i], len(_ANSI_RE.sub("", value)))

    def line(values: Sequence[str]) -> str:
        parts = []
        for i, value in enumerate(values):
            pad = widths[i] - len(_ANSI_RE.sub("", value))
            parts.append(value + " " * pad)
        return "  ".join(parts).rstrip()

    click.echo(line([click.style(h, bold=True) for h in headers]))
    click.echo("  ".join("-" * w for w in widths))
    for row in cells:
        click.echo(line(row))


def print_csv(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """Print rows as CSV with ANSI codes removed."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_ANSI_RE.sub("", _cell(v)) for v in row])
    click.echo(buffer.getvalue(), nl=False)


def print_records(
    records: List[Dict[str, Any]],
    columns: Sequence[str],
    fmt: OutputFormat = OutputFormat.TABLE,
) -> None:
    """Print a list of flat dicts in the requested format."""
    if fmt == OutputFormat.JSON:
        print_json(records)
        return
    rows = [[flatten_value(record.get(column)) for column in columns] for record in records]
    if fmt == OutputFormat.CSV:
        print_csv(list(columns), rows)
        return
    for row in rows:
        for i, column in enumerate(columns):
            if column.endswith("_time") and row[i] is not None:
                row[i] = format_datetime(row[i])
            elif isinstance(row[i], str):
                row[i] = truncate_string(row[i])
    print_table(list(columns), rows)


def flatten_value(value: Any) -> Any:
    """Short display form of nested values: the name of an info, else JSON."""
    if isinstance(value, dict):
        for key in ("name", "code", "id", "value"):
            if value.get(key) is not None:
                return value[key]
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return ", ".join(str(flatten_value(v)) for v in value)
    return value


def format_datetime(value: Union[str, datetime, None]) -> str:
    """Format an ISO-8601 string or datetime for display."""
    if value is None:
        return "-"
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value.strftime("%Y-%m-%d %H:%M:%S")


def truncate_string(value: str, max_length: int = 50) -> str:
    """Truncate a string to ``max_length`` characters, ending in '...'."""
    if len(value) <= max_length:
        return value
    return value[:max_length - 3] + "..."


def confirm_action(message: str, default: bool = False) -> bool:
    return click.confirm(message, default=default)


def extract_content_disposition_filename(content_disposition: Optional[str]) -> Optional[str]:
    """
    Get the file name from a Content-Disposition header.

    Both ``filename*=UTF-8''...`` (percent-encoded) and ``filename="..."``
    forms are recognized.

    Returns:
        The file name, or None when the header is missing or has none
    """
    if not content_disposition:
        return None
    match = _CONTENT_DISPOSITION_RE.search(content_disposition)
    if not match:
        return None
    if match.group(1):
        return unquote(match.group(1).strip())
    return match.group(2)


def parse_typed_value(value: str) -> Any:
    """
    Parse a command-line value into a Python value.

    Quoted text stays a string, ``true``/``false`` become booleans,
    ``null`` becomes None and numbers become int or float.
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def parse_criteria(items: Sequence[str], typed: bool = True) -> Dict[str, Any]:
    """
    Parse ``key=value`` pairs into a criteria dict.

    Values go through ``parse_typed_value`` unless ``typed`` is False,
    in which case they are kept as stripped strings.

    Raises:
        ValueError: If an item has no '='
    """
    criteria: Dict[str, Any] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"Invalid criterion '{item}', expected key=value")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid criterion '{item}', empty key")
        criteria[key] = parse_typed_value(value) if typed else value.strip()
    return criteria
