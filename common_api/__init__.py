"""
Common API - Python client for the common REST resources.

Wraps the Department, Employee, Person, Dict, region, App, Device and other
resources with CRUD-style operations, plus the authentication and
current-user endpoints.
"""

__version__ = "1.0.1"
__prog_name__ = "common-api"

from .api import CommonAPIClient, get_client  # noqa: E402

__all__ = [
    "__version__",
    "__prog_name__",
    "CommonAPIClient",
    "get_client",
]
