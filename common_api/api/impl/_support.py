"""
Pieces shared by the request helpers.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional

from pydantic import BaseModel

from ...loading import LoadingKind
from ...serialization import TO_JSON_OPTIONS, stringify_id, to_camel_case, to_json
from ...validation import check_argument_type


def check_show_loading(show_loading: Any) -> None:
    check_argument_type("show_loading", show_loading, bool)


def check_entity(api: Any, entity: Any) -> None:
    """An entity argument is an instance of the API's entity class or a dict."""
    check_argument_type("entity", entity, (api.entity_class, dict))


def entity_field(entity: Any, name: str) -> Any:
    """Read a field from a model or a dict with snake_case or camelCase keys."""
    if isinstance(entity, BaseModel):
        return getattr(entity, name, None)
    if isinstance(entity, Mapping):
        if name in entity:
            return entity[name]
        return entity.get(to_camel_case(name))
    return None


def expand(url: str, **keys: Any) -> str:
    """Replace ``{name}`` placeholders with the string form of the values."""
    for name, value in keys.items():
        url = url.replace("{" + name + "}", stringify_id(value))
    return url


def query(options: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
    """Serialize an options bag into query parameters."""
    if not options:
        return None
    return to_json(dict(options), TO_JSON_OPTIONS) or None


@contextmanager
def loading(api: Any, show_loading: bool, kind: LoadingKind, message: Optional[str] = None) -> Iterator[None]:
    """Show the API's loading indicator around a request when asked to."""
    if not show_loading:
        yield
        return
    api.loading.show(kind, message)
    try:
        yield
    finally:
        api.loading.clear()
