"""
Helper for creating a record.
"""

from typing import Any, Dict, Optional

from ...loading import LoadingKind
from ...serialization import ASSIGN_OPTIONS, TO_JSON_OPTIONS, to_json
from ._support import check_entity, check_show_loading, loading, query


def add_impl(
    api: Any,
    url: str,
    entity: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    POST a new record and return the created entity.

    Args:
        api: API object providing ``entity_class``, ``http``, ``logger`` and ``loading``
        url: Collection URL, for example ``/department``
        entity: The record, as an ``api.entity_class`` instance or a dict
        show_loading: Show the loading indicator while the request runs
        options: Extra query parameters

    Returns:
        The record as stored by the server
    """
    check_entity(api, entity)
    check_show_loading(show_loading)
    data = to_json(entity, TO_JSON_OPTIONS)
    with loading(api, show_loading, LoadingKind.ADDING):
        obj = api.http.post(url, data, params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info("Successfully add the %s: %s", api.entity_class.__name__, getattr(result, "id", None))
    api.logger.debug("The added %s is: %s", api.entity_class.__name__, result)
    return result
