"""
Helpers for soft-deleting records.

A soft-deleted record keeps its data with ``delete_time`` set and can be
restored. Single deletions return the deletion timestamp, bulk deletions
return the number of records deleted.
"""

from typing import Any, Dict, Optional

from ...loading import LoadingKind
from ...serialization import TO_JSON_OPTIONS, to_json
from ...validation import (
    ID_TYPES,
    check_argument_type,
    check_id_argument_type,
    check_id_array_argument_type,
)
from ._support import check_show_loading, expand, loading, query


def delete_impl(
    api: Any,
    url: str,
    id: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    check_id_argument_type("id", id)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.DELETING):
        timestamp = api.http.delete(expand(url, id=id), params=query(options))
    api.logger.info('Successfully delete the %s by its ID "%s".', api.entity_class.__name__, id)
    return timestamp


def delete_by_key_impl(
    api: Any,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.DELETING):
        timestamp = api.http.delete(expand(url, **{key_name: key_value}), params=query(options))
    api.logger.info('Successfully deleted the %s by its %s "%s".', api.entity_class.__name__, key_name, key_value)
    return timestamp


def delete_all_impl(
    api: Any,
    url: str,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.DELETING):
        count = api.http.delete(url, params=query(options))
    api.logger.info("Successfully delete %d deleted %ss.", count or 0, api.entity_class.__name__)
    return count


def batch_delete_impl(
    api: Any,
    url: str,
    ids: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """DELETE the records whose IDs are sent as the request body."""
    check_id_array_argument_type("ids", ids)
    check_show_loading(show_loading)
    data = to_json(list(ids), TO_JSON_OPTIONS)
    with loading(api, show_loading, LoadingKind.DELETING):
        count = api.http.delete(url, data, params=query(options))
    api.logger.info("Successfully batch deleted %d %ss.", count or 0, api.entity_class.__name__)
    return count


def delete_by_parent_and_key_impl(
    api: Any,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    check_argument_type(parent_key_name, parent_key_value, ID_TYPES)
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    target = expand(url, **{parent_key_name: parent_key_value, key_name: key_value})
    with loading(api, show_loading, LoadingKind.DELETING):
        timestamp = api.http.delete(target, params=query(options))
    api.logger.info(
        'Successfully deleted the %s by parent %s "%s" and its %s "%s".',
        api.entity_class.__name__, parent_key_name, parent_key_value, key_name, key_value,
    )
    return timestamp
