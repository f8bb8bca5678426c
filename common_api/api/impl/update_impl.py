"""
Helpers for updating a record or one of its properties.

Whole-record updates return the updated entity. Property updates return
the modification timestamp sent back by the server.
"""

from typing import Any, Dict, Optional, Tuple, Union

from ...loading import LoadingKind
from ...serialization import ASSIGN_OPTIONS, TO_JSON_OPTIONS, to_json
from ...validation import ID_TYPES, check_argument_type, check_id_argument_type
from ._support import check_entity, check_show_loading, entity_field, expand, loading, query

PropertyTypes = Union[type, Tuple[type, ...]]


def _property_body(property_value: Any, wrap_key: Optional[str]) -> Any:
    data = to_json(property_value, TO_JSON_OPTIONS)
    if wrap_key:
        return {wrap_key: data}
    return data


def update_impl(
    api: Any,
    url: str,
    entity: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """PUT a whole record to ``url`` with ``{id}`` taken from ``entity.id``."""
    check_entity(api, entity)
    id = entity_field(entity, "id")
    check_id_argument_type("entity.id", id)
    check_show_loading(show_loading)
    data = to_json(entity, TO_JSON_OPTIONS)
    with loading(api, show_loading, LoadingKind.UPDATING):
        obj = api.http.put(expand(url, id=id), data, params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info('Successfully update the %s by its ID "%s".', api.entity_class.__name__, id)
    api.logger.debug("The updated %s is: %s", api.entity_class.__name__, result)
    return result


def update_by_key_impl(
    api: Any,
    url: str,
    key_name: str,
    entity: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """PUT a whole record addressed by one of its unique string fields."""
    check_entity(api, entity)
    key_value = entity_field(entity, key_name)
    check_argument_type(f"entity.{key_name}", key_value, str)
    check_show_loading(show_loading)
    data = to_json(entity, TO_JSON_OPTIONS)
    with loading(api, show_loading, LoadingKind.UPDATING):
        obj = api.http.put(expand(url, **{key_name: key_value}), data, params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info('Successfully update the %s by its %s "%s".', api.entity_class.__name__, key_name, key_value)
    api.logger.debug("The updated %s is: %s", api.entity_class.__name__, result)
    return result


def update_property_impl(
    api: Any,
    url: str,
    id: Any,
    property_name: str,
    property_types: PropertyTypes,
    property_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
    wrap_key: Optional[str] = None,
) -> Any:
    """
    PUT one property of a record addressed by ID.

    Args:
        property_types: Accepted types of ``property_value``
        wrap_key: Send ``{wrap_key: value}`` instead of the bare value

    Returns:
        The modification timestamp, an ISO-8601 string
    """
    check_id_argument_type("id", id)
    check_argument_type(property_name, property_value, property_types)
    check_show_loading(show_loading)
    data = _property_body(property_value, wrap_key)
    with loading(api, show_loading, LoadingKind.UPDATING):
        timestamp = api.http.put(expand(url, id=id), data, params=query(options))
    api.logger.info(
        'Successfully update the %s of a %s by its ID "%s" at: %s',
        property_name, api.entity_class.__name__, id, timestamp,
    )
    return timestamp


def update_property_by_key_impl(
    api: Any,
    url: str,
    key_name: str,
    key_value: Any,
    property_name: str,
    property_types: PropertyTypes,
    property_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
    wrap_key: Optional[str] = None,
) -> Any:
    """PUT one property of a record addressed by a unique string key."""
    check_argument_type(key_name, key_value, str)
    check_argument_type(property_name, property_value, property_types)
    check_show_loading(show_loading)
    data = _property_body(property_value, wrap_key)
    with loading(api, show_loading, LoadingKind.UPDATING):
        timestamp = api.http.put(expand(url, **{key_name: key_value}), data, params=query(options))
    api.logger.info(
        'Successfully update the %s of a %s by its %s "%s" at: %s',
        property_name, api.entity_class.__name__, key_name, key_value, timestamp,
    )
    return timestamp


def update_by_parent_and_key_impl(
    api: Any,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    entity: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """PUT a whole record addressed by its parent key and its own key."""
    check_entity(api, entity)
    check_argument_type(f"entity.{parent_key_name}", parent_key_value, ID_TYPES)
    key_value = entity_field(entity, key_name)
    check_argument_type(f"entity.{key_name}", key_value, str)
    check_show_loading(show_loading)
    data = to_json(entity, TO_JSON_OPTIONS)
    target = expand(url, **{parent_key_name: parent_key_value, key_name: key_value})
    with loading(api, show_loading, LoadingKind.UPDATING):
        obj = api.http.put(target, data, params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info(
        'Successfully update the %s by parent %s "%s" and its %s "%s".',
        api.entity_class.__name__, parent_key_name, parent_key_value, key_name, key_value,
    )
    api.logger.debug("The updated %s is: %s", api.entity_class.__name__, result)
    return result
