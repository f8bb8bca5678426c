"""
Helpers for reading one record, its info projection or one of its properties.
"""

from typing import Any, Dict, Optional

from ...loading import LoadingKind
from ...serialization import ASSIGN_OPTIONS
from ...validation import ID_TYPES, check_argument_type, check_id_argument_type
from ._support import check_show_loading, expand, loading, query


def _check_parent_and_key(parent_key_name, parent_key_value, key_name, key_value):
    check_argument_type(parent_key_name, parent_key_value, ID_TYPES)
    check_argument_type("key_name", key_name, str)
    check_argument_type(key_name, key_value, str)


def get_impl(
    api: Any,
    url: str,
    id: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """GET ``url`` with ``{id}`` substituted and return an ``api.entity_class``."""
    check_id_argument_type("id", id)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(expand(url, id=id), params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info('Successfully get the %s by its ID "%s".', api.entity_class.__name__, id)
    api.logger.debug("The %s is: %s", api.entity_class.__name__, result)
    return result


def get_by_key_impl(
    api: Any,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """GET a record by a unique string key such as its code or username."""
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(expand(url, **{key_name: key_value}), params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info('Successfully get the %s by its %s "%s".', api.entity_class.__name__, key_name, key_value)
    api.logger.debug("The %s is: %s", api.entity_class.__name__, result)
    return result


def get_info_impl(api: Any, url: str, id: Any, show_loading: bool = True) -> Any:
    """GET the info projection of a record by its ID."""
    check_id_argument_type("id", id)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(expand(url, id=id))
    result = api.entity_info_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info('Successfully get the info of the %s by its ID "%s".', api.entity_class.__name__, id)
    api.logger.debug("The info of the %s is: %s", api.entity_class.__name__, result)
    return result


def get_info_by_key_impl(
    api: Any,
    url: str,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
) -> Any:
    """GET the info projection of a record by a unique string key."""
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(expand(url, **{key_name: key_value}))
    result = api.entity_info_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info(
        'Successfully get the info of the %s by its %s "%s".',
        api.entity_class.__name__, key_name, key_value,
    )
    api.logger.debug("The info of the %s is: %s", api.entity_class.__name__, result)
    return result


def get_property_impl(
    api: Any,
    url: str,
    property_name: str,
    property_class: Any,
    id: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """GET one property of a record by its ID, parsed as ``property_class``."""
    check_id_argument_type("id", id)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(expand(url, id=id), params=query(options))
    result = property_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info(
        'Successfully get the %s of the %s by its ID "%s".',
        property_name, api.entity_class.__name__, id,
    )
    api.logger.debug("The %s of the %s is: %s", property_name, api.entity_class.__name__, result)
    return result


def get_property_by_key_impl(
    api: Any,
    url: str,
    property_name: str,
    property_class: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """GET one property of a record by a unique string key."""
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(expand(url, **{key_name: key_value}), params=query(options))
    result = property_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info(
        'Successfully get the %s of the %s by its %s "%s".',
        property_name, api.entity_class.__name__, key_name, key_value,
    )
    api.logger.debug("The %s of the %s is: %s", property_name, api.entity_class.__name__, result)
    return result


def get_by_parent_and_key_impl(
    api: Any,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """GET a record by the key of its parent and its own key."""
    _check_parent_and_key(parent_key_name, parent_key_value, key_name, key_value)
    check_show_loading(show_loading)
    target = expand(url, **{parent_key_name: parent_key_value, key_name: key_value})
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(target, params=query(options))
    result = api.entity_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info(
        'Successfully get the %s by parent %s "%s" and its %s "%s".',
        api.entity_class.__name__, parent_key_name, parent_key_value, key_name, key_value,
    )
    api.logger.debug("The %s is: %s", api.entity_class.__name__, result)
    return result


def get_info_by_parent_and_key_impl(
    api: Any,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
) -> Any:
    """GET the info projection of a record by its parent key and its own key."""
    _check_parent_and_key(parent_key_name, parent_key_value, key_name, key_value)
    check_show_loading(show_loading)
    target = expand(url, **{parent_key_name: parent_key_value, key_name: key_value})
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(target)
    result = api.entity_info_class.create(obj, ASSIGN_OPTIONS)
    api.logger.info(
        'Successfully get the info of the %s by parent %s "%s" and its %s "%s".',
        api.entity_class.__name__, parent_key_name, parent_key_value, key_name, key_value,
    )
    api.logger.debug("The info of the %s is: %s", api.entity_class.__name__, result)
    return result
