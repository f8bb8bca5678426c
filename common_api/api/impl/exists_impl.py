"""
Helpers for checking that a record exists with HEAD.

A missing record makes the transport raise ``NotFoundError``.
"""

from typing import Any

from ...loading import LoadingKind
from ...validation import ID_TYPES, check_argument_type, check_id_argument_type
from ._support import check_show_loading, expand, loading


def exists_impl(api: Any, url: str, id: Any, show_loading: bool = True) -> bool:
    check_id_argument_type("id", id)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        api.http.head(expand(url, id=id))
    api.logger.info('Successfully checked the existence of %s by its ID "%s".', api.entity_class.__name__, id)
    return True


def exists_by_key_impl(api: Any, url: str, key_name: str, key_value: Any, show_loading: bool = True) -> bool:
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        api.http.head(expand(url, **{key_name: key_value}))
    api.logger.info(
        'Successfully checked the existence of %s by its %s "%s".',
        api.entity_class.__name__, key_name, key_value,
    )
    return True


def exists_by_parent_and_key_impl(
    api: Any,
    url: str,
    parent_key_name: str,
    parent_key_value: Any,
    key_name: str,
    key_value: Any,
    show_loading: bool = True,
) -> bool:
    check_argument_type(parent_key_name, parent_key_value, ID_TYPES)
    check_argument_type(key_name, key_value, str)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        api.http.head(expand(url, **{parent_key_name: parent_key_value, key_name: key_value}))
    api.logger.info(
        'Successfully checked the existence of %s by parent %s "%s" and its %s "%s".',
        api.entity_class.__name__, parent_key_name, parent_key_value, key_name, key_value,
    )
    return True
