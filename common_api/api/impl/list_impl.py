"""
Helpers for listing records page by page.
"""

from typing import Any, Dict, Optional

from ...loading import LoadingKind
from ...serialization import ASSIGN_OPTIONS, TO_JSON_OPTIONS, to_json, to_snake_case
from ...validation import (
    check_object_argument,
    check_page_request_argument,
    check_sort_request_argument,
)
from ._support import check_show_loading, loading


def build_query(
    api: Any,
    page_request: Any,
    criteria: Any,
    sort_request: Any,
    options: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Validate and merge paging, criteria, sorting and options into one query.

    Later sources win when a key repeats. The sort field is sent in
    snake_case and the sort order in upper case.
    """
    check_page_request_argument(page_request)
    check_object_argument("criteria", criteria, api.criteria, nullable=True)
    check_sort_request_argument(sort_request, api.entity_class)
    params: Dict[str, Any] = {}
    for part in (page_request, criteria, sort_request, options):
        if part:
            params.update(to_json(part, TO_JSON_OPTIONS))
    if isinstance(params.get("sort_field"), str):
        params["sort_field"] = to_snake_case(params["sort_field"])
    if isinstance(params.get("sort_order"), str):
        params["sort_order"] = params["sort_order"].upper()
    return params


def list_impl(
    api: Any,
    url: str,
    page_request: Any = None,
    criteria: Any = None,
    sort_request: Any = None,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    GET one page of records matching ``criteria``.

    Args:
        api: API object providing ``entity_class`` and ``criteria``
        url: Collection URL
        page_request: ``{page_index, page_size}`` as a dict or ``PageRequest``
        criteria: Filter fields declared in ``api.criteria``
        sort_request: ``{sort_field, sort_order}`` as a dict or ``SortRequest``
        show_loading: Show the loading indicator while the request runs
        options: Extra query parameters

    Returns:
        A ``Page`` of ``api.entity_class``
    """
    params = build_query(api, page_request, criteria, sort_request, options)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(url, params=params)
    page = api.entity_class.create_page(obj, ASSIGN_OPTIONS)
    api.logger.info("Successfully list %ss.", api.entity_class.__name__)
    api.logger.debug("The page of %ss is: %s", api.entity_class.__name__, page)
    return page


def list_info_impl(
    api: Any,
    url: str,
    page_request: Any = None,
    criteria: Any = None,
    sort_request: Any = None,
    show_loading: bool = True,
    options: Optional[Dict[str, Any]] = None,
) -> Any:
    """Same as ``list_impl`` but returns a page of ``api.entity_info_class``."""
    params = build_query(api, page_request, criteria, sort_request, options)
    check_show_loading(show_loading)
    with loading(api, show_loading, LoadingKind.GETTING):
        obj = api.http.get(url, params=params)
    page = api.entity_info_class.create_page(obj, ASSIGN_OPTIONS)
    api.logger.info("Successfully list infos of %ss.", api.entity_class.__name__)
    api.logger.debug("The page of infos of %ss is: %s", api.entity_class.__name__, page)
    return page
