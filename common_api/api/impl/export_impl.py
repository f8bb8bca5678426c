"""
Helper for exporting records to a file.
"""

from pathlib import Path
from typing import Any, Optional, Union

from ...loading import LoadingKind
from ...serialization import TO_JSON_OPTIONS, to_json, to_snake_case
from ...validation import check_argument_type, check_object_argument, check_sort_request_argument
from ._support import check_show_loading, loading

EXCEL_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

#: MIME type of each export format.
MIME_TYPES = {
    "XML": "application/xml",
    "JSON": "application/json",
    "EXCEL": EXCEL_MIME_TYPE,
    "XLSX": EXCEL_MIME_TYPE,
    "XLS": "application/vnd.ms-excel",
    "CSV": "text/csv",
}


def mime_type_of(format: str) -> str:
    """
    Look up the MIME type of a format name, case-insensitively.

    Raises:
        ValueError: If the format is not supported
    """
    try:
        return MIME_TYPES[format.upper()]
    except KeyError:
        raise ValueError(f"Unsupported file format: {format}") from None


def export_impl(
    api: Any,
    url: str,
    format: str,
    criteria: Any = None,
    sort_request: Any = None,
    auto_download: bool = True,
    show_loading: bool = True,
    output_dir: Optional[Union[str, Path]] = None,
) -> Any:
    """
    Download the records matching ``criteria`` as a file.

    Args:
        api: API object providing ``entity_class`` and ``criteria``
        url: Export URL, for example ``/department/export/xml``
        format: One of XML, JSON, Excel or CSV
        criteria: Filter fields declared in ``api.criteria``
        sort_request: ``{sort_field, sort_order}``
        auto_download: Save the file and return None
        show_loading: Show the loading indicator while the request runs
        output_dir: Where ``auto_download`` saves the file

    Returns:
        A ``DownloadedFile`` when ``auto_download`` is False, else None
    """
    check_object_argument("criteria", criteria, api.criteria, nullable=True)
    check_sort_request_argument(sort_request, api.entity_class)
    check_argument_type("auto_download", auto_download, bool)
    check_show_loading(show_loading)
    mime_type = mime_type_of(format)
    params = {}
    for part in (criteria, sort_request):
        if part:
            params.update(to_json(part, TO_JSON_OPTIONS))
    if isinstance(params.get("sort_field"), str):
        params["sort_field"] = to_snake_case(params["sort_field"])
    if isinstance(params.get("sort_order"), str):
        params["sort_order"] = params["sort_order"].upper()
    with loading(api, show_loading, LoadingKind.EXPORTING):
        result = api.http.download(url, params, mime_type, auto_download, output_dir=output_dir)
    api.logger.info(
        "Successfully export %ss to a %s file: %s",
        api.entity_class.__name__, format, result.filename if result is not None else "(none)",
    )
    return result
