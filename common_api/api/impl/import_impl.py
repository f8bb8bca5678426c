"""
Helper for importing records from a file.
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...loading import LoadingKind
from ...validation import check_argument_type
from ._support import check_show_loading, loading, query
from .export_impl import mime_type_of


def import_impl(
    api: Any,
    url: str,
    format: str,
    file: Any,
    parallel: Optional[bool] = False,
    threads: Optional[int] = None,
    show_loading: bool = True,
) -> Any:
    """
    Upload a file as the multipart ``file`` part and return how many
    records the server imported.

    Args:
        file: Path of the file, or a binary file object with a ``name``
        parallel: Let the server import in parallel
        threads: Number of server threads for a parallel import
    """
    if file is None:
        raise TypeError("The argument 'file' cannot be None.")
    if not isinstance(file, (str, os.PathLike)) and not hasattr(file, "read"):
        raise TypeError("The argument 'file' must be a path or a binary file object.")
    check_argument_type("parallel", parallel, bool, nullable=True)
    check_argument_type("threads", threads, int, nullable=True)
    check_show_loading(show_loading)
    mime_type = mime_type_of(format)
    params = query({"parallel": parallel, "threads": threads})

    if isinstance(file, (str, os.PathLike)):
        path = Path(file)
        with open(path, "rb") as fh, loading(api, show_loading, LoadingKind.IMPORTING):
            count = api.http.post(url, params=params, files={"file": (path.name, fh, mime_type)})
        filename = path.name
    else:
        filename = Path(getattr(file, "name", None) or "upload").name
        with loading(api, show_loading, LoadingKind.IMPORTING):
            count = api.http.post(url, params=params, files={"file": (filename, file, mime_type)})

    api.logger.info(
        "Successfully import %d %ss from a %s file: %s",
        count or 0, api.entity_class.__name__, format, filename,
    )
    return count
