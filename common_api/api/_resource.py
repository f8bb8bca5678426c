"""
Base classes of the per-resource APIs.

A resource API binds a URL prefix, a model class and a criteria table to
the request helpers in ``impl``. Subclasses only declare those
attributes and add the endpoints specific to their resource.
"""

import functools
import inspect
import logging
from typing import Any, Callable, Optional, Sequence, Tuple, Type, TypeVar

from ..loading import Loading
from ..models import Model, State
from ..validation import ID_TYPES, TIME_TYPES, CriteriaField
from ._http import HTTPClient
from .impl import (
    add_impl,
    batch_delete_impl,
    batch_erase_impl,
    batch_purge_impl,
    batch_restore_impl,
    delete_by_key_impl,
    delete_impl,
    erase_by_key_impl,
    erase_impl,
    exists_by_key_impl,
    exists_impl,
    export_impl,
    get_by_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_info_impl,
    import_impl,
    list_impl,
    list_info_impl,
    purge_all_impl,
    purge_by_key_impl,
    purge_impl,
    restore_by_key_impl,
    restore_impl,
    update_by_key_impl,
    update_impl,
    update_property_by_key_impl,
    update_property_impl,
)

F = TypeVar("F", bound=Callable[..., Any])

#: Arguments whose value never reaches the log.
SECRET_ARGUMENTS = frozenset({"password", "security_key", "token", "verify_code"})

STATE_TYPES = (State, str)


def logged(func: F) -> F:
    """
    Log each call of an API method at DEBUG level with its arguments.

    Secret arguments are masked.
    """
    if getattr(func, "__logged__", False):
        return func
    signature = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        log = self.logger
        if log.isEnabledFor(logging.DEBUG):
            bound = signature.bind_partial(self, *args, **kwargs)
            shown = []
            for name, value in list(bound.arguments.items())[1:]:
                if name in SECRET_ARGUMENTS and value is not None:
                    value = "***"
                shown.append(f"{name}={value!r}")
            log.debug("%s.%s(%s)", type(self).__name__, func.__name__, ", ".join(shown))
        return func(self, *args, **kwargs)

    wrapper.__logged__ = True
    return wrapper  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Criteria tables
# ---------------------------------------------------------------------------

def fields(**types: Any) -> Tuple[CriteriaField, ...]:
    """Build criteria fields from ``name=type`` or ``name=(type, ...)`` pairs."""
    return tuple(
        CriteriaField(name, t if isinstance(t, tuple) else (t,))
        for name, t in types.items()
    )


def id_code_name(prefix: str) -> Tuple[CriteriaField, ...]:
    """Criteria on a referenced record: ``<prefix>_id``, ``_code`` and ``_name``."""
    return (
        CriteriaField(f"{prefix}_id", ID_TYPES),
        CriteriaField(f"{prefix}_code", (str,)),
        CriteriaField(f"{prefix}_name", (str,)),
    )


def time_range(prefix: str) -> Tuple[CriteriaField, ...]:
    return (
        CriteriaField(f"{prefix}_start", TIME_TYPES),
        CriteriaField(f"{prefix}_end", TIME_TYPES),
    )


AUDIT_CRITERIA = time_range("create_time") + time_range("modify_time") + time_range("delete_time")

REGION_CRITERIA = (
    id_code_name("country")
    + id_code_name("province")
    + id_code_name("city")
    + id_code_name("district")
    + id_code_name("street")
)


# ---------------------------------------------------------------------------
# API classes
# ---------------------------------------------------------------------------

class BaseAPI:
    """
    Common state of every API object.

    Public methods of subclasses are wrapped with :func:`logged`.

    Args:
        http: Transport shared by all APIs of a client
        loading: Loading indicator; a logging-only one by default
        logger: Logger; ``common_api.api.<ClassName>`` by default
    """

    entity_class: Type[Model] = Model
    entity_info_class: Optional[Type[Model]] = None
    criteria: Sequence[CriteriaField] = ()

    def __init__(
        self,
        http: HTTPClient,
        loading: Optional[Loading] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.http = http
        self.loading = loading if loading is not None else Loading()
        self.logger = logger or logging.getLogger(f"common_api.api.{type(self).__name__}")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name, value in list(vars(cls).items()):
            if not name.startswith("_") and inspect.isfunction(value):
                setattr(cls, name, logged(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.entity_class.__name__})"


class FileTransferMixin(BaseAPI):
    """Export to and import from XML, JSON, Excel and CSV files."""

    path = ""

    def export_xml(self, criteria=None, sort_request=None, auto_download=True, show_loading=True, output_dir=None):
        return export_impl(self, f"{self.path}/export/xml", "XML", criteria, sort_request,
                           auto_download, show_loading, output_dir)

    def export_json(self, criteria=None, sort_request=None, auto_download=True, show_loading=True, output_dir=None):
        return export_impl(self, f"{self.path}/export/json", "JSON", criteria, sort_request,
                           auto_download, show_loading, output_dir)

    def export_excel(self, criteria=None, sort_request=None, auto_download=True, show_loading=True, output_dir=None):
        return export_impl(self, f"{self.path}/export/excel", "Excel", criteria, sort_request,
                           auto_download, show_loading, output_dir)

    def export_csv(self, criteria=None, sort_request=None, auto_download=True, show_loading=True, output_dir=None):
        return export_impl(self, f"{self.path}/export/csv", "CSV", criteria, sort_request,
                           auto_download, show_loading, output_dir)

    def import_xml(self, file, parallel=False, threads=None, show_loading=True):
        return import_impl(self, f"{self.path}/import/xml", "XML", file, parallel, threads, show_loading)

    def import_json(self, file, parallel=False, threads=None, show_loading=True):
        return import_impl(self, f"{self.path}/import/json", "JSON", file, parallel, threads, show_loading)

    def import_excel(self, file, parallel=False, threads=None, show_loading=True):
        return import_impl(self, f"{self.path}/import/excel", "Excel", file, parallel, threads, show_loading)

    def import_csv(self, file, parallel=False, threads=None, show_loading=True):
        return import_impl(self, f"{self.path}/import/csv", "CSV", file, parallel, threads, show_loading)

    def export(self, format: str, criteria=None, sort_request=None, auto_download=True,
               show_loading=True, output_dir=None):
        """Export in the format named by ``format`` (xml, json, excel or csv)."""
        method = getattr(self, f"export_{format.lower()}", None)
        if method is None:
            raise ValueError(f"Unsupported file format: {format}")
        return method(criteria, sort_request, auto_download, show_loading, output_dir)

    def import_file(self, format: str, file, parallel=False, threads=None, show_loading=True):
        """Import a file in the format named by ``format``."""
        method = getattr(self, f"import_{format.lower()}", None)
        if method is None:
            raise ValueError(f"Unsupported file format: {format}")
        return method(file, parallel, threads, show_loading)


class EntityAPI(FileTransferMixin):
    """
    The operations every resource addressed by ID supports.

    Subclasses set ``path`` (for example ``/department``),
    ``entity_class``, ``entity_info_class`` and ``criteria``.
    """

    def list(self, page_request=None, criteria=None, sort_request=None, show_loading=True):
        """
        List records page by page.

        Args:
            page_request: ``PageRequest`` or ``{page_index, page_size}``
            criteria: Filter fields declared in ``criteria``
            sort_request: ``SortRequest`` or ``{sort_field, sort_order}``
            show_loading: Show the loading indicator while the request runs

        Returns:
            A ``Page`` of ``entity_class``
        """
        return list_impl(self, self.path, page_request, criteria, sort_request, show_loading)

    def list_info(self, page_request=None, criteria=None, sort_request=None, show_loading=True):
        """List the info projections of records page by page."""
        return list_info_impl(self, f"{self.path}/info", page_request, criteria, sort_request, show_loading)

    def get(self, id, show_loading=True):
        return get_impl(self, f"{self.path}/{{id}}", id, show_loading)

    def get_info(self, id, show_loading=True):
        return get_info_impl(self, f"{self.path}/{{id}}/info", id, show_loading)

    def add(self, entity, show_loading=True):
        return add_impl(self, self.path, entity, show_loading)

    def update(self, entity, show_loading=True):
        return update_impl(self, f"{self.path}/{{id}}", entity, show_loading)

    def delete(self, id, show_loading=True):
        """Mark a record deleted and return the deletion timestamp."""
        return delete_impl(self, f"{self.path}/{{id}}", id, show_loading)

    def batch_delete(self, ids, show_loading=True):
        return batch_delete_impl(self, f"{self.path}/batch", ids, show_loading)

    def restore(self, id, show_loading=True):
        return restore_impl(self, f"{self.path}/{{id}}", id, show_loading)

    def batch_restore(self, ids, show_loading=True):
        return batch_restore_impl(self, f"{self.path}/batch", ids, show_loading)

    def purge(self, id, show_loading=True):
        """Permanently remove a record that was marked deleted."""
        return purge_impl(self, f"{self.path}/{{id}}/purge", id, show_loading)

    def purge_all(self, show_loading=True):
        """Permanently remove every record marked deleted and return how many."""
        return purge_all_impl(self, f"{self.path}/purge", show_loading)

    def batch_purge(self, ids, show_loading=True):
        return batch_purge_impl(self, f"{self.path}/batch/purge", ids, show_loading)

    def erase(self, id, show_loading=True):
        """Permanently remove a record whether or not it was marked deleted."""
        return erase_impl(self, f"{self.path}/{{id}}/erase", id, show_loading)

    def batch_erase(self, ids, show_loading=True):
        return batch_erase_impl(self, f"{self.path}/batch/erase", ids, show_loading)

    def exists(self, id, show_loading=True):
        return exists_impl(self, f"{self.path}/{{id}}", id, show_loading)


class CodedEntityAPI(EntityAPI):
    """Adds the operations addressing a record by its unique code."""

    def get_by_code(self, code, show_loading=True):
        return get_by_key_impl(self, f"{self.path}/code/{{code}}", "code", code, show_loading)

    def get_info_by_code(self, code, show_loading=True):
        return get_info_by_key_impl(self, f"{self.path}/code/{{code}}/info", "code", code, show_loading)

    def update_by_code(self, entity, show_loading=True):
        return update_by_key_impl(self, f"{self.path}/code/{{code}}", "code", entity, show_loading)

    def delete_by_code(self, code, show_loading=True):
        return delete_by_key_impl(self, f"{self.path}/code/{{code}}", "code", code, show_loading)

    def restore_by_code(self, code, show_loading=True):
        return restore_by_key_impl(self, f"{self.path}/code/{{code}}", "code", code, show_loading)

    def purge_by_code(self, code, show_loading=True):
        return purge_by_key_impl(self, f"{self.path}/code/{{code}}/purge", "code", code, show_loading)

    def erase_by_code(self, code, show_loading=True):
        return erase_by_key_impl(self, f"{self.path}/code/{{code}}/erase", "code", code, show_loading)

    def exists_by_code(self, code, show_loading=True):
        return exists_by_key_impl(self, f"{self.path}/code/{{code}}", "code", code, show_loading)


class StatefulMixin(BaseAPI):
    """``update_state`` for resources carrying a ``State``."""

    path = ""

    def update_state(self, id, state, show_loading=True):
        """
        Change the state of a record.

        Args:
            id: ID of the record
            state: A ``State`` or its name

        Returns:
            The modification timestamp
        """
        return update_property_impl(self, f"{self.path}/{{id}}/state", id, "state", STATE_TYPES,
                                    state, show_loading, wrap_key="state")


class StatefulCodedMixin(StatefulMixin):
    def update_state_by_code(self, code, state, show_loading=True):
        return update_property_by_key_impl(self, f"{self.path}/code/{{code}}/state", "code", code,
                                           "state", STATE_TYPES, state, show_loading, wrap_key="state")


class StatefulEntityAPI(StatefulMixin, EntityAPI):
    pass


class StatefulCodedEntityAPI(StatefulCodedMixin, CodedEntityAPI):
    pass


class UserLinkedEntityAPI(EntityAPI):
    """
    Resources that can carry a login account along with the record.

    With ``with_user=True`` the server applies the operation to the linked
    ``User`` as well.
    """

    def update(self, entity, with_user=False, show_loading=True):
        return update_impl(self, f"{self.path}/{{id}}", entity, show_loading, {"with_user": with_user})

    def delete(self, id, with_user=False, show_loading=True):
        return delete_impl(self, f"{self.path}/{{id}}", id, show_loading, {"with_user": with_user})

    def batch_delete(self, ids, with_user=False, show_loading=True):
        return batch_delete_impl(self, f"{self.path}/batch", ids, show_loading, {"with_user": with_user})

    def restore(self, id, with_user=False, show_loading=True):
        return restore_impl(self, f"{self.path}/{{id}}", id, show_loading, {"with_user": with_user})

    def batch_restore(self, ids, with_user=False, show_loading=True):
        return batch_restore_impl(self, f"{self.path}/batch", ids, show_loading, {"with_user": with_user})

    def purge(self, id, with_user=False, show_loading=True):
        return purge_impl(self, f"{self.path}/{{id}}/purge", id, show_loading, {"with_user": with_user})

    def purge_all(self, with_user=False, show_loading=True):
        return purge_all_impl(self, f"{self.path}/purge", show_loading, {"with_user": with_user})

    def batch_purge(self, ids, with_user=False, show_loading=True):
        return batch_purge_impl(self, f"{self.path}/batch/purge", ids, show_loading, {"with_user": with_user})

    def erase(self, id, with_user=False, show_loading=True):
        return erase_impl(self, f"{self.path}/{{id}}/erase", id, show_loading, {"with_user": with_user})

    def batch_erase(self, ids, with_user=False, show_loading=True):
        return batch_erase_impl(self, f"{self.path}/batch/erase", ids, show_loading, {"with_user": with_user})
