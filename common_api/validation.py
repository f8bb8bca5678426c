"""
Runtime argument checks run before any request is sent.

Every check raises ``TypeError`` when a value has the wrong type and
``ValueError`` when the type is right but the value is unusable.
"""

import datetime
import enum
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel

from .serialization import to_snake_case

#: Accepted identifier types. ``bool`` is rejected explicitly.
ID_TYPES: Tuple[type, ...] = (str, int)

TIME_TYPES: Tuple[type, ...] = (str, datetime.datetime, datetime.date)

SORT_ORDERS = ("ASC", "DESC")


@dataclass(frozen=True)
class CriteriaField:
    """A query criterion a list endpoint accepts."""

    name: str
    types: Tuple[type, ...]


def _type_names(types: Iterable[type]) -> str:
    return " or ".join(t.__name__ for t in types)


def _is_instance(value: Any, types: Tuple[type, ...]) -> bool:
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def check_argument_type(
    name: str,
    value: Any,
    types: Union[type, Tuple[type, ...]],
    nullable: bool = False,
) -> None:
    """
    Check that ``value`` is an instance of one of ``types``.

    Args:
        name: Argument name used in the error message
        value: Value to check
        types: Accepted type or tuple of types
        nullable: Whether None is accepted

    Raises:
        TypeError: If the value has another type
    """
    if not isinstance(types, tuple):
        types = (types,)
    if value is None:
        if nullable:
            return
        raise TypeError(f"The argument '{name}' cannot be None.")
    if not _is_instance(value, types):
        raise TypeError(
            f"The argument '{name}' must be of type {_type_names(types)}, "
            f"got {type(value).__name__}."
        )


def check_id_argument_type(name: str, value: Any) -> None:
    """Check that ``value`` is a usable identifier (str or int, not bool)."""
    check_argument_type(name, value, ID_TYPES)
    if isinstance(value, str) and not value.strip():
        raise ValueError(f"The argument '{name}' cannot be an empty string.")


def check_id_array_argument_type(name: str, values: Any) -> None:
    """Check that ``values`` is a non-empty list of identifiers."""
    if values is None:
        raise TypeError(f"The argument '{name}' cannot be None.")
    if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
        raise TypeError(f"The argument '{name}' must be a list of IDs.")
    if len(values) == 0:
        raise ValueError(f"The argument '{name}' cannot be an empty list.")
    for i, value in enumerate(values):
        check_id_argument_type(f"{name}[{i}]", value)


def _as_mapping(name: str, obj: Any) -> Mapping[str, Any]:
    if isinstance(obj, BaseModel):
        return obj.model_dump(exclude_none=True)
    if isinstance(obj, Mapping):
        return obj
    raise TypeError(f"The argument '{name}' must be a dict, got {type(obj).__name__}.")


def check_object_argument(
    name: str,
    obj: Any,
    definition: Sequence[CriteriaField],
    nullable: bool = False,
) -> None:
    """
    Check an object against a field table.

    Fields whose value is None are skipped. Keys may be camelCase or
    snake_case.

    Raises:
        TypeError: If ``obj`` is None while not nullable, if it contains a
            field not in ``definition``, or if a field has the wrong type
    """
    if obj is None:
        if nullable:
            return
        raise TypeError(f"The argument '{name}' cannot be None.")
    data = _as_mapping(name, obj)
    if not data or not definition:
        return
    fields: Dict[str, Tuple[type, ...]] = {f.name: f.types for f in definition}
    for key, value in data.items():
        if value is None:
            continue
        field = to_snake_case(key)
        if field not in fields:
            raise TypeError(f'Unsupported field: "{name}.{key}"')
        check_argument_type(f"{name}.{key}", value, fields[field])


PAGE_REQUEST_FIELDS = (
    CriteriaField("page_index", (int,)),
    CriteriaField("page_size", (int,)),
)


def check_page_request_argument(page_request: Any) -> None:
    """Check an optional ``{page_index, page_size}`` object."""
    check_object_argument("page_request", page_request, PAGE_REQUEST_FIELDS, nullable=True)
    if page_request is None:
        return
    for key, value in _as_mapping("page_request", page_request).items():
        if value is not None and value < 0:
            raise ValueError(f"The field '{key}' of 'page_request' cannot be negative.")


def check_sort_request_argument(sort_request: Any, entity_class: Optional[Type[BaseModel]] = None) -> None:
    """
    Check an optional ``{sort_field, sort_order}`` object.

    When ``entity_class`` is given, ``sort_field`` must name one of its
    fields or an explicit wire alias such as ``dict``. ``sort_order`` must
    be ASC or DESC.
    """
    if sort_request is None:
        return
    data = _as_mapping("sort_request", sort_request)
    allowed = {"sort_field", "sort_order"}
    for key in data:
        if to_snake_case(key) not in allowed:
            raise TypeError(f"Unsupported field '{key}' in the argument 'sort_request'.")
    normalized = {to_snake_case(k): v for k, v in data.items()}
    sort_field = normalized.get("sort_field")
    sort_order = normalized.get("sort_order")
    check_argument_type("sort_request.sort_field", sort_field, str, nullable=True)
    check_argument_type("sort_request.sort_order", sort_order, (str, enum.Enum), nullable=True)
    if sort_field is not None and entity_class is not None:
        names = set(entity_class.model_fields)
        names.update(f.alias for f in entity_class.model_fields.values() if f.alias and f.alias_priority == 2)
        if to_snake_case(sort_field) not in names:
            raise TypeError(
                f"The sort field '{sort_field}' is not a field of {entity_class.__name__}."
            )
    if sort_order is not None:
        order = sort_order.value if isinstance(sort_order, enum.Enum) else sort_order
        if str(order).upper() not in SORT_ORDERS:
            raise ValueError(f"Invalid sort order '{order}', expected ASC or DESC.")
