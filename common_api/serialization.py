"""
Naming conversion and JSON (de)serialization options.

The wire uses snake_case field names. Models expose snake_case attributes
and camelCase aliases, so payloads in either style are accepted on input.
Options are plain immutable values passed to every call.
"""

import datetime
import enum
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type, get_args

from pydantic import BaseModel

_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")


class NamingStyle(str, enum.Enum):
    """Field naming conventions."""

    LOWER_UNDERSCORE = "lower_underscore"
    LOWER_CAMEL = "lower_camel"


def to_snake_case(name: str) -> str:
    """
    Convert a field name to snake_case.

    Already snake_case names are returned unchanged.

    Examples:
        >>> to_snake_case("createTime")
        'create_time'
        >>> to_snake_case("ipAddress")
        'ip_address'
        >>> to_snake_case("create_time")
        'create_time'
    """
    name = _ACRONYM_RE.sub(r"\1_\2", name)
    name = _CAMEL_RE.sub(r"\1_\2", name)
    return name.lower()


def to_camel_case(name: str) -> str:
    """
    Convert a field name to lowerCamelCase.

    Examples:
        >>> to_camel_case("create_time")
        'createTime'
        >>> to_camel_case("createTime")
        'createTime'
    """
    if "_" not in name:
        return name[:1].lower() + name[1:]
    head, *rest = [part for part in name.split("_") if part]
    return head.lower() + "".join(part[:1].upper() + part[1:].lower() for part in rest)


_CONVERTERS: Dict[NamingStyle, Callable[[str], str]] = {
    NamingStyle.LOWER_UNDERSCORE: to_snake_case,
    NamingStyle.LOWER_CAMEL: to_camel_case,
}


@dataclass(frozen=True)
class SerializationOptions:
    """
    How keys and empty values are treated when (de)serializing.

    Attributes:
        key_style: naming convention the keys are converted to
        remove_empty_fields: drop keys whose value is None
    """

    key_style: NamingStyle = NamingStyle.LOWER_UNDERSCORE
    remove_empty_fields: bool = False

    def convert_key(self, key: str) -> str:
        return _CONVERTERS[self.key_style](key)


#: Options for turning a response body into a model.
ASSIGN_OPTIONS = SerializationOptions(
    key_style=NamingStyle.LOWER_UNDERSCORE,
    remove_empty_fields=False,
)

#: Options for turning a model or dict into a request body or query.
TO_JSON_OPTIONS = SerializationOptions(
    key_style=NamingStyle.LOWER_UNDERSCORE,
    remove_empty_fields=True,
)


def convert_keys(value: Any, options: SerializationOptions) -> Any:
    """Recursively rename dict keys according to ``options``."""
    if isinstance(value, dict):
        return {
            options.convert_key(k) if isinstance(k, str) else k: convert_keys(v, options)
            for k, v in value.items()
            if not (options.remove_empty_fields and v is None)
        }
    if isinstance(value, (list, tuple)):
        return [convert_keys(v, options) for v in value]
    return value


def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    """The model class a field annotation holds, directly or inside a list or Optional."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None


def load_fields(model_class: Type[BaseModel], data: Any, options: SerializationOptions) -> Any:
    """
    Rename the keys of a response body that name declared fields of
    ``model_class`` to their snake_case field names.

    Only values of fields holding models are descended into, so free-form
    values (``Any`` or dict fields) keep their keys as sent.
    """
    if isinstance(data, (list, tuple)):
        return [load_fields(model_class, item, options) for item in data]
    if not isinstance(data, dict):
        return data
    fields = model_class.model_fields
    result = {}
    for key, value in data.items():
        if options.remove_empty_fields and value is None:
            continue
        name = to_snake_case(key) if isinstance(key, str) else key
        field = fields.get(name)
        if field is None:
            result[key] = value
            continue
        nested = _nested_model(field.annotation)
        result[name] = load_fields(nested, value, options) if nested is not None else value
    return result


def dump_fields(model_class: Type[BaseModel], data: Dict[str, Any], options: SerializationOptions) -> Any:
    """
    Rename the keys of a model dumped by field name to wire names.

    Explicit aliases win over field names, then the key style of
    ``options`` applies. Free-form values are left as they are.
    """
    if isinstance(data, list):
        return [dump_fields(model_class, item, options) for item in data]
    if not isinstance(data, dict):
        return data
    result = {}
    for name, value in data.items():
        field = model_class.model_fields.get(name)
        if field is None:
            result[name] = value
            continue
        key = field.alias if field.alias and field.alias_priority == 2 else name
        nested = _nested_model(field.annotation)
        result[options.convert_key(key)] = dump_fields(nested, value, options) if nested is not None else value
    return result


def to_json(value: Any, options: SerializationOptions = TO_JSON_OPTIONS) -> Any:
    """
    Turn a model, dict, list or scalar into JSON-compatible data.

    Only declared model fields are renamed, enums become their values and dates
    become ISO-8601 strings.
    """
    if value is None:
        return None
    if isinstance(value, BaseModel):
        dumped = value.model_dump(mode="json", exclude_none=options.remove_empty_fields)
        return dump_fields(type(value), dumped, options)
    if isinstance(value, dict):
        return {
            options.convert_key(k) if isinstance(k, str) else k: to_json(v, options)
            for k, v in value.items()
            if not (options.remove_empty_fields and v is None)
        }
    if isinstance(value, (list, tuple, set)):
        return [to_json(v, options) for v in value]
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return value


def stringify_id(value: Any) -> str:
    """String form of an identifier for URL substitution."""
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)
