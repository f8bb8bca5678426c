"""
Base model shared by every entity, info projection and page.
"""

import enum
from typing import Annotated, Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..serialization import ASSIGN_OPTIONS, SerializationOptions, load_fields

M = TypeVar("M", bound="Model")
T = TypeVar("T")

#: Identifiers are 64-bit integers or strings depending on the resource.
Id = Union[int, str]


def lenient(enum_class: Type[enum.Enum]) -> Any:
    """
    Annotation for an enum field that keeps unknown values as plain strings.
    """
    return Annotated[Union[enum_class, str], Field(union_mode="left_to_right")]


class Model(BaseModel):
    """
    Base class of all models.

    Attributes are snake_case. Input is accepted in snake_case or camelCase
    and undeclared fields are dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=False,
    )

    @classmethod
    def create(cls: Type[M], data: Any, options: SerializationOptions = ASSIGN_OPTIONS) -> Optional[M]:
        """
        Build an instance from a response body.

        Args:
            data: Parsed JSON object, an instance of this class, or None
            options: Naming options applied to the keys

        Returns:
            The instance, or None when ``data`` is None
        """
        if data is None:
            return None
        if isinstance(data, cls):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump()
        return cls.model_validate(load_fields(cls, data, options))

    @classmethod
    def create_array(cls: Type[M], data: Any, options: SerializationOptions = ASSIGN_OPTIONS) -> List[M]:
        if data is None:
            return []
        return [cls.create(item, options) for item in data]

    @classmethod
    def create_page(cls: Type[M], data: Any, options: SerializationOptions = ASSIGN_OPTIONS) -> Optional["Page[M]"]:
        if data is None:
            return None
        return Page[cls].model_validate(load_fields(Page[cls], data, options))

    def to_dict(self, by_alias: bool = False) -> Dict[str, Any]:
        """JSON-compatible dict without None fields, camelCase when ``by_alias``."""
        return self.model_dump(mode="json", by_alias=by_alias, exclude_none=True)


class AuditedEntity(Model):
    """Fields every persisted record carries."""

    id: Optional[Id] = None
    create_time: Optional[str] = None
    modify_time: Optional[str] = None
    delete_time: Optional[str] = None
    deleted: Optional[bool] = None

    @model_validator(mode="after")
    def _derive_deleted(self):
        if self.deleted is None and self.delete_time is not None:
            self.deleted = True
        return self


class Page(Model, Generic[T]):
    """One page of a list result."""

    total_count: int = 0
    total_pages: int = 0
    page_index: int = 0
    page_size: int = 0
    content: List[T] = Field(default_factory=list)
