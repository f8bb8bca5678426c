"""
Data dictionaries and their entries.
"""

from typing import Optional

from pydantic import Field

from .base import AuditedEntity, Id, lenient
from .common import Info, InfoWithEntity
from .enums import State


class Dict(AuditedEntity):
    code: Optional[str] = None
    name: Optional[str] = None
    app: Optional[Info] = None
    category: Optional[InfoWithEntity] = None
    standard_code: Optional[str] = None
    standard_doc: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    state: Optional[lenient(State)] = None
    predefined: Optional[bool] = None


class DictEntry(AuditedEntity):
    dict_info: Optional[Info] = Field(None, alias="dict")
    code: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[Info] = None
    index: Optional[int] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class DictEntryInfo(Info):
    dict_id: Optional[Id] = None
    parent_id: Optional[Id] = None
