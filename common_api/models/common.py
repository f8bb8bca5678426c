"""
Value objects and projections reused across resources.
"""

from typing import Any, Optional

from .base import AuditedEntity, Id, Model, lenient
from .enums import AttachmentType, CredentialType, SortOrder, State


class Info(Model):
    """Reference to another record by its ID, code and name."""

    id: Optional[Id] = None
    code: Optional[str] = None
    name: Optional[str] = None
    deleted: Optional[bool] = None


class StatefulInfo(Info):
    state: Optional[lenient(State)] = None


class InfoWithEntity(Info):
    """Info of a record that belongs to an entity type, such as a category."""

    entity: Optional[str] = None


class CredentialInfo(Model):
    type: Optional[lenient(CredentialType)] = None
    number: Optional[str] = None


class Location(Model):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None


class Address(Model):
    country: Optional[Info] = None
    province: Optional[Info] = None
    city: Optional[Info] = None
    district: Optional[Info] = None
    street: Optional[Info] = None
    detail: Optional[str] = None
    postalcode: Optional[str] = None
    location: Optional[Location] = None


class Contact(Model):
    phone: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    address: Optional[Address] = None
    phone_verified: Optional[bool] = None
    mobile_verified: Optional[bool] = None
    email_verified: Optional[bool] = None


class Upload(AuditedEntity):
    """A file stored by the server."""

    filename: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    metadata: Optional[Any] = None


class Attachment(AuditedEntity):
    """A file attached to the property of another record."""

    owner_type: Optional[str] = None
    owner_id: Optional[Id] = None
    owner_property: Optional[str] = None
    type: Optional[lenient(AttachmentType)] = None
    category: Optional[InfoWithEntity] = None
    index: Optional[int] = None
    title: Optional[str] = None
    upload: Optional[Upload] = None
    state: Optional[lenient(State)] = None
    visible: Optional[bool] = None
    description: Optional[str] = None


class ErrorInfo(Model):
    """Error body returned by the server."""

    type: Optional[str] = None
    code: Optional[str] = None
    message: Optional[str] = None
    params: Optional[Any] = None


class PageRequest(Model):
    page_index: int = 0
    page_size: int = 10


class SortRequest(Model):
    sort_field: Optional[str] = None
    sort_order: Optional[lenient(SortOrder)] = None
