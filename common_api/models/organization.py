"""
Organizations, their departments and employees.
"""

from typing import Optional

from .base import AuditedEntity, Id, lenient
from .common import Attachment, Contact, CredentialInfo, Info, InfoWithEntity, StatefulInfo
from .enums import Gender, State


class Category(AuditedEntity):
    """A category of records of one entity type."""

    code: Optional[str] = None
    name: Optional[str] = None
    entity: Optional[str] = None
    parent: Optional[InfoWithEntity] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Organization(AuditedEntity):
    code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[InfoWithEntity] = None
    parent: Optional[Info] = None
    contact: Optional[Contact] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    comment: Optional[str] = None
    state: Optional[lenient(State)] = None
    test: Optional[bool] = None
    predefined: Optional[bool] = None


class Department(AuditedEntity):
    code: Optional[str] = None
    internal_code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[InfoWithEntity] = None
    organization: Optional[Info] = None
    parent: Optional[Info] = None
    contact: Optional[Contact] = None
    description: Optional[str] = None
    comment: Optional[str] = None
    state: Optional[lenient(State)] = None
    test: Optional[bool] = None
    predefined: Optional[bool] = None


class Employee(AuditedEntity):
    code: Optional[str] = None
    internal_code: Optional[str] = None
    username: Optional[str] = None
    person_id: Optional[Id] = None
    name: Optional[str] = None
    gender: Optional[lenient(Gender)] = None
    birthday: Optional[str] = None
    credential: Optional[CredentialInfo] = None
    category: Optional[InfoWithEntity] = None
    organization: Optional[Info] = None
    department: Optional[Info] = None
    photo: Optional[Attachment] = None
    contact: Optional[Contact] = None
    job_title: Optional[str] = None
    comment: Optional[str] = None
    state: Optional[lenient(State)] = None
    test: Optional[bool] = None


class EmployeeInfo(StatefulInfo):
    username: Optional[str] = None
    organization_id: Optional[Id] = None
    department_id: Optional[Id] = None
    job_title: Optional[str] = None
