"""
People, user accounts, roles and role assignments.
"""

from typing import List, Optional

from .base import AuditedEntity, Id, Model, lenient
from .common import Attachment, Contact, CredentialInfo, Info, InfoWithEntity, StatefulInfo
from .enums import Gender, State


class Person(AuditedEntity):
    name: Optional[str] = None
    username: Optional[str] = None
    gender: Optional[lenient(Gender)] = None
    birthday: Optional[str] = None
    credential: Optional[CredentialInfo] = None
    has_medicare: Optional[bool] = None
    medicare_type: Optional[str] = None
    medicare_city: Optional[Info] = None
    medicare_number: Optional[str] = None
    has_social_security: Optional[bool] = None
    social_security_city: Optional[Info] = None
    social_security_number: Optional[str] = None
    source: Optional[Info] = None
    category: Optional[InfoWithEntity] = None
    photo: Optional[Attachment] = None
    contact: Optional[Contact] = None
    guardian: Optional[Info] = None
    organization: Optional[Info] = None
    comment: Optional[str] = None
    state: Optional[lenient(State)] = None
    test: Optional[bool] = None


class PersonInfo(StatefulInfo):
    username: Optional[str] = None
    gender: Optional[lenient(Gender)] = None
    mobile: Optional[str] = None
    email: Optional[str] = None


class User(AuditedEntity):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    gender: Optional[lenient(Gender)] = None
    avatar: Optional[Attachment] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[Info] = None
    roles: Optional[List[str]] = None
    last_login_time: Optional[str] = None
    valid_time: Optional[str] = None
    expired_time: Optional[str] = None
    comment: Optional[str] = None
    state: Optional[lenient(State)] = None
    test: Optional[bool] = None
    predefined: Optional[bool] = None


class UserInfo(StatefulInfo):
    username: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[Attachment] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    roles: Optional[List[str]] = None


class Role(AuditedEntity):
    app: Optional[Info] = None
    code: Optional[str] = None
    name: Optional[str] = None
    guest: Optional[bool] = None
    basic: Optional[bool] = None
    description: Optional[str] = None
    state: Optional[lenient(State)] = None
    predefined: Optional[bool] = None


class UserRole(Model):
    """Assignment of a role of an app to a user."""

    id: Optional[Id] = None
    user: Optional[Info] = None
    app: Optional[Info] = None
    role: Optional[Info] = None
    create_time: Optional[str] = None
