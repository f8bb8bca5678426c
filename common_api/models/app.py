"""
Client applications and authentication payloads.
"""

from typing import List, Optional

from .base import AuditedEntity, Id, Model, lenient
from .common import Info, InfoWithEntity
from .enums import Platform, SocialNetwork, State
from .person import UserInfo


class Token(Model):
    """An access token and its lifetime."""

    value: Optional[str] = None
    create_time: Optional[str] = None
    max_age: Optional[int] = None


class App(AuditedEntity):
    code: Optional[str] = None
    name: Optional[str] = None
    category: Optional[InfoWithEntity] = None
    organization: Optional[Info] = None
    security_key: Optional[str] = None
    token: Optional[Token] = None
    last_authorize_time: Optional[str] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    state: Optional[lenient(State)] = None
    predefined: Optional[bool] = None


class Environment(Model):
    """Runtime environment reported on login."""

    platform: Optional[lenient(Platform)] = None
    os: Optional[str] = None
    os_version: Optional[str] = None
    browser: Optional[str] = None
    browser_version: Optional[str] = None
    device_id: Optional[Id] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class LoginResponse(Model):
    """Result of a login or registration."""

    app: Optional[Info] = None
    user: Optional[UserInfo] = None
    token: Optional[Token] = None
    privileges: Optional[List[str]] = None
    roles: Optional[List[str]] = None
    person: Optional[Info] = None
    employee: Optional[Info] = None


class RegisterUserParams(Model):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    verify_code: Optional[str] = None
    social_network: Optional[lenient(SocialNetwork)] = None
    app_id: Optional[Id] = None
    open_id: Optional[str] = None
    auto_login: Optional[bool] = None

