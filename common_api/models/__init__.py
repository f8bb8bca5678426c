"""
Models of the common API resources.
"""

from .base import AuditedEntity, Id, Model, Page
from .enums import (
    AttachmentType,
    CredentialType,
    DeviceStatus,
    FeedbackAction,
    FeedbackState,
    Gender,
    Platform,
    SocialNetwork,
    SortOrder,
    State,
    VerifyScene,
)
from .common import (
    Address,
    Attachment,
    Contact,
    CredentialInfo,
    ErrorInfo,
    Info,
    InfoWithEntity,
    Location,
    PageRequest,
    SortRequest,
    StatefulInfo,
    Upload,
)
from .region import City, Country, District, Province, Region, Street
from .dict import Dict, DictEntry, DictEntryInfo
from .organization import Category, Department, Employee, EmployeeInfo, Organization
from .person import Person, PersonInfo, Role, User, UserInfo, UserRole
from .app import App, Environment, LoginResponse, RegisterUserParams, Token
from .device import Device, Hardware, OperatingSystem, Software
from .feedback import Feedback, FeedbackTrack

__all__ = [
    "Address", "App", "Attachment", "AttachmentType", "AuditedEntity",
    "Category", "City", "Contact", "Country", "CredentialInfo",
    "CredentialType", "Department", "Device", "DeviceStatus", "Dict",
    "DictEntry", "DictEntryInfo", "District", "Employee", "EmployeeInfo",
    "Environment", "ErrorInfo", "Feedback", "FeedbackAction",
    "FeedbackState", "FeedbackTrack", "Gender", "Hardware", "Id", "Info",
    "InfoWithEntity", "Location", "LoginResponse", "Model",
    "OperatingSystem", "Organization", "Page", "PageRequest", "Person",
    "PersonInfo", "Platform", "Province", "Region", "RegisterUserParams",
    "Role", "SocialNetwork", "Software", "SortOrder", "SortRequest",
    "State", "StatefulInfo", "Street", "Token", "Upload", "User",
    "UserInfo", "UserRole", "VerifyScene",
]
