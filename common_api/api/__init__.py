"""
Common API Client Package.

Structure:
    - client.py: Main CommonAPIClient facade
    - _http.py: Base HTTP client with session, auth, and error handling
    - _resource.py: Base classes binding a resource to the request helpers
    - impl/: Request helpers shared by every resource
    - one module per group of resources (organization, person, region, ...)
    - authenticate.py, current_user.py, verify_code.py, system.py

Usage:
    from common_api.api import CommonAPIClient, get_client

    client = get_client()
    department = client.department.get_by_code("D001")
"""

from ._http import DownloadedFile, HTTPClient
from ._resource import (
    BaseAPI,
    CodedEntityAPI,
    EntityAPI,
    StatefulCodedEntityAPI,
    StatefulEntityAPI,
    logged,
)
from .app import AppAPI
from .attachment import AttachmentAPI
from .authenticate import AppAuthenticateAPI, UserAuthenticateAPI
from .client import CommonAPIClient, get_client
from .current_user import CurrentUserAPI
from .device import DeviceAPI
from .dict import DictAPI, DictEntryAPI
from .feedback import FeedbackAPI
from .organization import CategoryAPI, DepartmentAPI, EmployeeAPI, OrganizationAPI
from .person import PersonAPI, RoleAPI, UserAPI, UserRoleAPI
from .region import CityAPI, CountryAPI, DistrictAPI, ProvinceAPI, StreetAPI
from .system import SystemAPI
from .verify_code import VerifyCodeAPI

__all__ = [
    # Main client
    "CommonAPIClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    "DownloadedFile",
    # Base classes
    "BaseAPI",
    "EntityAPI",
    "CodedEntityAPI",
    "StatefulEntityAPI",
    "StatefulCodedEntityAPI",
    "logged",
    # Resource APIs
    "AppAPI",
    "AttachmentAPI",
    "CategoryAPI",
    "CityAPI",
    "CountryAPI",
    "DepartmentAPI",
    "DeviceAPI",
    "DictAPI",
    "DictEntryAPI",
    "DistrictAPI",
    "EmployeeAPI",
    "FeedbackAPI",
    "OrganizationAPI",
    "PersonAPI",
    "ProvinceAPI",
    "RoleAPI",
    "StreetAPI",
    "UserAPI",
    "UserRoleAPI",
    # Authentication and account APIs
    "AppAuthenticateAPI",
    "CurrentUserAPI",
    "SystemAPI",
    "UserAuthenticateAPI",
    "VerifyCodeAPI",
]
