"""
Common API Client - Main facade for all API operations.
"""

import logging
from typing import Optional

from ..config import CommonApiConfig, get_config
from ..loading import Loading
from ._http import HTTPClient
from .app import AppAPI
from .attachment import AttachmentAPI
from .authenticate import AppAuthenticateAPI, UserAuthenticateAPI
from .current_user import CurrentUserAPI
from .device import DeviceAPI
from .dict import DictAPI, DictEntryAPI
from .feedback import FeedbackAPI
from .organization import CategoryAPI, DepartmentAPI, EmployeeAPI, OrganizationAPI
from .person import PersonAPI, RoleAPI, UserAPI, UserRoleAPI
from .region import CityAPI, CountryAPI, DistrictAPI, ProvinceAPI, StreetAPI
from .system import SystemAPI
from .verify_code import VerifyCodeAPI

logger = logging.getLogger(__name__)


class CommonAPIClient:
    """
    Client for the common REST API.

    All resource APIs share one transport and one loading indicator, so a
    login through ``user_authenticate`` authenticates every other API.

    Usage:
        with CommonAPIClient() as client:
            client.user_authenticate.login_by_username("alice", "secret")
            page = client.department.list({"page_index": 0, "page_size": 20})
            employee = client.employee.get_by_code("E001")
    """

    #: Attribute name of every resource API and its class.
    RESOURCES = {
        "app": AppAPI,
        "attachment": AttachmentAPI,
        "category": CategoryAPI,
        "city": CityAPI,
        "country": CountryAPI,
        "department": DepartmentAPI,
        "device": DeviceAPI,
        "dict": DictAPI,
        "dict_entry": DictEntryAPI,
        "district": DistrictAPI,
        "employee": EmployeeAPI,
        "feedback": FeedbackAPI,
        "organization": OrganizationAPI,
        "person": PersonAPI,
        "province": ProvinceAPI,
        "role": RoleAPI,
        "street": StreetAPI,
        "user": UserAPI,
        "user_role": UserRoleAPI,
    }

    def __init__(self, config: Optional[CommonApiConfig] = None, loading: Optional[Loading] = None):
        """
        Initialize the API client.

        Args:
            config: Optional configuration. Uses global config if not provided.
            loading: Loading indicator shared by every API
        """
        self._http = HTTPClient(config)
        self.loading = loading if loading is not None else Loading()

        for name, api_class in self.RESOURCES.items():
            setattr(self, name, api_class(self._http, self.loading))

        self.user_authenticate = UserAuthenticateAPI(self._http, self.loading)
        self.app_authenticate = AppAuthenticateAPI(self._http, self.loading)
        self.current_user = CurrentUserAPI(self._http, self.loading)
        self.verify_code = VerifyCodeAPI(self._http, self.loading)
        self.system = SystemAPI(self._http, self.loading)

    @property
    def http(self) -> HTTPClient:
        return self._http

    @property
    def config(self) -> CommonApiConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self._http.base_url

    def resource(self, name: str):
        """
        Look up a resource API by name, as written on the command line.

        ``dict-entry`` and ``dict_entry`` both name ``DictEntryAPI``.

        Raises:
            KeyError: If there is no such resource
        """
        key = name.strip().lower().replace("-", "_")
        if key not in self.RESOURCES:
            raise KeyError(name)
        return getattr(self, key)

    def close(self) -> None:
        """Close the HTTP session."""
        self._http.close()

    def __enter__(self) -> "CommonAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(config: Optional[CommonApiConfig] = None, loading: Optional[Loading] = None) -> CommonAPIClient:
    """
    Get an API client instance.

    Args:
        config: Optional configuration
        loading: Optional loading indicator

    Returns:
        CommonAPIClient instance
    """
    if config is None:
        config = get_config()
    return CommonAPIClient(config, loading)
