"""
Shared fixtures.
"""

from unittest.mock import MagicMock

import pytest

from common_api.api import DepartmentAPI, EmployeeAPI
from common_api.api._http import HTTPClient
from common_api.loading import Loading


@pytest.fixture
def http():
    """Mock transport; set return values per test."""
    return MagicMock(spec=HTTPClient)


@pytest.fixture
def loading():
    return MagicMock(spec=Loading)


@pytest.fixture
def department_api(http, loading):
    return DepartmentAPI(http, loading)


@pytest.fixture
def employee_api(http, loading):
    return EmployeeAPI(http, loading)


@pytest.fixture
def department_json():
    """A department as the server sends it."""
    return {
        'id': 1001,
        'code': 'SALES',
        'name': 'Sales',
        'state': 'NORMAL',
        'organization': {'id': 1, 'code': 'HQ', 'name': 'Headquarters'},
        'create_time': '2024-01-01T08:00:00',
        'modify_time': '2024-01-02T08:00:00',
    }
