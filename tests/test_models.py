"""
Tests for the models.
"""

from common_api.exceptions import APIError
from common_api.models import (
    Department,
    DictEntry,
    DictEntryInfo,
    Environment,
    ErrorInfo,
    Gender,
    Page,
    Person,
    RegisterUserParams,
    State,
    StatefulInfo,
)


class TestModelCreate:

    def test_create_from_snake_case(self):
        person = Person.create({'id': 3, 'name': 'Alice', 'gender': 'FEMALE', 'has_medicare': True})

        assert person.id == 3
        assert person.gender == Gender.FEMALE
        assert person.has_medicare is True

    def test_create_from_camel_case(self):
        person = Person.create({'hasMedicare': False, 'createTime': '2024-01-01T00:00:00'})

        assert person.has_medicare is False
        assert person.create_time == '2024-01-01T00:00:00'

    def test_create_none(self):
        assert Person.create(None) is None

    def test_create_returns_same_instance(self):
        person = Person(name='Bob')
        assert Person.create(person) is person

    def test_unknown_fields_dropped(self):
        department = Department.create({'id': 1, 'unknownField': 'x'})
        assert not hasattr(department, 'unknown_field')

    def test_unknown_enum_value_kept(self):
        """Enum values added on the server later still parse."""
        department = Department.create({'state': 'ARCHIVED'})
        assert department.state == 'ARCHIVED'

    def test_deleted_derived_from_delete_time(self):
        department = Department.create({'id': 1, 'deleteTime': '2024-02-02T00:00:00'})
        assert department.deleted is True

    def test_deleted_not_set_without_delete_time(self):
        assert Department.create({'id': 1}).deleted is None

    def test_create_array(self):
        items = StatefulInfo.create_array([{'id': 1, 'state': 'NORMAL'}, {'id': 2, 'state': 'LOCKED'}])

        assert [item.state for item in items] == [State.NORMAL, State.LOCKED]
        assert StatefulInfo.create_array(None) == []


class TestPage:

    def test_create_page(self):
        page = Department.create_page({
            'totalCount': 2,
            'totalPages': 1,
            'pageIndex': 0,
            'pageSize': 10,
            'content': [{'id': 1}, {'id': 2}],
        })

        assert isinstance(page, Page)
        assert page.total_count == 2
        assert [d.id for d in page.content] == [1, 2]
        assert all(isinstance(d, Department) for d in page.content)

    def test_create_page_none(self):
        assert Department.create_page(None) is None


class TestToDict:

    def test_to_dict_drops_none(self):
        department = Department(id=1, name='Sales', state=State.NORMAL)
        assert department.to_dict() == {'id': 1, 'name': 'Sales', 'state': 'NORMAL'}

    def test_to_dict_by_alias(self):
        department = Department(id=1, create_time='2024-01-01T00:00:00')
        assert department.to_dict(by_alias=True) == {'id': 1, 'createTime': '2024-01-01T00:00:00'}


class TestDictEntry:

    def test_dict_reference(self):
        """The parent dictionary arrives under the ``dict`` key."""
        entry = DictEntry.create({'code': 'MALE', 'dict': {'id': 5, 'code': 'gender'}})

        assert entry.dict_info.id == 5
        assert entry.to_dict(by_alias=True)['dict'] == {'id': 5, 'code': 'gender'}


class TestErrorInfo:

    def test_error_info_from_api_error(self):
        error = APIError('API request failed', status_code=500,
                         response_data={'code': 'E_INTERNAL', 'message': 'boom', 'status': 500})

        info = error.error_info
        assert isinstance(info, ErrorInfo)
        assert info.code == 'E_INTERNAL'
        assert info.message == 'boom'

    def test_no_error_info(self):
        assert APIError('failed', response_data={'foo': 'bar'}).error_info is None
        assert APIError('failed').error_info is None


class TestIdentifierFields:
    """Identifier fields accept numeric and string IDs."""

    def test_dict_entry_info_ids(self):
        info = DictEntryInfo.create({'id': 7, 'dictId': 3, 'parentId': 'root'})
        assert info.dict_id == 3
        assert info.parent_id == 'root'

    def test_environment_device_id(self):
        assert Environment.create({'device_id': 12}).device_id == 12
        assert Environment.create({'deviceId': 'd-12'}).device_id == 'd-12'

    def test_register_user_params_app_id(self):
        params = RegisterUserParams.create({'app_id': 9, 'open_id': 'o-1'})
        assert params.app_id == 9
        assert params.open_id == 'o-1'
