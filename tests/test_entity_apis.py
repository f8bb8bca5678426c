"""
Tests for the resource APIs and the client facade.
"""

import logging
from unittest.mock import MagicMock

import pytest

from common_api.api import (
    AttachmentAPI,
    CommonAPIClient,
    CountryAPI,
    CurrentUserAPI,
    DepartmentAPI,
    DeviceAPI,
    DictEntryAPI,
    FeedbackAPI,
    PersonAPI,
    UserAPI,
    UserRoleAPI,
    VerifyCodeAPI,
)
from common_api.config import CommonApiConfig
from common_api.loading import Loading, LoadingKind
from common_api.models import (
    Department,
    DictEntry,
    FeedbackAction,
    FeedbackTrack,
    Info,
    Location,
    PersonInfo,
    State,
    VerifyScene,
)


class TestEntityAPI:
    """The uniform surface every resource addressed by ID has."""

    def test_list(self, department_api, http):
        http.get.return_value = {'content': [{'id': 1}], 'total_count': 1}

        page = department_api.list({'page_index': 0, 'page_size': 10}, {'deleted': False})

        http.get.assert_called_once_with(
            '/department', params={'page_index': 0, 'page_size': 10, 'deleted': False}
        )
        assert page.content[0].id == 1

    def test_list_info(self, department_api, http):
        http.get.return_value = {'content': []}
        department_api.list_info()
        http.get.assert_called_once_with('/department/info', params={})

    def test_get_and_get_info(self, department_api, http):
        http.get.return_value = {'id': 5}

        department_api.get(5)
        department_api.get_info('5')

        assert [c.args[0] for c in http.get.call_args_list] == ['/department/5', '/department/5/info']

    def test_add_and_update(self, department_api, http):
        http.post.return_value = {'id': 5, 'code': 'D5'}
        http.put.return_value = {'id': 5, 'code': 'D5', 'name': 'Renamed'}

        created = department_api.add(Department(code='D5'))
        updated = department_api.update({'id': 5, 'name': 'Renamed'})

        http.post.assert_called_once_with('/department', {'code': 'D5'}, params=None)
        http.put.assert_called_once_with('/department/5', {'id': 5, 'name': 'Renamed'}, params=None)
        assert created.id == 5
        assert updated.name == 'Renamed'

    @pytest.mark.parametrize('method,verb,url', [
        ('delete', 'delete', '/department/5'),
        ('restore', 'patch', '/department/5'),
        ('purge', 'delete', '/department/5/purge'),
        ('erase', 'delete', '/department/5/erase'),
    ])
    def test_lifecycle(self, department_api, http, method, verb, url):
        getattr(department_api, method)(5)
        getattr(http, verb).assert_called_once_with(url, params=None)

    @pytest.mark.parametrize('method,verb,url', [
        ('batch_delete', 'delete', '/department/batch'),
        ('batch_restore', 'patch', '/department/batch'),
        ('batch_purge', 'delete', '/department/batch/purge'),
        ('batch_erase', 'delete', '/department/batch/erase'),
    ])
    def test_batch(self, department_api, http, method, verb, url):
        getattr(http, verb).return_value = 2

        assert getattr(department_api, method)([1, 2]) == 2
        getattr(http, verb).assert_called_once_with(url, [1, 2], params=None)

    def test_purge_all(self, department_api, http):
        http.delete.return_value = 4
        assert department_api.purge_all() == 4
        http.delete.assert_called_once_with('/department/purge', params=None)

    def test_exists(self, department_api, http):
        http.head.return_value = True
        assert department_api.exists(5) is True
        http.head.assert_called_once_with('/department/5')

    def test_repr(self, department_api):
        assert repr(department_api) == 'DepartmentAPI(Department)'


class TestCodedEntityAPI:

    def test_get_by_code(self, department_api, http):
        http.get.return_value = {'id': 1, 'code': 'SALES'}
        department_api.get_by_code('SALES')
        http.get.assert_called_once_with('/department/code/SALES', params=None)

    def test_update_by_code(self, department_api, http):
        http.put.return_value = {'code': 'SALES'}
        department_api.update_by_code(Department(code='SALES', name='S'))
        http.put.assert_called_once_with('/department/code/SALES', {'code': 'SALES', 'name': 'S'}, params=None)

    @pytest.mark.parametrize('method,verb,url', [
        ('delete_by_code', 'delete', '/department/code/SALES'),
        ('restore_by_code', 'patch', '/department/code/SALES'),
        ('purge_by_code', 'delete', '/department/code/SALES/purge'),
        ('erase_by_code', 'delete', '/department/code/SALES/erase'),
    ])
    def test_lifecycle_by_code(self, department_api, http, method, verb, url):
        getattr(department_api, method)('SALES')
        getattr(http, verb).assert_called_once_with(url, params=None)

    def test_exists_by_code(self, department_api, http):
        department_api.exists_by_code('SALES')
        http.head.assert_called_once_with('/department/code/SALES')

    def test_region_api(self, http):
        api = CountryAPI(http)
        http.get.return_value = {'code': 'CN', 'name': 'China'}

        country = api.get_by_code('CN')

        http.get.assert_called_once_with('/country/code/CN', params=None)
        assert country.name == 'China'


class TestStatefulAPI:

    def test_update_state_wraps_value(self, department_api, http):
        http.put.return_value = '2024-01-01T00:00:00'

        assert department_api.update_state(5, State.LOCKED) == '2024-01-01T00:00:00'
        http.put.assert_called_once_with('/department/5/state', {'state': 'LOCKED'}, params=None)

    def test_update_state_by_code(self, department_api, http):
        department_api.update_state_by_code('SALES', 'DISABLED')
        http.put.assert_called_once_with('/department/code/SALES/state', {'state': 'DISABLED'}, params=None)

    def test_update_state_rejects_int(self, department_api, http):
        with pytest.raises(TypeError, match="'state'"):
            department_api.update_state(5, 1)
        http.put.assert_not_called()


class TestUserLinkedAPIs:
    """``with_user`` is sent as a query parameter."""

    def test_employee_delete_with_user(self, employee_api, http):
        employee_api.delete(7, with_user=True)
        http.delete.assert_called_once_with('/employee/7', params={'with_user': True})

    def test_employee_delete_default(self, employee_api, http):
        employee_api.delete(7)
        http.delete.assert_called_once_with('/employee/7', params={'with_user': False})

    def test_employee_get_transforms_urls(self, employee_api, http):
        http.get.return_value = {'id': 7}
        employee_api.get(7, transform_urls=False)
        http.get.assert_called_once_with('/employee/7', params={'transform_urls': False})

    def test_employee_add(self, employee_api, http):
        http.post.return_value = {'id': 7}
        employee_api.add({'code': 'E7'}, with_user=True)
        http.post.assert_called_once_with(
            '/employee', {'code': 'E7'}, params={'with_user': True, 'transform_urls': True}
        )

    def test_employee_state_by_code(self, employee_api, http):
        employee_api.update_state_by_code('E7', State.FROZEN, with_user=True)
        http.put.assert_called_once_with(
            '/employee/code/E7/state', {'state': 'FROZEN'}, params={'with_user': True}
        )

    def test_person_batch_erase(self, http):
        api = PersonAPI(http)
        http.delete.return_value = 2

        api.batch_erase([1, 2], with_user=True)

        http.delete.assert_called_once_with('/person/batch/erase', [1, 2], params={'with_user': True})

    def test_person_by_username(self, http):
        api = PersonAPI(http)
        http.get.return_value = {'username': 'alice'}

        api.get_by_username('alice')
        api.exists_by_username('alice')

        http.get.assert_called_once_with('/person/username/alice', params={'transform_urls': True})
        http.head.assert_called_once_with('/person/username/alice')

    def test_show_loading_is_keyword(self, employee_api, loading):
        """Options come before ``show_loading``."""
        employee_api.erase(7, False, False)
        loading.show.assert_not_called()


class TestUserAPI:

    def test_update_password(self, http):
        api = UserAPI(http)
        http.put.return_value = '2024-01-01T00:00:00'

        api.update_password(3, 'n3w-pa55')

        http.put.assert_called_once_with('/user/3/password', 'n3w-pa55', params=None)

    def test_password_masked_in_log(self, http, caplog):
        api = UserAPI(http)
        with caplog.at_level(logging.DEBUG, logger='common_api.api.UserAPI'):
            api.update_password(3, 'n3w-pa55')

        assert "UserAPI.update_password(id=3, password='***'" in caplog.text
        assert 'n3w-pa55' not in caplog.text

    def test_user_role(self, http):
        api = UserRoleAPI(http)
        http.post.return_value = {'id': 1}

        api.add({'user': {'id': 3}, 'role': {'id': 2}})
        api.erase(1)

        http.post.assert_called_once_with('/user-role', {'user': {'id': 3}, 'role': {'id': 2}}, params=None)
        http.delete.assert_called_once_with('/user-role/1/erase', params=None)


class TestDictEntryAPI:

    def test_get_by_code(self, http):
        api = DictEntryAPI(http)
        http.get.return_value = {'code': 'MALE', 'dict': {'id': 5}}

        entry = api.get_by_code('gender', 'MALE')

        http.get.assert_called_once_with('/dict/code/gender/entry/code/MALE', params=None)
        assert entry.dict_info.id == 5

    def test_update_by_code_reads_dict_id(self, http):
        api = DictEntryAPI(http)
        http.put.return_value = {'code': 'MALE'}

        api.update_by_code(DictEntry(dict_info=Info(id=5), code='MALE', name='Male'))

        http.put.assert_called_once_with(
            '/dict/5/entry/code/MALE',
            {'dict': {'id': 5}, 'code': 'MALE', 'name': 'Male'},
            params=None,
        )

    def test_update_by_code_from_dict(self, http):
        api = DictEntryAPI(http)
        http.put.return_value = {'code': 'MALE', 'name': 'Male', 'dict': {'id': 5}}

        entry = api.update_by_code({'dict': {'id': 5}, 'code': 'MALE'})

        assert http.put.call_args.args[0] == '/dict/5/entry/code/MALE'
        assert entry.name == 'Male'
        assert entry.dict_info.id == 5

    def test_list_info_with_numeric_ids(self, http):
        api = DictEntryAPI(http)
        http.get.return_value = {
            'total_count': 1,
            'content': [{'id': 7, 'code': 'MALE', 'dict_id': 3, 'parent_id': 1}],
        }

        page = api.list_info()

        http.get.assert_called_once()
        assert http.get.call_args.args[0] == '/dict/entry/info'
        assert page.content[0].dict_id == 3
        assert page.content[0].parent_id == 1

    def test_update_by_code_requires_dict(self, http):
        api = DictEntryAPI(http)
        with pytest.raises(TypeError):
            api.update_by_code({'code': 'MALE'})
        http.put.assert_not_called()

    def test_delete_by_code(self, http):
        api = DictEntryAPI(http)
        api.delete_by_code(5, 'MALE')
        http.delete.assert_called_once_with('/dict/5/entry/code/MALE', params=None)


class TestDeviceAndAttachmentAPIs:

    def test_update_location_sends_bare_value(self, http):
        api = DeviceAPI(http)
        http.put.return_value = '2024-01-01T00:00:00'

        api.update_location(9, Location(latitude=31.2, longitude=121.5))

        http.put.assert_called_once_with('/device/9/location', {'latitude': 31.2, 'longitude': 121.5}, params=None)

    def test_update_ip_address(self, http):
        api = DeviceAPI(http)
        api.update_ip_address(9, '10.0.0.8')
        http.put.assert_called_once_with('/device/9/ip-address', '10.0.0.8', params=None)

    def test_update_owner(self, http):
        api = DeviceAPI(http)
        api.update_owner(9, PersonInfo(id=3, name='Alice'))
        http.put.assert_called_once_with('/device/9/owner', {'id': 3, 'name': 'Alice'}, params=None)

    def test_update_visible(self, http):
        api = AttachmentAPI(http)
        api.update_visible(4, False)
        http.put.assert_called_once_with('/attachment/4/visible', False, params=None)


class TestFeedbackAPI:

    def test_perform_action(self, http):
        api = FeedbackAPI(http)
        http.put.return_value = {'id': 1, 'action': 'REPLY', 'content': 'on it'}

        track = api.perform_action(8, FeedbackAction.REPLY, FeedbackTrack(content='on it'))

        http.put.assert_called_once_with('/feedback/8/action/REPLY', {'content': 'on it'})
        assert track.content == 'on it'

    def test_get_tracks(self, http):
        api = FeedbackAPI(http)
        http.get.return_value = [{'id': 1}, {'id': 2}]

        tracks = api.get_tracks(8)

        http.get.assert_called_once_with('/feedback/8/track', params={'transform_urls': True})
        assert [t.id for t in tracks] == [1, 2]

    def test_no_update(self, http):
        assert not hasattr(FeedbackAPI(http), 'update')


class TestCurrentUserAPI:

    def test_get_user(self, http):
        api = CurrentUserAPI(http)
        http.get.return_value = {'username': 'alice'}

        assert api.get_user().username == 'alice'
        http.get.assert_called_once_with('/me/user')

    def test_update_person(self, http):
        api = CurrentUserAPI(http)
        http.call.return_value = {'name': 'Alice'}

        api.update_person({'name': 'Alice', 'comment': None})

        http.call.assert_called_once_with('PUT', '/me/person', json_data={'name': 'Alice'})

    def test_bind_employee(self, http):
        api = CurrentUserAPI(http)
        http.post.return_value = {'id': 7, 'name': 'Alice'}

        info = api.bind_employee('Alice', '13800000000', Info(id=1), '123456')

        http.post.assert_called_once_with('/me/employee/bind', {
            'name': 'Alice',
            'mobile': '13800000000',
            'organization': {'id': 1},
            'verify_code': '123456',
        })
        assert info.id == 7


class TestVerifyCodeAPI:

    def test_send_by_sms(self, http, loading):
        api = VerifyCodeAPI(http, loading)

        api.send_by_sms('13800000000', VerifyScene.LOGIN)

        http.post.assert_called_once_with('/verify-code/sms', data={'mobile': '13800000000', 'scene': 'LOGIN'})
        loading.show.assert_called_once_with(LoadingKind.SUBMITTING, 'Sending the verification code...')


class TestCommonAPIClient:

    @pytest.fixture
    def client(self):
        return CommonAPIClient(CommonApiConfig(server_url='https://api.example.com', api_prefix='/api'))

    def test_resources_share_transport(self, client):
        assert client.department.http is client.http
        assert client.user_authenticate.http is client.http
        assert client.employee.loading is client.loading

    def test_resource_lookup(self, client):
        assert isinstance(client.resource('dict-entry'), DictEntryAPI)
        assert isinstance(client.resource('Department'), DepartmentAPI)
        with pytest.raises(KeyError):
            client.resource('invoice')

    def test_base_url(self, client):
        assert client.base_url == 'https://api.example.com/api'

    def test_context_manager_closes(self, client):
        client.http.close = MagicMock()
        with client:
            pass
        client.http.close.assert_called_once()

    def test_custom_loading(self):
        callback = MagicMock()
        client = CommonAPIClient(CommonApiConfig(server_url='https://api.example.com'), Loading(callback))
        client.http.get = MagicMock(return_value={'id': 1})

        client.department.get(1)

        callback.assert_called_once_with(LoadingKind.GETTING, None)
