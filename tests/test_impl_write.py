"""
Tests for the add and update helpers.
"""

import pytest

from common_api.api.impl import (
    add_impl,
    update_by_key_impl,
    update_impl,
    update_property_by_key_impl,
    update_property_impl,
)
from common_api.loading import LoadingKind
from common_api.models import Contact, Department, Info, State


class TestAddImpl:

    def test_add_model(self, department_api, http, loading, department_json):
        """A model is sent with snake_case keys and without empty fields."""
        http.post.return_value = department_json
        entity = Department(code='SALES', name='Sales', organization=Info(id=1))

        result = add_impl(department_api, '/department', entity)

        http.post.assert_called_once_with(
            '/department',
            {'code': 'SALES', 'name': 'Sales', 'organization': {'id': 1}},
            params=None,
        )
        loading.show.assert_called_once_with(LoadingKind.ADDING, None)
        assert result.id == 1001

    def test_add_dict(self, department_api, http, department_json):
        http.post.return_value = department_json

        add_impl(department_api, '/department', {'code': 'SALES', 'internalCode': 'S-1', 'comment': None})

        http.post.assert_called_once_with(
            '/department', {'code': 'SALES', 'internal_code': 'S-1'}, params=None
        )

    def test_add_with_options(self, employee_api, http):
        http.post.return_value = {'id': 3, 'code': 'E3'}

        add_impl(employee_api, '/employee', {'code': 'E3'}, options={'with_user': True})

        http.post.assert_called_once_with('/employee', {'code': 'E3'}, params={'with_user': True})

    @pytest.mark.parametrize('entity', [None, 'SALES', 42, ['SALES']])
    def test_add_rejects_non_entity(self, department_api, http, entity):
        with pytest.raises(TypeError, match="'entity'"):
            add_impl(department_api, '/department', entity)
        http.post.assert_not_called()

    def test_add_rejects_other_model(self, department_api, http):
        with pytest.raises(TypeError):
            add_impl(department_api, '/department', Info(id=1))
        http.post.assert_not_called()


class TestUpdateImpl:

    def test_update_by_id(self, department_api, http, loading, department_json):
        http.put.return_value = department_json
        entity = Department(id=1001, name='Sales Team')

        result = update_impl(department_api, '/department/{id}', entity)

        http.put.assert_called_once_with(
            '/department/1001', {'id': 1001, 'name': 'Sales Team'}, params=None
        )
        loading.show.assert_called_once_with(LoadingKind.UPDATING, None)
        assert isinstance(result, Department)

    def test_update_requires_id(self, department_api, http):
        with pytest.raises(TypeError, match='entity.id'):
            update_impl(department_api, '/department/{id}', {'name': 'No ID'})
        http.put.assert_not_called()

    def test_update_by_code(self, department_api, http, department_json):
        http.put.return_value = department_json

        update_by_key_impl(department_api, '/department/code/{code}', 'code', {'code': 'SALES', 'name': 'S'})

        http.put.assert_called_once_with(
            '/department/code/SALES', {'code': 'SALES', 'name': 'S'}, params=None
        )

    def test_update_by_code_requires_code(self, department_api, http):
        with pytest.raises(TypeError, match='entity.code'):
            update_by_key_impl(department_api, '/department/code/{code}', 'code', {'id': 1})
        http.put.assert_not_called()


class TestUpdatePropertyImpl:

    def test_bare_value_body(self, department_api, http):
        """The property value itself is the request body."""
        http.put.return_value = '2024-03-01T10:00:00'

        timestamp = update_property_impl(department_api, '/department/{id}/comment', 1001,
                                         'comment', str, 'moved to 3F')

        http.put.assert_called_once_with('/department/1001/comment', 'moved to 3F', params=None)
        assert timestamp == '2024-03-01T10:00:00'

    def test_wrapped_state(self, department_api, http):
        http.put.return_value = '2024-03-01T10:00:00'

        update_property_impl(department_api, '/department/{id}/state', 1001, 'state',
                             (State, str), State.DISABLED, wrap_key='state')

        http.put.assert_called_once_with('/department/1001/state', {'state': 'DISABLED'}, params=None)

    def test_model_value(self, department_api, http):
        http.put.return_value = '2024-03-01T10:00:00'

        update_property_impl(department_api, '/department/{id}/contact', 1001, 'contact',
                             (Contact, dict), Contact(email='a@example.com', phoneVerified=True))

        http.put.assert_called_once_with(
            '/department/1001/contact',
            {'email': 'a@example.com', 'phone_verified': True},
            params=None,
        )

    def test_wrong_value_type(self, department_api, http):
        with pytest.raises(TypeError, match="'comment'"):
            update_property_impl(department_api, '/department/{id}/comment', 1001, 'comment', str, 12)
        http.put.assert_not_called()

    def test_by_key(self, department_api, http):
        http.put.return_value = '2024-03-01T10:00:00'

        update_property_by_key_impl(department_api, '/department/code/{code}/state', 'code', 'SALES',
                                    'state', (State, str), 'LOCKED', wrap_key='state')

        http.put.assert_called_once_with('/department/code/SALES/state', {'state': 'LOCKED'}, params=None)
