"""
Tests for the user and app authentication APIs.
"""

import logging

import pytest

from common_api.api import AppAuthenticateAPI, UserAuthenticateAPI
from common_api.exceptions import AuthenticationError
from common_api.loading import LoadingKind
from common_api.models import Environment, LoginResponse, SocialNetwork, Token

LOGIN_RESPONSE = {
    'user': {'id': 3, 'username': 'alice', 'name': 'Alice'},
    'token': {'value': 'jwt-token', 'create_time': '2024-01-01T00:00:00', 'max_age': 3600},
    'roles': ['ADMIN'],
}


@pytest.fixture
def user_auth(http, loading):
    return UserAuthenticateAPI(http, loading)


@pytest.fixture
def app_auth(http, loading):
    return AppAuthenticateAPI(http, loading)


class TestUserLogin:

    def test_login_by_username_stores_token(self, user_auth, http, loading):
        http.post.return_value = LOGIN_RESPONSE

        response = user_auth.login_by_username('alice', 'secret')

        http.post.assert_called_once_with(
            '/authenticate/user/login', {'username': 'alice', 'password': 'secret'}
        )
        assert isinstance(response, LoginResponse)
        assert response.user.username == 'alice'
        assert response.token.max_age == 3600
        assert http.token == 'jwt-token'
        loading.show.assert_called_once_with(LoadingKind.SUBMITTING, 'Logging in...')

    def test_login_by_mobile(self, user_auth, http):
        http.post.return_value = LOGIN_RESPONSE

        user_auth.login_by_mobile('13800000000', '123456')

        http.post.assert_called_once_with(
            '/authenticate/user/login', {'mobile': '13800000000', 'verify_code': '123456'}
        )

    def test_login_by_open_id(self, user_auth, http):
        http.post.return_value = LOGIN_RESPONSE

        user_auth.login_by_open_id(SocialNetwork.GITHUB, 'app-1', 'open-1')

        http.post.assert_called_once_with(
            '/authenticate/user/login',
            {'social_network': 'GITHUB', 'app_id': 'app-1', 'open_id': 'open-1'},
        )

    def test_failed_login_keeps_token(self, user_auth, http):
        http.token = 'old-token'
        http.post.side_effect = AuthenticationError('Authentication failed: bad password', status_code=401)

        with pytest.raises(AuthenticationError):
            user_auth.login_by_username('alice', 'wrong')

        assert http.token == 'old-token'

    def test_password_required(self, user_auth, http):
        with pytest.raises(TypeError, match="'password'"):
            user_auth.login_by_username('alice', None)
        http.post.assert_not_called()

    def test_password_not_logged(self, user_auth, http, caplog):
        http.post.return_value = LOGIN_RESPONSE
        with caplog.at_level(logging.DEBUG, logger='common_api.api.UserAuthenticateAPI'):
            user_auth.login_by_username('alice', 'top-secret')

        assert 'top-secret' not in caplog.text
        assert 'Successfully login as: alice' in caplog.text


class TestUserSession:

    def test_logout_clears_token(self, user_auth, http):
        http.token = 'jwt-token'

        user_auth.logout()

        http.post.assert_called_once_with('/authenticate/user/logout')
        assert http.token is None

    def test_get_login_info(self, user_auth, http):
        http.get.return_value = LOGIN_RESPONSE

        info = user_auth.get_login_info()

        http.get.assert_called_once_with('/authenticate/user/info')
        assert info.roles == ['ADMIN']

    def test_check_token(self, user_auth, http):
        http.get.return_value = {'value': 'jwt-token', 'max_age': 100}

        token = user_auth.check_token(3, Token(value='jwt-token'))

        http.get.assert_called_once_with(
            '/authenticate/user/token/check', params={'id': 3, 'token': 'jwt-token'}
        )
        assert token.max_age == 100

    def test_check_token_requires_value(self, user_auth, http):
        with pytest.raises(TypeError, match='token.value'):
            user_auth.check_token(3, {'max_age': 10})
        http.get.assert_not_called()

    def test_register_logs_in(self, user_auth, http):
        http.post.return_value = LOGIN_RESPONSE

        user_auth.register({'username': 'alice', 'password': 'secret', 'auto_login': True})

        assert http.post.call_args.args[0] == '/authenticate/user/register'
        assert http.token == 'jwt-token'


class TestResetPassword:

    def test_reset_by_mobile_sends_form(self, user_auth, http):
        user_auth.reset_password('13800000000', None, 'new-secret', '654321')

        http.post.assert_called_once_with('/authenticate/user/password/reset', data={
            'mobile': '13800000000',
            'password': 'new-secret',
            'verify_code': '654321',
        })

    def test_reset_by_email(self, user_auth, http):
        user_auth.reset_password(None, 'alice@example.com', 'new-secret', '654321')
        assert http.post.call_args.kwargs['data']['email'] == 'alice@example.com'

    def test_mobile_or_email_required(self, user_auth, http):
        with pytest.raises(ValueError):
            user_auth.reset_password(None, None, 'new-secret', '654321')
        http.post.assert_not_called()


class TestAppAuthenticate:

    def test_authenticate(self, app_auth, http):
        http.post.return_value = {'value': 'app-token', 'max_age': 7200}

        token = app_auth.authenticate('portal', 'key-123', Environment(os='Linux'))

        http.post.assert_called_once_with('/authenticate/app', {
            'code': 'portal',
            'security_key': 'key-123',
            'os': 'Linux',
            'platform': 'WEB',
        })
        assert token.value == 'app-token'

    def test_authenticate_does_not_touch_user_token(self, app_auth, http):
        http.token = 'user-token'
        http.post.return_value = {'value': 'app-token'}

        app_auth.authenticate('portal', 'key-123')

        assert http.token == 'user-token'

    def test_refresh_token(self, app_auth, http):
        http.get.return_value = {'value': 'new-token'}

        token = app_auth.refresh_token('portal', {'value': 'app-token'})

        http.get.assert_called_once_with(
            '/authenticate/app/refresh', params={'code': 'portal', 'token': 'app-token'}
        )
        assert token.value == 'new-token'

    def test_check_token(self, app_auth, http):
        http.get.return_value = {'value': 'app-token'}
        app_auth.check_token('portal', Token(value='app-token'))
        assert http.get.call_args.args[0] == '/authenticate/app/check'
