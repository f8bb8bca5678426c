"""
Authentication API - User login sessions and app tokens.

A successful user login stores the returned access token on the shared
transport, so every API of the same client is authenticated afterwards.
"""

from ..loading import LoadingKind
from ..models import (
    Environment,
    LoginResponse,
    RegisterUserParams,
    SocialNetwork,
    Token,
)
from ..serialization import ASSIGN_OPTIONS, TO_JSON_OPTIONS, to_json
from ..validation import check_argument_type, check_id_argument_type
from ._resource import BaseAPI
from .impl._support import check_show_loading, entity_field, loading, query


def _token_value(token) -> str:
    check_argument_type("token", token, (Token, dict))
    value = entity_field(token, "value")
    check_argument_type("token.value", value, str)
    return value


class UserAuthenticateAPI(BaseAPI):
    """
    Registration, login and logout of users.
    """

    entity_class = LoginResponse

    def _login(self, data, show_loading):
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Logging in..."):
            obj = self.http.post("/authenticate/user/login", to_json(data, TO_JSON_OPTIONS))
        response = LoginResponse.create(obj, ASSIGN_OPTIONS)
        self._remember(response)
        self.logger.info("Successfully login as: %s", response.user.username if response and response.user else None)
        return response

    def _remember(self, response):
        if response is not None and response.token is not None and response.token.value:
            self.http.token = response.token.value

    def register(self, params, show_loading=True):
        """
        Register a new user.

        Args:
            params: ``RegisterUserParams`` or an equivalent dict

        Returns:
            ``LoginResponse``; the user is logged in when ``auto_login`` was set
        """
        check_argument_type("params", params, (RegisterUserParams, dict))
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Registering..."):
            obj = self.http.post("/authenticate/user/register", to_json(params, TO_JSON_OPTIONS))
        response = LoginResponse.create(obj, ASSIGN_OPTIONS)
        self._remember(response)
        self.logger.info("Successfully register the user: %s", entity_field(params, "username"))
        return response

    def login_by_username(self, username, password, show_loading=True):
        check_argument_type("username", username, str)
        check_argument_type("password", password, str)
        check_show_loading(show_loading)
        return self._login({"username": username, "password": password}, show_loading)

    def login_by_mobile(self, mobile, verify_code, show_loading=True):
        """Log in with a verification code sent to ``mobile`` beforehand."""
        check_argument_type("mobile", mobile, str)
        check_argument_type("verify_code", verify_code, str)
        check_show_loading(show_loading)
        return self._login({"mobile": mobile, "verify_code": verify_code}, show_loading)

    def login_by_open_id(self, social_network, app_id, open_id, show_loading=True):
        check_argument_type("social_network", social_network, (SocialNetwork, str))
        check_argument_type("app_id", app_id, str)
        check_argument_type("open_id", open_id, str)
        check_show_loading(show_loading)
        return self._login({"social_network": social_network, "app_id": app_id, "open_id": open_id},
                           show_loading)

    def logout(self, show_loading=True):
        """End the session of the current user and forget its token."""
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Logging out..."):
            self.http.post("/authenticate/user/logout")
        self.http.token = None
        self.logger.info("Successfully logout.")

    def get_login_info(self, show_loading=True):
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING):
            obj = self.http.get("/authenticate/user/info")
        response = LoginResponse.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully get the login info.")
        self.logger.debug("The login info is: %s", response)
        return response

    def check_token(self, user_id, token, show_loading=True):
        """
        Check that a user's access token is valid.

        Returns:
            The ``Token`` with its creation time and lifetime

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        check_id_argument_type("user_id", user_id)
        value = _token_value(token)
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING, "Checking the access token..."):
            obj = self.http.get("/authenticate/user/token/check", params=query({"id": user_id, "token": value}))
        result = Token.create(obj, ASSIGN_OPTIONS)
        self.logger.info("The token of the user is valid: %s", result)
        return result

    def bind_open_id(self, social_network, app_id, open_id, show_loading=True):
        """Bind the current user's account to an Open ID of a social network."""
        check_argument_type("social_network", social_network, (SocialNetwork, str))
        check_argument_type("app_id", app_id, str)
        check_argument_type("open_id", open_id, str)
        check_show_loading(show_loading)
        data = to_json({"social_network": social_network, "app_id": app_id, "open_id": open_id})
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Binding the account..."):
            self.http.post("/authenticate/user/social-network/bind", data)
        self.logger.info(
            "Successfully bind the open ID to the current user: %s %s %s",
            data["social_network"], app_id, open_id,
        )

    def reset_password(self, mobile, email, password, verify_code, show_loading=True):
        """
        Reset a password with a verification code.

        Args:
            mobile: Mobile number the code was sent to, or None
            email: Email address the code was sent to, or None

        Raises:
            ValueError: If both ``mobile`` and ``email`` are None
        """
        check_argument_type("mobile", mobile, str, nullable=True)
        check_argument_type("email", email, str, nullable=True)
        check_argument_type("password", password, str)
        check_argument_type("verify_code", verify_code, str)
        check_show_loading(show_loading)
        if mobile is None and email is None:
            raise ValueError("The arguments 'mobile' and 'email' cannot both be None.")
        form = {}
        if mobile:
            form["mobile"] = mobile
        if email:
            form["email"] = email
        form["password"] = password
        form["verify_code"] = verify_code
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Resetting the password..."):
            self.http.post("/authenticate/user/password/reset", data=form)
        self.logger.info("Successfully reset the password.")


class AppAuthenticateAPI(BaseAPI):
    """
    Access tokens of client applications.
    """

    entity_class = Token

    def authenticate(self, code, security_key, environment=None, show_loading=True):
        """
        Get an access token for an app.

        Args:
            code: Code of the app
            security_key: Security key of the app
            environment: ``Environment`` describing where the app runs

        Returns:
            The app's ``Token``
        """
        check_argument_type("code", code, str)
        check_argument_type("security_key", security_key, str)
        check_argument_type("environment", environment, (Environment, dict), nullable=True)
        check_show_loading(show_loading)
        data = {"code": code, "security_key": security_key}
        if environment:
            data.update(to_json(environment, TO_JSON_OPTIONS))
        data["platform"] = "WEB"
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Getting the app token..."):
            obj = self.http.post("/authenticate/app", to_json(data, TO_JSON_OPTIONS))
        token = Token.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully authenticate the app: %s", code)
        return token

    def check_token(self, code, token, show_loading=True):
        check_argument_type("code", code, str)
        value = _token_value(token)
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING, "Checking the app token..."):
            obj = self.http.get("/authenticate/app/check", params=query({"code": code, "token": value}))
        result = Token.create(obj, ASSIGN_OPTIONS)
        self.logger.info("The token of the app %s is valid: %s", code, result)
        return result

    def refresh_token(self, code, token, show_loading=True):
        """Exchange a valid app token for a new one."""
        check_argument_type("code", code, str)
        value = _token_value(token)
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.SUBMITTING, "Refreshing the app token..."):
            obj = self.http.get("/authenticate/app/refresh", params=query({"code": code, "token": value}))
        result = Token.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully refresh the token of the app: %s", code)
        return result
