"""
Current user API - The account, person and employee of the logged-in user.
"""

from ..loading import LoadingKind
from ..models import (
    CredentialInfo,
    Employee,
    EmployeeInfo,
    Info,
    Person,
    PersonInfo,
    User,
    UserInfo,
)
from ..serialization import ASSIGN_OPTIONS, TO_JSON_OPTIONS, to_json
from ..validation import check_argument_type
from ._resource import BaseAPI
from .impl._support import check_show_loading, entity_field, loading


class CurrentUserAPI(BaseAPI):
    """
    Operations on the records bound to the logged-in user.

    None of them take an ID; the server resolves the records from the
    access token.
    """

    entity_class = User

    def _get(self, url, model, show_loading):
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING):
            obj = self.http.get(url)
        result = model.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully get the %s of the current user.", model.__name__)
        self.logger.debug("The %s is: %s", model.__name__, result)
        return result

    def _send(self, method, url, name, value, types, model, kind, show_loading):
        check_argument_type(name, value, types)
        check_show_loading(show_loading)
        with loading(self, show_loading, kind):
            obj = self.http.call(method, url, json_data=to_json(value, TO_JSON_OPTIONS))
        result = model.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully %s the %s of the current user.", "add" if method == "POST" else "update", model.__name__)
        self.logger.debug("The %s is: %s", model.__name__, result)
        return result

    def _exists(self, url, show_loading):
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING):
            return self.http.head(url)

    def get_user(self, show_loading=True):
        return self._get("/me/user", User, show_loading)

    def get_user_info(self, show_loading=True):
        return self._get("/me/user/info", UserInfo, show_loading)

    def update_user(self, user, show_loading=True):
        return self._send("PUT", "/me/user", "user", user, (User, dict), User,
                          LoadingKind.UPDATING, show_loading)

    def exist_person(self, show_loading=True):
        """
        Check whether a person is bound to the current user.

        Raises:
            NotFoundError: If no person is bound
        """
        return self._exists("/me/person", show_loading)

    def get_person(self, show_loading=True):
        return self._get("/me/person", Person, show_loading)

    def get_person_info(self, show_loading=True):
        return self._get("/me/person/info", PersonInfo, show_loading)

    def add_person(self, person, show_loading=True):
        return self._send("POST", "/me/person", "person", person, (Person, dict), Person,
                          LoadingKind.ADDING, show_loading)

    def update_person(self, person, show_loading=True):
        return self._send("PUT", "/me/person", "person", person, (Person, dict), Person,
                          LoadingKind.UPDATING, show_loading)

    def bind_person(self, name, mobile, credential, verify_code, show_loading=True):
        """
        Bind an existing person to the current user.

        The person is identified by name, mobile and credential, and the
        binding is confirmed by a code sent to the mobile.

        Returns:
            ``PersonInfo`` of the bound person
        """
        check_argument_type("name", name, str)
        check_argument_type("mobile", mobile, str)
        check_argument_type("credential", credential, (CredentialInfo, dict))
        check_argument_type("verify_code", verify_code, str)
        check_show_loading(show_loading)
        data = to_json({
            "name": name,
            "mobile": mobile,
            "credential": {
                "type": entity_field(credential, "type"),
                "number": entity_field(credential, "number"),
            },
            "verify_code": verify_code,
        }, TO_JSON_OPTIONS)
        with loading(self, show_loading, LoadingKind.UPDATING):
            obj = self.http.post("/me/person/bind", data)
        result = PersonInfo.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully bind the Person to the current user: %s", result)
        return result

    def exist_employee(self, show_loading=True):
        return self._exists("/me/employee", show_loading)

    def get_employee(self, show_loading=True):
        return self._get("/me/employee", Employee, show_loading)

    def get_employee_info(self, show_loading=True):
        return self._get("/me/employee/info", EmployeeInfo, show_loading)

    def add_employee(self, employee, show_loading=True):
        return self._send("POST", "/me/employee", "employee", employee, (Employee, dict), Employee,
                          LoadingKind.ADDING, show_loading)

    def update_employee(self, employee, show_loading=True):
        return self._send("PUT", "/me/employee", "employee", employee, (Employee, dict), Employee,
                          LoadingKind.UPDATING, show_loading)

    def bind_employee(self, name, mobile, organization, verify_code, show_loading=True):
        """Bind an existing employee of ``organization`` to the current user."""
        check_argument_type("name", name, str)
        check_argument_type("mobile", mobile, str)
        check_argument_type("organization", organization, (Info, dict))
        check_argument_type("verify_code", verify_code, str)
        check_show_loading(show_loading)
        data = to_json({
            "name": name,
            "mobile": mobile,
            "organization": organization,
            "verify_code": verify_code,
        }, TO_JSON_OPTIONS)
        with loading(self, show_loading, LoadingKind.UPDATING):
            obj = self.http.post("/me/employee/bind", data)
        result = EmployeeInfo.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully bind the Employee to the current user: %s", result)
        return result
