"""
People API - Persons, user accounts, roles and role assignments.
"""

from ..models import (
    Attachment,
    Contact,
    CredentialType,
    Gender,
    InfoWithEntity,
    Person,
    PersonInfo,
    Role,
    State,
    StatefulInfo,
    User,
    UserInfo,
    UserRole,
)
from ._resource import (
    AUDIT_CRITERIA,
    STATE_TYPES,
    FileTransferMixin,
    StatefulEntityAPI,
    UserLinkedEntityAPI,
    fields,
    id_code_name,
    time_range,
)
from .impl import (
    add_impl,
    erase_by_key_impl,
    erase_impl,
    exists_by_key_impl,
    get_by_key_impl,
    get_impl,
    get_info_by_key_impl,
    get_property_impl,
    list_impl,
    update_property_impl,
)


class PersonAPI(UserLinkedEntityAPI):
    """
    Natural persons, addressed by ID or by the username of their account.
    """

    path = "/person"
    entity_class = Person
    entity_info_class = PersonInfo
    criteria = (
        fields(
            name=str,
            username=str,
            gender=(Gender, str),
            credential_type=(CredentialType, str),
            credential_number=str,
            has_medicare=bool,
            medicare_type=str,
            has_social_security=bool,
            phone=str,
            mobile=str,
            email=str,
            guardian_id=(str, int),
            test=bool,
            deleted=bool,
        )
        + time_range("birthday")
        + id_code_name("medicare_city")
        + id_code_name("social_security_city")
        + id_code_name("source")
        + id_code_name("category")
        + id_code_name("organization")
        + AUDIT_CRITERIA
    )

    def list(self, page_request=None, criteria=None, sort_request=None, transform_urls=True, show_loading=True):
        return list_impl(self, self.path, page_request, criteria, sort_request, show_loading,
                         {"transform_urls": transform_urls})

    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(self, "/person/{id}", id, show_loading, {"transform_urls": transform_urls})

    def get_by_username(self, username, transform_urls=True, show_loading=True):
        return get_by_key_impl(self, "/person/username/{username}", "username", username, show_loading,
                               {"transform_urls": transform_urls})

    def get_info_by_username(self, username, show_loading=True):
        return get_info_by_key_impl(self, "/person/username/{username}/info", "username", username,
                                    show_loading)

    def get_category(self, id, show_loading=True):
        return get_property_impl(self, "/person/{id}/category", "category", InfoWithEntity, id, show_loading)

    def get_photo(self, id, transform_urls=True, show_loading=True):
        return get_property_impl(self, "/person/{id}/photo", "photo", Attachment, id, show_loading,
                                 {"transform_urls": transform_urls})

    def add(self, entity, with_user=False, transform_urls=True, show_loading=True):
        return add_impl(self, self.path, entity, show_loading,
                        {"with_user": with_user, "transform_urls": transform_urls})

    def update_contact(self, id, contact, with_user=False, show_loading=True):
        return update_property_impl(self, "/person/{id}/contact", id, "contact", (Contact, dict), contact,
                                    show_loading, {"with_user": with_user})

    def update_comment(self, id, comment, with_user=False, show_loading=True):
        return update_property_impl(self, "/person/{id}/comment", id, "comment", str, comment,
                                    show_loading, {"with_user": with_user})

    def update_photo(self, id, photo, transform_urls=True, show_loading=True):
        return update_property_impl(self, "/person/{id}/photo", id, "photo", (Attachment, dict), photo,
                                    show_loading, {"transform_urls": transform_urls})

    def erase_by_username(self, username, with_user=False, show_loading=True):
        return erase_by_key_impl(self, "/person/username/{username}/erase", "username", username,
                                 show_loading, {"with_user": with_user})

    def exists_by_username(self, username, show_loading=True):
        return exists_by_key_impl(self, "/person/username/{username}", "username", username, show_loading)


class UserAPI(StatefulEntityAPI):
    """
    Login accounts.

    Account credentials are changed one property at a time; ``update``
    leaves the username and password untouched.
    """

    path = "/user"
    entity_class = User
    entity_info_class = UserInfo
    criteria = (
        fields(
            username=str,
            name=str,
            nickname=str,
            mobile=str,
            email=str,
            state=(State, str),
            test=bool,
            predefined=bool,
            deleted=bool,
        )
        + id_code_name("organization")
        + time_range("expired_time")
        + time_range("last_login_time")
        + time_range("valid_time")
        + AUDIT_CRITERIA
    )

    def list(self, page_request=None, criteria=None, sort_request=None, transform_urls=True, show_loading=True):
        return list_impl(self, self.path, page_request, criteria, sort_request, show_loading,
                         {"transform_urls": transform_urls})

    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(self, "/user/{id}", id, show_loading, {"transform_urls": transform_urls})

    def get_by_username(self, username, transform_urls=True, show_loading=True):
        return get_by_key_impl(self, "/user/username/{username}", "username", username, show_loading,
                               {"transform_urls": transform_urls})

    def get_info_by_username(self, username, show_loading=True):
        return get_info_by_key_impl(self, "/user/username/{username}/info", "username", username,
                                    show_loading)

    def get_organization(self, id, show_loading=True):
        return get_property_impl(self, "/user/{id}/organization", "organization", StatefulInfo,
                                 id, show_loading)

    def update_username(self, id, username, show_loading=True):
        return update_property_impl(self, "/user/{id}/username", id, "username", str, username, show_loading)

    def update_password(self, id, password, show_loading=True):
        return update_property_impl(self, "/user/{id}/password", id, "password", str, password, show_loading)

    def update_email(self, id, email, show_loading=True):
        return update_property_impl(self, "/user/{id}/email", id, "email", str, email, show_loading)

    def update_mobile(self, id, mobile, show_loading=True):
        return update_property_impl(self, "/user/{id}/mobile", id, "mobile", str, mobile, show_loading)

    def update_comment(self, id, comment, show_loading=True):
        return update_property_impl(self, "/user/{id}/comment", id, "comment", str, comment, show_loading)

    def exists_by_username(self, username, show_loading=True):
        return exists_by_key_impl(self, "/user/username/{username}", "username", username, show_loading)


class RoleAPI(StatefulEntityAPI):
    path = "/role"
    entity_class = Role
    entity_info_class = StatefulInfo
    criteria = (
        fields(basic=bool, guest=bool, name=str, state=STATE_TYPES, deleted=bool)
        + id_code_name("app")
        + AUDIT_CRITERIA
    )


class UserRoleAPI(FileTransferMixin):
    """
    Assignments of roles to users.

    An assignment is created or erased, never updated.
    """

    path = "/user-role"
    entity_class = UserRole
    criteria = (
        fields(user_id=(str, int), user_realname=str, username=str)
        + id_code_name("app")
        + id_code_name("role")
        + time_range("create_time")
    )

    def list(self, page_request=None, criteria=None, sort_request=None, show_loading=True):
        return list_impl(self, self.path, page_request, criteria, sort_request, show_loading)

    def get(self, id, show_loading=True):
        return get_impl(self, "/user-role/{id}", id, show_loading)

    def add(self, entity, show_loading=True):
        return add_impl(self, self.path, entity, show_loading)

    def erase(self, id, show_loading=True):
        return erase_impl(self, "/user-role/{id}/erase", id, show_loading)
