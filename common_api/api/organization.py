"""
Organizations API - Categories, organizations, departments and employees.
"""

from ..models import (
    Attachment,
    Category,
    Contact,
    CredentialType,
    Department,
    Employee,
    EmployeeInfo,
    Gender,
    InfoWithEntity,
    Organization,
    State,
    StatefulInfo,
)
from ._resource import (
    AUDIT_CRITERIA,
    REGION_CRITERIA,
    STATE_TYPES,
    CodedEntityAPI,
    StatefulCodedEntityAPI,
    StatefulCodedMixin,
    UserLinkedEntityAPI,
    fields,
    id_code_name,
)
from .impl import (
    add_impl,
    delete_by_key_impl,
    erase_by_key_impl,
    exists_by_key_impl,
    get_by_key_impl,
    get_info_by_key_impl,
    get_impl,
    get_property_by_key_impl,
    get_property_impl,
    list_impl,
    purge_by_key_impl,
    restore_by_key_impl,
    update_by_key_impl,
    update_property_by_key_impl,
    update_property_impl,
)


class CategoryAPI(CodedEntityAPI):
    """Categories of the other resources, organized as trees per entity."""

    path = "/category"
    entity_class = Category
    entity_info_class = InfoWithEntity
    criteria = (
        fields(entity=str, name=str, predefined=bool, deleted=bool)
        + id_code_name("parent")
        + AUDIT_CRITERIA
    )


class OrganizationAPI(StatefulCodedEntityAPI):
    path = "/organization"
    entity_class = Organization
    entity_info_class = StatefulInfo
    criteria = (
        fields(
            name=str,
            postalcode=str,
            phone=str,
            mobile=str,
            email=str,
            state=(State, str),
            test=bool,
            predefined=bool,
            deleted=bool,
        )
        + id_code_name("category")
        + id_code_name("parent")
        + REGION_CRITERIA
        + AUDIT_CRITERIA
    )

    def get_category(self, id, show_loading=True):
        return get_property_impl(self, "/organization/{id}/category", "category", InfoWithEntity,
                                 id, show_loading)

    def get_category_by_code(self, code, show_loading=True):
        return get_property_by_key_impl(self, "/organization/code/{code}/category", "category",
                                        InfoWithEntity, "code", code, show_loading)

    def get_contact(self, id, show_loading=True):
        return get_property_impl(self, "/organization/{id}/contact", "contact", Contact, id, show_loading)

    def get_contact_by_code(self, code, show_loading=True):
        return get_property_by_key_impl(self, "/organization/code/{code}/contact", "contact", Contact,
                                        "code", code, show_loading)


class DepartmentAPI(StatefulCodedEntityAPI):
    path = "/department"
    entity_class = Department
    entity_info_class = StatefulInfo
    criteria = (
        fields(
            email=str,
            internal_code=str,
            mobile=str,
            name=str,
            phone=str,
            postalcode=str,
            predefined=bool,
            state=(State, str),
            test=bool,
            deleted=bool,
        )
        + id_code_name("category")
        + REGION_CRITERIA
        + id_code_name("organization")
        + id_code_name("parent")
        + AUDIT_CRITERIA
    )


class EmployeeAPI(StatefulCodedMixin, UserLinkedEntityAPI):
    """
    Employees of the organizations.

    ``with_user=True`` applies a write to the employee's login account as
    well. ``transform_urls=True`` asks the server to sign attachment URLs
    in the returned records.
    """

    path = "/employee"
    entity_class = Employee
    entity_info_class = EmployeeInfo
    criteria = (
        fields(
            username=str,
            person_id=(str, int),
            internal_code=str,
            name=str,
            gender=(Gender, str),
            credential_type=(CredentialType, str),
            credential_number=str,
            phone=str,
            mobile=str,
            email=str,
            job_title=str,
            state=(State, str),
            test=bool,
            deleted=bool,
        )
        + id_code_name("category")
        + id_code_name("organization")
        + id_code_name("department")
        + AUDIT_CRITERIA
    )

    def list(self, page_request=None, criteria=None, sort_request=None, transform_urls=True, show_loading=True):
        return list_impl(self, self.path, page_request, criteria, sort_request, show_loading,
                         {"transform_urls": transform_urls})

    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(self, "/employee/{id}", id, show_loading, {"transform_urls": transform_urls})

    def get_by_code(self, code, transform_urls=True, show_loading=True):
        return get_by_key_impl(self, "/employee/code/{code}", "code", code, show_loading,
                               {"transform_urls": transform_urls})

    def get_info_by_code(self, code, show_loading=True):
        return get_info_by_key_impl(self, "/employee/code/{code}/info", "code", code, show_loading)

    def get_category(self, id, show_loading=True):
        return get_property_impl(self, "/employee/{id}/category", "category", InfoWithEntity, id, show_loading)

    def get_category_by_code(self, code, show_loading=True):
        return get_property_by_key_impl(self, "/employee/code/{code}/category", "category",
                                        InfoWithEntity, "code", code, show_loading)

    def get_photo(self, id, transform_urls=True, show_loading=True):
        return get_property_impl(self, "/employee/{id}/photo", "photo", Attachment, id, show_loading,
                                 {"transform_urls": transform_urls})

    def add(self, entity, with_user=False, transform_urls=True, show_loading=True):
        return add_impl(self, self.path, entity, show_loading,
                        {"with_user": with_user, "transform_urls": transform_urls})

    def update_by_code(self, entity, with_user=False, show_loading=True):
        return update_by_key_impl(self, "/employee/code/{code}", "code", entity, show_loading,
                                  {"with_user": with_user})

    def update_state(self, id, state, with_user=False, show_loading=True):
        return update_property_impl(self, "/employee/{id}/state", id, "state", STATE_TYPES, state,
                                    show_loading, {"with_user": with_user}, wrap_key="state")

    def update_state_by_code(self, code, state, with_user=False, show_loading=True):
        return update_property_by_key_impl(self, "/employee/code/{code}/state", "code", code, "state",
                                           STATE_TYPES, state, show_loading, {"with_user": with_user},
                                           wrap_key="state")

    def update_photo(self, id, photo, transform_urls=True, show_loading=True):
        """Replace the photo of an employee and return the modification timestamp."""
        return update_property_impl(self, "/employee/{id}/photo", id, "photo", (Attachment, dict), photo,
                                    show_loading, {"transform_urls": transform_urls})

    def delete_by_code(self, code, with_user=False, show_loading=True):
        return delete_by_key_impl(self, "/employee/code/{code}", "code", code, show_loading,
                                  {"with_user": with_user})

    def restore_by_code(self, code, with_user=False, show_loading=True):
        return restore_by_key_impl(self, "/employee/code/{code}", "code", code, show_loading,
                                   {"with_user": with_user})

    def purge_by_code(self, code, with_user=False, show_loading=True):
        return purge_by_key_impl(self, "/employee/code/{code}/purge", "code", code, show_loading,
                                 {"with_user": with_user})

    def erase_by_code(self, code, with_user=False, show_loading=True):
        return erase_by_key_impl(self, "/employee/code/{code}/erase", "code", code, show_loading,
                                 {"with_user": with_user})

    def exists_by_code(self, code, show_loading=True):
        return exists_by_key_impl(self, "/employee/code/{code}", "code", code, show_loading)
