"""
Dictionaries API - Data dictionaries and their entries.

A dictionary entry is unique by its code within its dictionary, so the
entry operations addressed by code also take the dictionary key.
"""

from ..models import Dict, DictEntry, DictEntryInfo, State, StatefulInfo
from ..validation import check_argument_type
from ._resource import AUDIT_CRITERIA, EntityAPI, StatefulCodedEntityAPI, fields, id_code_name
from .impl import (
    delete_by_parent_and_key_impl,
    erase_by_parent_and_key_impl,
    exists_by_parent_and_key_impl,
    get_by_parent_and_key_impl,
    get_info_by_parent_and_key_impl,
    purge_by_parent_and_key_impl,
    restore_by_parent_and_key_impl,
    update_by_parent_and_key_impl,
)
from .impl._support import entity_field


class DictAPI(StatefulCodedEntityAPI):
    path = "/dict"
    entity_class = Dict
    entity_info_class = StatefulInfo
    criteria = (
        fields(
            name=str,
            predefined=bool,
            standard_code=str,
            standard_doc=str,
            state=(State, str),
            deleted=bool,
        )
        + id_code_name("app")
        + id_code_name("category")
        + AUDIT_CRITERIA
    )


class DictEntryAPI(EntityAPI):
    path = "/dict/entry"
    entity_class = DictEntry
    entity_info_class = DictEntryInfo
    criteria = (
        fields(name=str, deleted=bool)
        + id_code_name("dict")
        + id_code_name("parent")
        + AUDIT_CRITERIA
    )

    def get_by_code(self, dict_code, code, show_loading=True):
        """Get an entry by the code of its dictionary and its own code."""
        return get_by_parent_and_key_impl(self, "/dict/code/{dict_code}/entry/code/{code}",
                                          "dict_code", dict_code, "code", code, show_loading)

    def get_info_by_code(self, dict_code, code, show_loading=True):
        return get_info_by_parent_and_key_impl(self, "/dict/code/{dict_code}/entry/code/{code}/info",
                                               "dict_code", dict_code, "code", code, show_loading)

    def update_by_code(self, entity, show_loading=True):
        """
        Update an entry addressed by the ID of its dictionary and its code.

        Both keys are read from ``entity``.
        """
        check_argument_type("entity", entity, (DictEntry, dict))
        if isinstance(entity, DictEntry):
            dict_info = entity.dict_info
        else:
            dict_info = entity.get("dict") or entity.get("dict_info")
        dict_id = entity_field(dict_info, "id")
        return update_by_parent_and_key_impl(self, "/dict/{dict_id}/entry/code/{code}",
                                             "dict_id", dict_id, "code", entity, show_loading)

    def delete_by_code(self, dict_id, code, show_loading=True):
        return delete_by_parent_and_key_impl(self, "/dict/{dict_id}/entry/code/{code}",
                                             "dict_id", dict_id, "code", code, show_loading)

    def restore_by_code(self, dict_id, code, show_loading=True):
        return restore_by_parent_and_key_impl(self, "/dict/{dict_id}/entry/code/{code}",
                                              "dict_id", dict_id, "code", code, show_loading)

    def purge_by_code(self, dict_id, code, show_loading=True):
        return purge_by_parent_and_key_impl(self, "/dict/{dict_id}/entry/code/{code}/purge",
                                            "dict_id", dict_id, "code", code, show_loading)

    def erase_by_code(self, dict_id, code, show_loading=True):
        return erase_by_parent_and_key_impl(self, "/dict/{dict_id}/entry/code/{code}/erase",
                                            "dict_id", dict_id, "code", code, show_loading)

    def exists_by_code(self, dict_id, code, show_loading=True):
        return exists_by_parent_and_key_impl(self, "/dict/{dict_id}/entry/code/{code}",
                                             "dict_id", dict_id, "code", code, show_loading)
