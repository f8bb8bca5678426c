"""
Attachments API - Files attached to other records.
"""

from ..models import Attachment, AttachmentType, State, StatefulInfo
from ._resource import AUDIT_CRITERIA, StatefulEntityAPI, fields, id_code_name
from .impl import update_property_impl


class AttachmentAPI(StatefulEntityAPI):
    path = "/attachment"
    entity_class = Attachment
    entity_info_class = StatefulInfo
    criteria = (
        fields(
            owner_type=str,
            owner_id=(str, int),
            owner_property=str,
            type=(AttachmentType, str),
            title=str,
            upload_id=(str, int),
            state=(State, str),
            visible=bool,
            deleted=bool,
            transform_urls=bool,
        )
        + id_code_name("category")
        + AUDIT_CRITERIA
    )

    def update_visible(self, id, visible, show_loading=True):
        """Show or hide an attachment and return the modification timestamp."""
        return update_property_impl(self, "/attachment/{id}/visible", id, "visible", bool, visible,
                                    show_loading)
