"""
Apps API - Client applications registered with the server.
"""

from ..models import App, State, StatefulInfo
from ._resource import AUDIT_CRITERIA, StatefulCodedEntityAPI, fields, id_code_name, time_range


class AppAPI(StatefulCodedEntityAPI):
    path = "/app"
    entity_class = App
    entity_info_class = StatefulInfo
    criteria = (
        fields(
            name=str,
            organization_id=(str, int),
            organization_name=str,
            predefined=bool,
            state=(State, str),
            deleted=bool,
        )
        + id_code_name("category")
        + time_range("last_authorize_time")
        + AUDIT_CRITERIA
    )
