"""
Devices API - Terminals running the client applications.

Besides the common operations, the properties a device reports about
itself can be updated one at a time.
"""

from ..models import Address, Device, DeviceStatus, Hardware, Location, PersonInfo, Software, State, StatefulInfo
from ..validation import ID_TYPES, TIME_TYPES
from ._resource import AUDIT_CRITERIA, REGION_CRITERIA, StatefulCodedEntityAPI, fields, id_code_name, time_range
from .impl import update_property_impl


class DeviceAPI(StatefulCodedEntityAPI):
    path = "/device"
    entity_class = Device
    entity_info_class = StatefulInfo
    criteria = (
        fields(
            name=str,
            ip_address=str,
            owner_id=ID_TYPES,
            owner_username=str,
            owner_name=str,
            owner_mobile=str,
            owner_credential_type=str,
            owner_credential_number=str,
            status=(DeviceStatus, str),
            state=(State, str),
            deleted=bool,
        )
        + id_code_name("app")
        + REGION_CRITERIA
        + time_range("last_heartbeat_time")
        + time_range("last_startup_time")
        + time_range("register_time")
        + AUDIT_CRITERIA
    )

    def update_hardware(self, id, hardware, show_loading=True):
        return update_property_impl(self, "/device/{id}/hardware", id, "hardware", (Hardware, dict),
                                    hardware, show_loading)

    def update_operating_system(self, id, operating_system, show_loading=True):
        return update_property_impl(self, "/device/{id}/operating-system", id, "operating_system",
                                    (Software, dict), operating_system, show_loading)

    def update_softwares(self, id, softwares, show_loading=True):
        return update_property_impl(self, "/device/{id}/softwares", id, "softwares", (list, tuple),
                                    softwares, show_loading)

    def update_deploy_address(self, id, deploy_address, show_loading=True):
        return update_property_impl(self, "/device/{id}/deploy-address", id, "deploy_address",
                                    (Address, dict), deploy_address, show_loading)

    def update_location(self, id, location, show_loading=True):
        return update_property_impl(self, "/device/{id}/location", id, "location", (Location, dict),
                                    location, show_loading)

    def update_ip_address(self, id, ip_address, show_loading=True):
        return update_property_impl(self, "/device/{id}/ip-address", id, "ip_address", str,
                                    ip_address, show_loading)

    def update_owner(self, id, owner, show_loading=True):
        return update_property_impl(self, "/device/{id}/owner", id, "owner", (PersonInfo, dict),
                                    owner, show_loading)

    def update_last_startup_time(self, id, last_startup_time, show_loading=True):
        return update_property_impl(self, "/device/{id}/last-startup-time", id, "last_startup_time",
                                    TIME_TYPES, last_startup_time, show_loading)

    def update_last_heartbeat_time(self, id, last_heartbeat_time, show_loading=True):
        return update_property_impl(self, "/device/{id}/last-heartbeat-time", id, "last_heartbeat_time",
                                    TIME_TYPES, last_heartbeat_time, show_loading)
