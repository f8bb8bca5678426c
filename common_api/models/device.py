"""
Devices and what is installed on them.
"""

from typing import List, Optional

from .base import AuditedEntity, Model, lenient
from .common import Address, Info, Location
from .enums import DeviceStatus, State
from .person import PersonInfo


class Software(Model):
    """A piece of software, also used for the server's own description."""

    name: Optional[str] = None
    version: Optional[str] = None
    vendor: Optional[str] = None
    description: Optional[str] = None
    build_time: Optional[str] = None


class OperatingSystem(Software):
    kernel_version: Optional[str] = None
    architecture: Optional[str] = None


class Hardware(Model):
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None
    cpu: Optional[str] = None
    cpu_cores: Optional[int] = None
    memory: Optional[int] = None
    disk: Optional[int] = None
    mac_address: Optional[str] = None


class Device(AuditedEntity):
    code: Optional[str] = None
    name: Optional[str] = None
    app: Optional[Info] = None
    hardware: Optional[Hardware] = None
    operating_system: Optional[OperatingSystem] = None
    softwares: Optional[List[Software]] = None
    deploy_address: Optional[Address] = None
    location: Optional[Location] = None
    ip_address: Optional[str] = None
    owner: Optional[PersonInfo] = None
    register_time: Optional[str] = None
    last_startup_time: Optional[str] = None
    last_heartbeat_time: Optional[str] = None
    status: Optional[lenient(DeviceStatus)] = None
    comment: Optional[str] = None
    state: Optional[lenient(State)] = None
