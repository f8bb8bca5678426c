"""
Geographic regions: country, province, city, district and street.
"""

from typing import Optional

from .base import AuditedEntity
from .common import Info, Location


class Region(AuditedEntity):
    code: Optional[str] = None
    name: Optional[str] = None
    phone_area: Optional[str] = None
    postalcode: Optional[str] = None
    level: Optional[int] = None
    location: Optional[Location] = None
    icon: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    predefined: Optional[bool] = None


class Country(Region):
    short_name: Optional[str] = None


class Province(Region):
    country: Optional[Info] = None


class City(Region):
    province: Optional[Info] = None


class District(Region):
    city: Optional[Info] = None


class Street(Region):
    district: Optional[Info] = None
