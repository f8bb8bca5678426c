"""
Regions API - The country, province, city, district and street hierarchy.
"""

from ..models import City, Country, District, Info, Province, Street
from ._resource import AUDIT_CRITERIA, CodedEntityAPI, fields, id_code_name

REGION_FIELDS = fields(
    name=str,
    phone_area=str,
    postalcode=str,
    level=str,
    predefined=bool,
    deleted=bool,
) + AUDIT_CRITERIA


class CountryAPI(CodedEntityAPI):
    path = "/country"
    entity_class = Country
    entity_info_class = Info
    criteria = REGION_FIELDS


class ProvinceAPI(CodedEntityAPI):
    path = "/province"
    entity_class = Province
    entity_info_class = Info
    criteria = id_code_name("country") + REGION_FIELDS


class CityAPI(CodedEntityAPI):
    path = "/city"
    entity_class = City
    entity_info_class = Info
    criteria = id_code_name("province") + REGION_FIELDS


class DistrictAPI(CodedEntityAPI):
    path = "/district"
    entity_class = District
    entity_info_class = Info
    criteria = id_code_name("city") + REGION_FIELDS


class StreetAPI(CodedEntityAPI):
    path = "/street"
    entity_class = Street
    entity_info_class = Info
    criteria = id_code_name("district") + REGION_FIELDS
