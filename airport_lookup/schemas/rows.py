"""
Typed records for spreadsheet rows.

Sheet columns are matched to fields by name, unknown columns are ignored
and blank cells arrive as None. Numeric cells in text columns are read as text.
"""
from pydantic import BaseModel, field_validator
from typing import Optional


class CountryRow(BaseModel):
    id: Optional[int] = None
    name: str
    country_code_two: Optional[str] = None
    country_code_three: Optional[str] = None
    mobile_code: Optional[int] = None
    continent_id: Optional[int] = None

    class Config:
        extra = "ignore"
        coerce_numbers_to_str = True

    @field_validator("country_code_two")
    @classmethod
    def check_code_two(cls, value):
        if value is not None and len(value) > 2:
            raise ValueError("country_code_two exceeds 2 characters")
        return value

    @field_validator("country_code_three")
    @classmethod
    def check_code_three(cls, value):
        if value is not None and len(value) > 3:
            raise ValueError("country_code_three exceeds 3 characters")
        return value


class CityRow(BaseModel):
    id: Optional[int] = None
    name: str
    country_id: Optional[int] = None
    is_active: Optional[bool] = None
    lat: Optional[float] = None
    long: Optional[float] = None

    class Config:
        extra = "ignore"
        coerce_numbers_to_str = True

    @field_validator("lat")
    @classmethod
    def check_lat(cls, value):
        if value is not None and (value < -90 or value > 90):
            raise ValueError("lat must be between -90 and 90")
        return value

    @field_validator("long")
    @classmethod
    def check_long(cls, value):
        if value is not None and (value < -180 or value > 180):
            raise ValueError("long must be between -180 and 180")
        return value


class AirportRow(BaseModel):
    id: Optional[int] = None
    icao_code: Optional[str] = None
    iata_code: Optional[str] = None
    name: str
    type: Optional[str] = None
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None
    elevation_ft: Optional[int] = None
    city_id: Optional[int] = None

    class Config:
        extra = "ignore"
        coerce_numbers_to_str = True

    @field_validator("latitude_deg")
    @classmethod
    def check_latitude(cls, value):
        if value is not None and (value < -90 or value > 90):
            raise ValueError("latitude_deg must be between -90 and 90")
        return value

    @field_validator("longitude_deg")
    @classmethod
    def check_longitude(cls, value):
        if value is not None and (value < -180 or value > 180):
            raise ValueError("longitude_deg must be between -180 and 180")
        return value
