from pydantic import BaseModel
from typing import Optional


class Country(BaseModel):
    """Country as nested in an airport address"""

    id: int
    name: str
    country_code_two: Optional[str] = None
    country_code_three: Optional[str] = None
    mobile_code: Optional[int] = None
    continent_id: Optional[int] = None

    class Config:
        from_attributes = True


class City(BaseModel):
    """City as nested in an airport address"""

    id: int
    name: str
    country_id: Optional[int] = None
    is_active: Optional[bool] = None
    lat: Optional[float] = None
    long: Optional[float] = None

    class Config:
        from_attributes = True


class Address(BaseModel):
    city: Optional[City] = None
    country: Optional[Country] = None


class AirportDetail(BaseModel):
    """Airport schema for responses"""

    id: int
    icao_code: Optional[str] = None  # Código ICAO (4 letras)
    iata_code: Optional[str] = None  # Código IATA (3 letras)
    name: str
    type: Optional[str] = None
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None
    elevation_ft: Optional[int] = None
    address: Address

    class Config:
        from_attributes = True


class AirportResponse(BaseModel):
    airport: AirportDetail
