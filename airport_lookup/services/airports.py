from typing import Optional
from sqlalchemy.orm import Session, joinedload

from airport_lookup.models.airport import Airport
from airport_lookup.models.city import City
from airport_lookup.schemas.airport import (
    Address,
    AirportDetail,
    AirportResponse,
    City as CitySchema,
    Country as CountrySchema,
)


class AirportNotFoundError(Exception):
    """No airport matches the requested IATA code"""

    def __init__(self, iata_code: str):
        self.iata_code = iata_code
        super().__init__(f"Airport not found: {iata_code}")


class AirportService:
    """Service for airport lookups"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_iata_code(self, iata_code: str) -> Optional[Airport]:
        """
        First airport whose IATA code equals the given one, with its city
        and the city's country loaded. The code is compared verbatim.
        """
        return (
            self.db.query(Airport)
            .options(joinedload(Airport.city).joinedload(City.country))
            .filter(Airport.iata_code == iata_code)
            .order_by(Airport.id)
            .first()
        )

    def get_airport_detail(self, iata_code: str) -> AirportResponse:
        airport = self.find_by_iata_code(iata_code)
        if airport is None:
            raise AirportNotFoundError(iata_code)
        return self.build_response(airport)

    @staticmethod
    def build_response(airport: Airport) -> AirportResponse:
        """Nest the airport's city and country under an address"""
        city = airport.city
        country = city.country if city is not None else None

        address = Address(
            city=CitySchema.model_validate(city) if city is not None else None,
            country=CountrySchema.model_validate(country) if country is not None else None,
        )

        return AirportResponse(
            airport=AirportDetail(
                id=airport.id,
                icao_code=airport.icao_code,
                iata_code=airport.iata_code,
                name=airport.name,
                type=airport.type,
                latitude_deg=airport.latitude_deg,
                longitude_deg=airport.longitude_deg,
                elevation_ft=airport.elevation_ft,
                address=address,
            )
        )
