"""Tests for AirportService against a real SQLite session."""

import pytest

from airport_lookup.models import Airport, City, Country
from airport_lookup.services.airports import AirportNotFoundError, AirportService


@pytest.fixture
def populated(db_session):
    france = Country(id=1, name="France", country_code_two="FR", country_code_three="FRA",
                     mobile_code=33, continent_id=1)
    paris = City(id=1, name="Paris", country_id=1, is_active=True, lat=48.85, long=2.35)
    db_session.add_all([france, paris])
    db_session.add_all([
        Airport(id=1, icao_code="LFPG", iata_code="CDG", name="Charles de Gaulle",
                type="large_airport", latitude_deg=49.0, longitude_deg=2.55,
                elevation_ft=392, city_id=1),
        Airport(id=2, icao_code="LFXX", iata_code="CDG", name="Duplicate CDG",
                type="closed", city_id=1),
        Airport(id=3, icao_code="ZZZZ", iata_code="NOC", name="No City", city_id=None),
    ])
    db_session.commit()
    return db_session


class TestFindByIataCode:
    def test_first_match_wins(self, populated):
        airport = AirportService(populated).find_by_iata_code("CDG")

        assert airport.id == 1
        assert airport.name == "Charles de Gaulle"

    def test_joins_city_and_country(self, populated):
        airport = AirportService(populated).find_by_iata_code("CDG")

        assert airport.city.name == "Paris"
        assert airport.city.country.name == "France"

    def test_absent_code(self, populated):
        assert AirportService(populated).find_by_iata_code("ZZZ") is None

    def test_lowercase_does_not_match(self, populated):
        assert AirportService(populated).find_by_iata_code("cdg") is None


class TestAirportDetail:
    def test_nested_response(self, populated):
        response = AirportService(populated).get_airport_detail("CDG")

        assert response.airport.iata_code == "CDG"
        assert response.airport.address.city.name == "Paris"
        assert response.airport.address.country.country_code_two == "FR"

    def test_not_found_raises(self, populated):
        with pytest.raises(AirportNotFoundError) as exc_info:
            AirportService(populated).get_airport_detail("ZZZ")

        assert exc_info.value.iata_code == "ZZZ"

    def test_airport_without_city(self, populated):
        response = AirportService(populated).get_airport_detail("NOC")

        assert response.airport.address.city is None
        assert response.airport.address.country is None

    def test_null_country_serialized(self, populated):
        populated.add(City(id=2, name="Atlantis", country_id=None, is_active=False))
        populated.add(Airport(id=4, iata_code="ATX", name="Atlantis Field", city_id=2))
        populated.commit()

        body = AirportService(populated).get_airport_detail("ATX").model_dump()

        assert body["airport"]["address"]["country"] is None
        assert body["airport"]["address"]["city"]["name"] == "Atlantis"
