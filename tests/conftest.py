"""Shared fixtures for the airport lookup test suite.

Builds a temporary workbook with pandas and a temporary SQLite database,
and provides a TestClient whose lifespan runs the initial load.
"""

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from airport_lookup.config import Settings
from airport_lookup.database import Database
from airport_lookup.main import create_app


COUNTRIES = [
    {"id": 1, "name": "France", "country_code_two": "FR", "country_code_three": "FRA",
     "mobile_code": 33, "continent_id": 1},
    {"id": 2, "name": "Japan", "country_code_two": "JP", "country_code_three": "JPN",
     "mobile_code": 81, "continent_id": 3},
]

CITIES = [
    {"id": 1, "name": "Paris", "country_id": 1, "is_active": True, "lat": 48.85, "long": 2.35},
    {"id": 2, "name": "Tokyo", "country_id": 2, "is_active": True, "lat": 35.68, "long": 139.69},
    # Points at a country that is not in the Country sheet
    {"id": 3, "name": "Atlantis", "country_id": 99, "is_active": False, "lat": 10.5, "long": -30.25},
]

AIRPORTS = [
    {"icao_code": "LFPG", "iata_code": "CDG", "name": "Charles de Gaulle", "type": "large_airport",
     "latitude_deg": 49.0, "longitude_deg": 2.55, "elevation_ft": 392, "city_id": 1},
    {"icao_code": "LFPO", "iata_code": "ORY", "name": "Paris Orly", "type": "large_airport",
     "latitude_deg": 48.72, "longitude_deg": 2.38, "elevation_ft": 291, "city_id": 1},
    {"icao_code": "RJTT", "iata_code": "HND", "name": "Tokyo Haneda", "type": "large_airport",
     "latitude_deg": 35.55, "longitude_deg": 139.78, "elevation_ft": 35, "city_id": 2},
    {"icao_code": "XATL", "iata_code": "ATX", "name": "Atlantis Field", "type": "small_airport",
     "latitude_deg": 10.5, "longitude_deg": -30.2, "elevation_ft": 5, "city_id": 3},
]


def write_workbook(path, sheets):
    """Write {sheet name: list of row dicts} to an .xlsx file"""
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=name, index=False)
    return path


# ============================================================
# FILE FIXTURES
# ============================================================

@pytest.fixture
def workbook_path(tmp_path):
    return str(write_workbook(
        tmp_path / "Database.xlsx",
        {"Country": COUNTRIES, "City": CITIES, "Airport": AIRPORTS},
    ))


@pytest.fixture
def settings(tmp_path, workbook_path):
    return Settings(
        _env_file=None,
        database_url=None,
        database_path=str(tmp_path / "test.sqlite"),
        data_file=workbook_path,
    )


# ============================================================
# DATABASE FIXTURES
# ============================================================

@pytest.fixture
def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'loader.sqlite'}")
    database.create_tables()
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    with database.session() as db:
        yield db


# ============================================================
# APP FIXTURES
# ============================================================

@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
