from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from airport_lookup.database import Base


class Airport(Base):
    __tablename__ = "airports"

    id = Column(Integer, primary_key=True, index=True)
    icao_code = Column(String(10), nullable=True, index=True)
    # Lookup key, not unique: lookups return the first match
    iata_code = Column(String(10), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=True)
    latitude_deg = Column(Float, nullable=True)
    longitude_deg = Column(Float, nullable=True)
    elevation_ft = Column(Integer, nullable=True)
    # Reference to city, no FK constraint
    city_id = Column(Integer, nullable=True, index=True)

    # Many airports per city
    city = relationship(
        "City", primaryjoin="foreign(Airport.city_id) == City.id", backref="airports"
    )

    def __repr__(self):
        return f"<Airport(id={self.id}, iata='{self.iata_code}', icao='{self.icao_code}', name='{self.name}')>"
