from sqlalchemy import Column, Integer, String, Boolean, Float
from sqlalchemy.orm import relationship
from airport_lookup.database import Base


class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Reference to country, no FK constraint: a dangling id reads as no country
    country_id = Column(Integer, nullable=True, index=True)
    is_active = Column(Boolean, default=True)
    lat = Column(Float, nullable=True)
    long = Column(Float, nullable=True)

    # Many cities per country
    country = relationship(
        "Country", primaryjoin="foreign(City.country_id) == Country.id", backref="cities"
    )

    def __repr__(self):
        return f"<City(id={self.id}, name='{self.name}', country_id={self.country_id})>"
