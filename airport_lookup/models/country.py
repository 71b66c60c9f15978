from sqlalchemy import Column, Integer, String
from airport_lookup.database import Base


class Country(Base):
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    country_code_two = Column(String(2), nullable=True)
    country_code_three = Column(String(3), nullable=True)
    mobile_code = Column(Integer, nullable=True)
    continent_id = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<Country(id={self.id}, code='{self.country_code_two}', name='{self.name}')>"
