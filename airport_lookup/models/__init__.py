from .country import Country
from .city import City
from .airport import Airport

# Ensure all models are available
__all__ = ["Country", "City", "Airport"]
