import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from airport_lookup.database import get_db
from airport_lookup.services.airports import AirportNotFoundError, AirportService
from airport_lookup.schemas.airport import AirportResponse
from airport_lookup.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/airport", tags=["airports"])


@router.get("/{iata_code}",
            description="Get an airport by IATA code with its city and country",
            response_model=AirportResponse,
            responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
def get_airport(iata_code: str, db: Session = Depends(get_db)):
    """
    Looks up the first airport with this exact IATA code.
    """
    try:
        return AirportService(db).get_airport_detail(iata_code)

    except AirportNotFoundError:
        return JSONResponse(status_code=404, content={"error": "Airport not found"})

    except Exception:
        logger.exception(f"Error looking up airport {iata_code}")
        return JSONResponse(
            status_code=500, content={"error": "Internal Server Error"}
        )
