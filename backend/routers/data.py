from fastapi import APIRouter, Depends

from models.country import CityNotFoundResponse, CountryNotFoundResponse, LoadErrorResponse
from routers.deps import get_registry
from services import dataset_service
from services.registry import DatasetRegistry

router = APIRouter(prefix="/data", tags=["data"])

_COUNTRY_ERRORS = {
    404: {"model": CountryNotFoundResponse},
    500: {"model": LoadErrorResponse},
}


@router.get("/{country}", responses=_COUNTRY_ERRORS)
async def get_country_data(
    country: str, registry: DatasetRegistry = Depends(get_registry)
):
    """Return every record of a country's dataset, exactly as stored."""
    return dataset_service.load_country(registry, country)


@router.get(
    "/{country}/city/{planning_id}",
    responses={
        404: {"model": CityNotFoundResponse, "description": "Unknown country or city"},
        500: {"model": LoadErrorResponse},
    },
)
async def get_city(
    country: str,
    planning_id: str,
    registry: DatasetRegistry = Depends(get_registry),
):
    """Return the first record of a country whose Planning Id equals ``planning_id``."""
    return dataset_service.find_city(registry, country, planning_id)
