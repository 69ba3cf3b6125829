from fastapi import APIRouter, Depends

from models.country import CountryList
from routers.deps import get_registry
from services.registry import DatasetRegistry

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=CountryList)
async def list_countries(registry: DatasetRegistry = Depends(get_registry)):
    countries = registry.countries()
    return CountryList(countries=countries, count=len(countries))
