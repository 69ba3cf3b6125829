from pydantic import BaseModel, ConfigDict, Field


class CountryList(BaseModel):
    countries: list[str]
    count: int


class CountryNotFoundResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str = "Country not found"
    requested: str
    available_countries: str = Field(alias="availableCountries")


class CityNotFoundResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str = "City not found"
    planning_id: str = Field(alias="planningId")
    country: str


class LoadErrorResponse(BaseModel):
    error: str
    details: str
