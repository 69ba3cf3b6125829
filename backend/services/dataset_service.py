import logging
from typing import Any

from services.registry import DatasetRegistry
from utils.json_helpers import json_text, read_json

logger = logging.getLogger(__name__)

PLANNING_ID_FIELD = "Planning Id"


class CityNotFound(LookupError):
    def __init__(self, planning_id: str, country: str):
        super().__init__(f"City {planning_id} not found in {country}")
        self.planning_id = planning_id
        self.country = country


class DatasetLoadError(RuntimeError):
    """A registered dataset could not be read or parsed at request time."""

    def __init__(self, message: str, details: str):
        super().__init__(f"{message}: {details}")
        self.message = message
        self.details = details


def _read_dataset(registry: DatasetRegistry, country: str, message: str) -> Any:
    path = registry.path_for(country)
    try:
        return read_json(path)
    except (OSError, ValueError) as e:
        logger.error("Error reading %s: %s", path.name, e)
        raise DatasetLoadError(message, str(e)) from e


def load_country(registry: DatasetRegistry, country: str) -> Any:
    """Return the parsed contents of a country's dataset file."""
    return _read_dataset(registry, country, "Failed to load data")


def find_city(registry: DatasetRegistry, country: str, planning_id: str) -> dict:
    """Return the first record whose Planning Id matches ``planning_id`` as text."""
    records = _read_dataset(registry, country, "Failed to load city")
    if not isinstance(records, list):
        logger.error("Dataset for %s is not a JSON array", country)
        raise DatasetLoadError(
            "Failed to load city", f"dataset for {country} is not a JSON array"
        )

    for record in records:
        if not isinstance(record, dict) or PLANNING_ID_FIELD not in record:
            continue
        if json_text(record[PLANNING_ID_FIELD]) == planning_id:
            return record

    logger.debug("No record with Planning Id %s in %s", planning_id, country)
    raise CityNotFound(planning_id, country)
