import pytest

from conftest import THAI
from services import dataset_service
from services.dataset_service import CityNotFound, DatasetLoadError
from services.registry import CountryNotFound, DatasetRegistry
from utils.json_helpers import json_text


@pytest.fixture()
def registry(data_dir):
    return DatasetRegistry.scan(data_dir)


def test_load_country_returns_parsed_file(registry):
    assert dataset_service.load_country(registry, "Thai") == THAI


def test_load_country_unknown(registry):
    with pytest.raises(CountryNotFound):
        dataset_service.load_country(registry, "france")


def test_load_country_rereads_file(registry, data_dir):
    (data_dir / "japen.json").write_text('[{"Planning Id": 9}]', encoding="utf-8")
    assert dataset_service.load_country(registry, "japen") == [{"Planning Id": 9}]


def test_load_country_malformed_json(registry, data_dir):
    (data_dir / "thai.json").write_text("[{not json", encoding="utf-8")
    with pytest.raises(DatasetLoadError) as exc_info:
        dataset_service.load_country(registry, "thai")
    assert exc_info.value.message == "Failed to load data"
    assert exc_info.value.details


def test_load_country_rejects_nan(registry, data_dir):
    (data_dir / "thai.json").write_text('[{"Planning Id": 1, "Rate": NaN}]', encoding="utf-8")
    with pytest.raises(DatasetLoadError) as exc_info:
        dataset_service.load_country(registry, "thai")
    assert "NaN" in exc_info.value.details


def test_load_country_vanished_file(registry, data_dir):
    (data_dir / "thai.json").unlink()
    with pytest.raises(DatasetLoadError):
        dataset_service.load_country(registry, "thai")


def test_find_city_numeric_and_string_ids(registry):
    assert dataset_service.find_city(registry, "thai", "1")["City"] == "Bangkok"
    assert dataset_service.find_city(registry, "thai", "2")["City"] == "Chiang Mai"
    assert dataset_service.find_city(registry, "japen", "1")["City"] == "Tokyo"


def test_find_city_first_match_wins(registry):
    assert dataset_service.find_city(registry, "thai", "3")["City"] == "Phuket"


def test_find_city_unknown_id(registry):
    with pytest.raises(CityNotFound) as exc_info:
        dataset_service.find_city(registry, "Thai", "999999")
    assert exc_info.value.planning_id == "999999"
    assert exc_info.value.country == "Thai"


def test_find_city_unknown_country_checked_first(registry):
    with pytest.raises(CountryNotFound):
        dataset_service.find_city(registry, "france", "1")


def test_find_city_skips_records_without_id(registry, data_dir):
    (data_dir / "japen.json").write_text(
        '[1, {"City": "Nowhere"}, {"Planning Id": 1.0, "City": "Tokyo"}]',
        encoding="utf-8",
    )
    assert dataset_service.find_city(registry, "japen", "1")["City"] == "Tokyo"


def test_find_city_requires_array(registry):
    with pytest.raises(DatasetLoadError) as exc_info:
        dataset_service.find_city(registry, "data", "1")
    assert exc_info.value.message == "Failed to load city"


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        ("1", "1"),
        (1.0, "1"),
        (1.5, "1.5"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (True, "true"),
        (None, "null"),
    ],
)
def test_json_text(value, expected):
    assert json_text(value) == expected
