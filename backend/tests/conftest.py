import json

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

THAI = [
    {"Planning Id": 1, "City": "Bangkok", "Hotels": 412},
    {"Planning Id": "2", "City": "Chiang Mai", "Hotels": 156},
    {"Planning Id": 3, "City": "Phuket", "Hotels": 238},
    {"Planning Id": 3, "City": "Phuket (duplicate)", "Hotels": 1},
]

JAPEN = [
    {"Planning Id": "1", "City": "Tokyo", "Hotels": 530},
]


@pytest.fixture()
def data_dir(tmp_path):
    (tmp_path / "thai.json").write_text(json.dumps(THAI), encoding="utf-8")
    (tmp_path / "japen.json").write_text(json.dumps(JAPEN), encoding="utf-8")
    (tmp_path / "data.json").write_text(json.dumps({"all": True}), encoding="utf-8")
    (tmp_path / "README.txt").write_text("not a dataset", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def settings(data_dir):
    return Settings(data_dir=data_dir, cors_origins=["*"])


@pytest.fixture()
def app_client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
