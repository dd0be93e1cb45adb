import json

import pytest
from fastapi.testclient import TestClient

from app.api.cities import get_data_file
from app.main import app


@pytest.fixture
def scenario_rows():
    return [
        {"state_dane_code": "05", "state": "Antioquia", "city_dane_code": "05001", "city": "Medellín"},
        {"state_dane_code": "05", "state": "Antioquia", "city_dane_code": "05002", "city": "Abejorral"},
    ]


@pytest.fixture
def write_dataset(tmp_path):
    """Write rows to a dataset file and return its path."""

    def _write(rows, name="cities.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"data": rows}, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def client_for():
    """Build a TestClient whose endpoints read the given dataset path."""

    def _client(path, **kwargs):
        app.dependency_overrides[get_data_file] = lambda: path
        return TestClient(app, **kwargs)

    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """TestClient reading the shipped dataset."""
    return TestClient(app)
