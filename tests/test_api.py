"""
Tests for the café directory API.
"""

import json

import pytest
from fastapi.testclient import TestClient

from cafe_directory.api.app import app
from cafe_directory.config import Settings
from cafe_directory.errors import DirectoryLoadError
from cafe_directory.repositories import DEFAULT_CAFES, static_directory

MOSCOW = [cafe.name for cafe in DEFAULT_CAFES["moscow"]]
TULA = [cafe.name for cafe in DEFAULT_CAFES["tula"]]


@pytest.fixture
def client():
    """Create a test client with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


def get_cafes(client, **params):
    return client.get("/cafe", params=params)


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Café Directory API"
    assert data["endpoints"]["cafe"] == "/cafe"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cities": len(DEFAULT_CAFES)}


def test_cities(client):
    response = client.get("/cities")
    assert response.status_code == 200
    assert response.json() == {"cities": ["moscow", "tula"]}


@pytest.mark.parametrize(
    "params, expected",
    [
        ({"count": "2", "city": "moscow"}, MOSCOW[:2]),
        ({"city": "tula"}, TULA),
        ({"city": "moscow"}, MOSCOW),
        ({"city": "moscow", "search": "ложка"}, ["Ложка и вилка", "Серебряная ложка"]),
    ],
)
def test_cafe_ok(client, params, expected):
    response = get_cafes(client, **params)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == ",".join(expected)


def test_cafe_raw_cyrillic_query(client):
    """Percent-encoded search text is decoded before matching."""
    response = client.get("/cafe?city=moscow&search=%D0%B2%D0%B8%D0%BB%D0%BA%D0%B0")
    assert response.status_code == 200
    assert response.text == "Ложка и вилка"


@pytest.mark.parametrize(
    "params, message",
    [
        ({}, "unknown city"),
        ({"city": "omsk"}, "unknown city"),
        ({"city": "Moscow"}, "unknown city"),
        ({"city": ""}, "unknown city"),
        ({"city": "tula", "count": "na"}, "incorrect count"),
        ({"city": "tula", "count": "-1"}, "incorrect count"),
        ({"city": "tula", "count": "1.5"}, "incorrect count"),
        ({"city": "tula", "count": "99999999999999999999"}, "incorrect count"),
        ({"city": "moscow", "count": "1" * 5000}, "incorrect count"),
        ({"city": "omsk", "count": "na"}, "unknown city"),
    ],
)
def test_cafe_negative(client, params, message):
    response = get_cafes(client, **params)
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.strip() == message


@pytest.mark.parametrize(
    "count, want",
    [
        (0, 0),
        (1, 1),
        (2, 2),
        (100, len(MOSCOW)),
    ],
)
def test_cafe_count(client, count, want):
    response = get_cafes(client, city="moscow", count=str(count))
    assert response.status_code == 200

    cafes = response.text.split(",")
    if count == 0:
        assert cafes == [""]
    else:
        assert len(cafes) == want
        assert cafes == MOSCOW[:want]


@pytest.mark.parametrize(
    "search, want_count",
    [
        ("фасоль", 0),
        ("кофе", 2),
        ("вилка", 1),
        ("КОФЕ", 2),
    ],
)
def test_cafe_search(client, search, want_count):
    response = get_cafes(client, city="moscow", search=search)
    assert response.status_code == 200

    cafes = [name for name in response.text.strip().split(",") if name]
    assert len(cafes) == want_count
    for cafe in cafes:
        assert search.lower() in cafe.lower()


def test_cafe_search_and_count(client):
    response = get_cafes(client, city="moscow", search="кофе", count="1")
    assert response.status_code == 200
    assert response.text == "Мир кофе"


def test_largest_count_returns_full_list(client):
    response = get_cafes(client, city="moscow", count="9223372036854775807")
    assert response.status_code == 200
    assert response.text == ",".join(MOSCOW)


def test_empty_count_means_no_limit(client):
    response = get_cafes(client, city="tula", count="")
    assert response.status_code == 200
    assert response.text == ",".join(TULA)


def test_lifespan_loads_data_file(tmp_path, monkeypatch):
    data_file = tmp_path / "cafes.json"
    data_file.write_text(
        json.dumps({"Omsk": [{"name": "Сибирь"}, {"name": "Иртыш"}]}, ensure_ascii=False),
        encoding="utf-8",
    )
    monkeypatch.setattr(static_directory, "settings", Settings(cafe_data_path=str(data_file)))

    with TestClient(app) as test_client:
        assert test_client.get("/cafe", params={"city": "omsk"}).text == "Сибирь,Иртыш"
        assert test_client.get("/cafe", params={"city": "moscow"}).status_code == 400


def test_lifespan_fails_on_invalid_data_file(tmp_path, monkeypatch):
    data_file = tmp_path / "cafes.json"
    data_file.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(static_directory, "settings", Settings(cafe_data_path=str(data_file)))

    with pytest.raises(DirectoryLoadError):
        with TestClient(app):
            pass
