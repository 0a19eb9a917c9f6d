"""Shared fixtures: an app wired to an in-memory MongoDB."""

import json

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from main import create_app


@pytest.fixture
def sample_dealerships():
    return [
        {"id": 7, "city": "Los Angeles", "state": "California", "zip": "90025", "short_name": "Zathin"},
        {"id": 8, "city": "Rochester", "state": "New York", "zip": "14604", "short_name": "Kanlam"},
        {"id": 9, "city": "Fresno", "state": "CA", "zip": "93650", "short_name": "Bitwolf"},
        {"id": 10, "city": "Sacramento", "state": "ca", "zip": "94203", "short_name": "Trippledex"},
    ]


@pytest.fixture
def sample_review():
    """Factory fixture, call with overrides to get a review dict."""
    def _make(**overrides):
        review = {
            "id": 1,
            "name": "Berkly Shepley",
            "dealership": 7,
            "review": "Total grid-enabled service-desk",
            "purchase": True,
            "purchase_date": "07/11/2020",
            "car_make": "Audi",
            "car_model": "A6",
            "car_year": 2010,
        }
        review.update(overrides)
        return review
    return _make


@pytest.fixture
def sample_reviews(sample_review):
    return [
        sample_review(),
        sample_review(id=2, name="Gwenora Zettoi", dealership=8, purchase=False),
        sample_review(id=5, name="Adeline Prugel", dealership=7, car_make="Toyota"),
    ]


@pytest.fixture
def write_fixtures(tmp_path):
    """Write fixture files and return their paths."""
    def _write(reviews, dealerships):
        reviews_file = tmp_path / "reviews.json"
        dealerships_file = tmp_path / "dealerships.json"
        reviews_file.write_text(json.dumps({"reviews": reviews}), encoding="utf-8")
        dealerships_file.write_text(json.dumps({"dealerships": dealerships}), encoding="utf-8")
        return str(reviews_file), str(dealerships_file)
    return _write


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def make_api(mongo_client, write_fixtures):
    """Factory for a started app seeded with the given fixtures."""
    clients = []

    def _make(reviews, dealerships):
        reviews_file, dealerships_file = write_fixtures(reviews, dealerships)
        app = create_app(
            mongo_client=mongo_client,
            db_name="dealershipsDB_test",
            reviews_file=reviews_file,
            dealerships_file=dealerships_file,
            seed=True,
            wait_for_seed=True,
        )
        client = TestClient(app, raise_server_exceptions=False)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def api(make_api, sample_reviews, sample_dealerships):
    return make_api(sample_reviews, sample_dealerships)


@pytest.fixture
def empty_api(mongo_client):
    """Started app with nothing seeded."""
    app = create_app(mongo_client=mongo_client, db_name="dealershipsDB_test", seed=False)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
