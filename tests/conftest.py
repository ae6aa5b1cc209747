"""
Test configuration and fixtures for the LightBnB data-access layer.

Unit tests use FakeProvider, which records every statement. Integration
tests need a PostgreSQL database named by TEST_DATABASE_URL and are skipped
when it is not set.
"""

import os
from datetime import date

import pytest

from db.connection import ConnectionProvider


class FakeProvider:
    """Stands in for ConnectionProvider: records calls, returns canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        if self.error is not None:
            raise self.error
        return [dict(r) for r in self.rows]

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_params(self):
        return self.calls[-1][1]


def make_property_row(**overrides):
    """A full properties row as returned by `SELECT properties.*`."""
    row = {
        "id": 1,
        "owner_id": 7,
        "title": "Harbour view loft",
        "description": "Bright loft near the seawall.",
        "thumbnail_photo_url": "https://img.example.com/1-thumb.jpg",
        "cover_photo_url": "https://img.example.com/1-cover.jpg",
        "cost_per_night": 15000,
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "country": "Canada",
        "street": "123 Water St",
        "city": "Vancouver",
        "province": "BC",
        "post_code": "V6B 1A1",
    }
    row.update(overrides)
    return row


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def property_row():
    return make_property_row()


# ── Integration ───────────────────────────────────────────

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

SCHEMA_SQL = """
DROP TABLE IF EXISTS property_reviews CASCADE;
DROP TABLE IF EXISTS reservations CASCADE;
DROP TABLE IF EXISTS properties CASCADE;
DROP TABLE IF EXISTS users CASCADE;

CREATE TABLE users (
    id          SERIAL PRIMARY KEY,
    name        VARCHAR(255) NOT NULL,
    email       VARCHAR(255) NOT NULL UNIQUE,
    password    VARCHAR(255) NOT NULL
);

CREATE TABLE properties (
    id                  SERIAL PRIMARY KEY,
    owner_id            INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    title               VARCHAR(255) NOT NULL,
    description         TEXT,
    thumbnail_photo_url VARCHAR(255) NOT NULL,
    cover_photo_url     VARCHAR(255) NOT NULL,
    cost_per_night      INTEGER NOT NULL DEFAULT 0,
    parking_spaces      INTEGER NOT NULL DEFAULT 0,
    number_of_bathrooms INTEGER NOT NULL DEFAULT 0,
    number_of_bedrooms  INTEGER NOT NULL DEFAULT 0,
    country             VARCHAR(255) NOT NULL,
    street              VARCHAR(255) NOT NULL,
    city                VARCHAR(255) NOT NULL,
    province            VARCHAR(255) NOT NULL,
    post_code           VARCHAR(255) NOT NULL
);

CREATE TABLE reservations (
    id          SERIAL PRIMARY KEY,
    start_date  DATE NOT NULL,
    end_date    DATE NOT NULL,
    property_id INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    guest_id    INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE
);

CREATE TABLE property_reviews (
    id          SERIAL PRIMARY KEY,
    guest_id    INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    property_id INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    rating      SMALLINT NOT NULL DEFAULT 0,
    message     TEXT
);
"""

# (title, city, cost_per_night in cents, ratings)
SEED_PROPERTIES = [
    ("Gastown loft", "Vancouver", 15000, [5, 4]),
    ("Annex condo", "Toronto", 8000, [3]),
    ("Lonsdale cabin", "North Vancouver", 25000, [4]),
    ("Kensington house", "Calgary", 12000, [2, 3]),
    ("Inner harbour suite", "Victoria", 30000, [5]),
    ("Yaletown studio", "Vancouver", 9000, [3, 4]),
]

# (property index into SEED_PROPERTIES, start, end)
SEED_RESERVATIONS = [
    (0, date(2024, 3, 1), date(2024, 3, 5)),
    (1, date(2024, 1, 10), date(2024, 1, 12)),
    (2, date(2024, 2, 1), date(2024, 2, 3)),
    (4, date(2024, 4, 20), date(2024, 4, 22)),
]


def _seed(provider):
    owner = provider.execute(
        "INSERT INTO users (name, email, password) VALUES (%s, %s, %s) RETURNING id;",
        ["Owner Olive", "olive@example.com", "hashed-pw"],
    )[0]["id"]
    guest = provider.execute(
        "INSERT INTO users (name, email, password) VALUES (%s, %s, %s) RETURNING id;",
        ["Guest Gus", "gus@example.com", "hashed-pw"],
    )[0]["id"]

    property_ids = []
    for title, city, cost, ratings in SEED_PROPERTIES:
        property_id = provider.execute(
            """
            INSERT INTO properties (owner_id, title, description, thumbnail_photo_url,
                cover_photo_url, cost_per_night, parking_spaces, number_of_bathrooms,
                number_of_bedrooms, country, street, city, province, post_code)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id;
            """,
            [owner, title, "seed", "thumb.jpg", "cover.jpg", cost, 1, 1, 2,
             "Canada", "1 Main St", city, "XX", "A1A 1A1"],
        )[0]["id"]
        property_ids.append(property_id)
        for rating in ratings:
            provider.execute(
                "INSERT INTO property_reviews (guest_id, property_id, rating) VALUES (%s, %s, %s);",
                [guest, property_id, rating],
            )

    for index, start, end in SEED_RESERVATIONS:
        provider.execute(
            "INSERT INTO reservations (start_date, end_date, property_id, guest_id) "
            "VALUES (%s, %s, %s, %s);",
            [start, end, property_ids[index], guest],
        )
    return {"owner_id": owner, "guest_id": guest, "property_ids": property_ids}


@pytest.fixture(scope="session")
def pg_provider():
    """A ConnectionProvider on a freshly created and seeded test database."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")
    provider = ConnectionProvider(TEST_DATABASE_URL)
    provider.execute(SCHEMA_SQL)
    provider.seed = _seed(provider)
    yield provider
    provider.close()
