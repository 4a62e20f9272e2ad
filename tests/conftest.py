import sqlite3

import pytest
from fastapi.testclient import TestClient

from stpaul_crime_api.app.core.config import Settings
from stpaul_crime_api.app.main import create_app

SCHEMA = """
CREATE TABLE Codes (
    code INTEGER PRIMARY KEY,
    incident_type TEXT
);

CREATE TABLE Neighborhoods (
    neighborhood_number INTEGER PRIMARY KEY,
    neighborhood_name TEXT
);

CREATE TABLE Incidents (
    case_number TEXT PRIMARY KEY,
    date_time DATETIME,
    code INTEGER,
    incident TEXT,
    police_grid INTEGER,
    neighborhood_number INTEGER,
    block TEXT
);
"""

CODES = [
    (300, "Aggravated Assault"),
    (110, "Murder, Non Negligent Manslaughter"),
    (700, "Auto Theft"),
    (100, "Murder"),
    (9954, "Proactive Police Visit"),
]

NEIGHBORHOODS = [
    (4, "Dayton's Bluff"),
    (1, "Conway/Battlecreek/Highwood"),
    (7, "Thomas/Dale(Frogtown)"),
    (3, "West Side"),
]

# Deliberately not in timestamp order.
INCIDENTS = [
    ("19245011", "2019-10-29T22:30:00", 100, "Murder", 120, 3, "2X GEORGE ST W"),
    ("19245020", "2019-10-30T23:57:08", 9954, "Proactive Police Visit", 87, 7, "THOMAS AV  & VICTORIA"),
    ("19245005", "2019-10-28T08:15:00", 110, "Murder", 87, 1, "17XX HUDSON RD"),
    ("19245014", "2019-10-30T23:43:19", 700, "Auto Theft", 95, 4, "79X 6 ST E"),
    ("19245016", "2019-10-30T23:53:04", 9954, "Proactive Police Visit", 87, 7, "THOMAS AV  & VICTORIA"),
]


@pytest.fixture
def db_path(tmp_path):
    """Create a seeded SQLite crime database and return its path."""
    path = tmp_path / "stpaul_crime.sqlite3"
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA)
        conn.executemany("INSERT INTO Codes VALUES (?, ?)", CODES)
        conn.executemany("INSERT INTO Neighborhoods VALUES (?, ?)", NEIGHBORHOODS)
        conn.executemany("INSERT INTO Incidents VALUES (?, ?, ?, ?, ?, ?, ?)", INCIDENTS)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def make_client():
    """Return a factory that starts the API against a given database file."""
    clients = []

    def _make(path, **overrides):
        settings = Settings(database_url=str(path), **overrides)
        client = TestClient(create_app(settings))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(db_path, make_client):
    return make_client(db_path)


@pytest.fixture
def incident_count(db_path):
    """Return a callable counting the rows in Incidents."""

    def _count():
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM Incidents").fetchone()[0]
        finally:
            conn.close()

    return _count
