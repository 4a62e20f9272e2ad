import sqlite3


def case_numbers(response):
    return [row["case_number"] for row in response.json()]


def test_get_incidents_newest_first(client):
    response = client.get("/incidents")

    assert response.status_code == 200
    assert case_numbers(response) == ["19245020", "19245016", "19245014", "19245011", "19245005"]


def test_get_incidents_splits_date_and_time(client):
    response = client.get("/incidents?limit=1")

    assert response.json() == [
        {
            "case_number": "19245020",
            "date": "2019-10-30",
            "time": "23:57:08",
            "code": 9954,
            "incident": "Proactive Police Visit",
            "police_grid": 87,
            "neighborhood_number": 7,
            "block": "THOMAS AV  & VICTORIA",
        }
    ]


def test_get_incidents_limit_returns_most_recent(client):
    response = client.get("/incidents?limit=2")

    assert response.status_code == 200
    assert case_numbers(response) == ["19245020", "19245016"]


def test_get_incidents_malformed_limit_uses_default(client):
    response = client.get("/incidents?limit=lots")

    assert response.status_code == 200
    assert len(response.json()) == 5


def test_get_incidents_default_cap(db_path, make_client):
    conn = sqlite3.connect(db_path)
    conn.executemany(
        "INSERT INTO Incidents VALUES (?, ?, ?, ?, ?, ?, ?)",
        [
            (f"18{n:06d}", f"2018-01-01T00:{n // 60 % 60:02d}:{n % 60:02d}", 700, "Auto Theft", 95, 4, "79X 6 ST E")
            for n in range(1000)
        ],
    )
    conn.commit()
    conn.close()

    client = make_client(db_path)
    response = client.get("/incidents")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1000
    # The five seeded 2019 rows are the newest and must come first.
    assert [row["case_number"] for row in data[:5]] == [
        "19245020", "19245016", "19245014", "19245011", "19245005",
    ]


def test_get_incidents_configured_cap(db_path, make_client):
    client = make_client(db_path, incident_limit=3)

    response = client.get("/incidents")

    assert case_numbers(response) == ["19245020", "19245016", "19245014"]


def test_get_incidents_date_range(client):
    response = client.get("/incidents?start_date=2019-10-29&end_date=2019-10-29")

    assert case_numbers(response) == ["19245011"]


def test_get_incidents_start_date_only(client):
    response = client.get("/incidents?start_date=2019-10-30")

    assert case_numbers(response) == ["19245020", "19245016", "19245014"]


def test_get_incidents_by_grid(client):
    response = client.get("/incidents?grid=87")

    assert case_numbers(response) == ["19245020", "19245016", "19245005"]


def test_get_incidents_by_neighborhood(client):
    response = client.get("/incidents?neighborhood=4, 3")

    assert case_numbers(response) == ["19245014", "19245011"]


def test_get_incidents_combined_filters(client):
    response = client.get("/incidents?code=9954,110&grid=87&end_date=2019-10-29&limit=10")

    assert response.status_code == 200
    assert case_numbers(response) == ["19245005"]


def test_get_incidents_oversized_limit_uses_default(client):
    response = client.get("/incidents?limit=99999999999999999999")

    assert response.status_code == 200
    assert len(response.json()) == 5
