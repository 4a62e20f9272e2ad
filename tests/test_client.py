from unittest.mock import Mock

import pytest
import requests

from stpaul_crime_client import CrimeAPIClient


def make_response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "Internal Server Error" if status_code >= 500 else "OK"
    if json_data is not None:
        response.headers = {"content-type": "application/json"}
        response.json.return_value = json_data
    else:
        response.headers = {"content-type": "text/plain; charset=utf-8"}
    response.text = text
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return CrimeAPIClient(base_url="http://crime.test/", session=session)


def test_get_codes_joins_identifiers(api, session):
    session.request.return_value = make_response(json_data=[{"code": 100, "type": "Murder"}])

    codes, error = api.get_codes([100, 110])

    assert error is None
    assert codes == [{"code": 100, "type": "Murder"}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://crime.test/codes"
    assert kwargs["params"] == {"code": "100,110"}


def test_get_neighborhoods_without_filter_sends_no_params(api, session):
    session.request.return_value = make_response(json_data=[])

    neighborhoods, error = api.get_neighborhoods()

    assert (neighborhoods, error) == ([], None)
    assert session.request.call_args.kwargs["params"] == {}


def test_get_incidents_drops_unset_filters(api, session):
    session.request.return_value = make_response(json_data=[{"case_number": "19245020"}])

    incidents, error = api.get_incidents(start_date="2019-10-01", grids=(87, 95), neighborhoods=7, limit=2)

    assert error is None
    assert incidents == [{"case_number": "19245020"}]
    assert session.request.call_args.kwargs["params"] == {
        "start_date": "2019-10-01",
        "grid": "87,95",
        "neighborhood": "7",
        "limit": 2,
    }


def test_get_incidents_server_error(api, session):
    session.request.return_value = make_response(500, text="Error retrieving incidents")

    incidents, error = api.get_incidents()

    assert incidents == []
    assert error == {"status_code": 500, "message": "Error retrieving incidents"}


def test_add_incident(api, session):
    session.request.return_value = make_response(text="OK")
    incident = {"case_number": "22076132", "date": "2022-05-31", "time": "14:05:00"}

    ok, error = api.add_incident(incident)

    assert (ok, error) == (True, None)
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == "http://crime.test/new-incident"
    assert kwargs["json"] == incident


def test_add_incident_duplicate(api, session):
    session.request.return_value = make_response(500, text="Case number already exists")

    ok, error = api.add_incident({"case_number": "19245020"})

    assert ok is False
    assert error["message"] == "Case number already exists"


def test_remove_incident(api, session):
    session.request.return_value = make_response(text="OK")

    ok, error = api.remove_incident("19245020")

    assert (ok, error) == (True, None)
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "DELETE"
    assert kwargs["json"] == {"case_number": "19245020"}


def test_transport_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    ok, error = api.remove_incident("19245020")

    assert ok is False
    assert error == {"status_code": None, "message": "connection refused"}
