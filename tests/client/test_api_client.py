from __future__ import annotations

import pytest
import requests

from src.parking_system.parking_system.client.api import ApiError, ParkingAPI
from src.parking_system.parking_system.core.enums import ParkingStatus

RECORD = {"id": "1", "plateNumber": "B 1234 XYZ", "entryTime": "2026-10-17T08:30:00.000Z", "status": "pending"}


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.calls = []
        self._response = response or FakeResponse(payload={})
        self._error = error

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "json": json, "headers": headers, "timeout": timeout})
        if self._error:
            raise self._error
        return self._response


def test_create_posts_plate_and_parses_record():
    session = FakeSession(FakeResponse(payload={"data": RECORD}))
    api = ParkingAPI("http://svc/", token="tok", session=session)

    record = api.create("b 1234 xyz")

    assert record.plate_number == "B 1234 XYZ"
    call = session.calls[0]
    assert (call["method"], call["url"]) == ("POST", "http://svc/parking")
    assert call["json"] == {"plateNumber": "b 1234 xyz"}
    assert call["headers"]["Authorization"] == "Bearer tok"


def test_update_status_sends_wire_value():
    session = FakeSession(FakeResponse(payload={"data": {**RECORD, "status": "paid"}}))

    record = ParkingAPI("http://svc", session=session).update_status("1", ParkingStatus.PAID)

    assert record.status == ParkingStatus.PAID
    assert session.calls[0]["url"] == "http://svc/parking/1"
    assert session.calls[0]["json"] == {"status": "paid"}


def test_delete_all_returns_deleted_count():
    session = FakeSession(FakeResponse(payload={"success": True, "deleted": 5}))
    assert ParkingAPI("http://svc", session=session).delete_all() == 5


def test_error_message_comes_from_response_body():
    session = FakeSession(FakeResponse(404, {"error": "Parking entry not found"}))

    with pytest.raises(ApiError) as exc:
        ParkingAPI("http://svc", session=session).update_status("x", ParkingStatus.PAID)

    assert exc.value.message == "Parking entry not found"
    assert exc.value.status_code == 404


def test_non_json_error_falls_back_to_generic_message():
    session = FakeSession(FakeResponse(502, None))

    with pytest.raises(ApiError) as exc:
        ParkingAPI("http://svc", session=session).get_all()

    assert exc.value.message == "Request failed"


def test_connection_error_becomes_api_error():
    session = FakeSession(error=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(ApiError):
        ParkingAPI("http://svc", session=session).get_all()


def test_payment_image_url():
    assert ParkingAPI("http://svc/", session=FakeSession()).payment_image_url == "http://svc/payment/qris.png"


def test_health_calls_health_endpoint():
    session = FakeSession(FakeResponse(payload={"status": "ok"}))

    assert ParkingAPI("http://svc", session=session).health() == {"status": "ok"}
    assert session.calls[0]["url"] == "http://svc/health"


def test_non_json_success_body_becomes_api_error():
    api = ParkingAPI("http://svc", session=FakeSession(FakeResponse(200, payload=None)))

    with pytest.raises(ApiError) as exc:
        api.get_all()

    assert exc.value.status_code == 200


def test_malformed_record_becomes_api_error():
    api = ParkingAPI("http://svc", session=FakeSession(FakeResponse(200, {"data": {"id": "1"}})))

    with pytest.raises(ApiError):
        api.create("B 1")


def test_missing_data_list_becomes_api_error():
    api = ParkingAPI("http://svc", session=FakeSession(FakeResponse(200, {"data": None})))

    with pytest.raises(ApiError):
        api.get_all()
