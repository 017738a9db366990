"""Client screens driven end-to-end against the Flask app (in-memory store)."""

from __future__ import annotations

import pytest

from src.parking_system.parking_system.client.admin import AdminDashboard
from src.parking_system.parking_system.client.api import ParkingAPI
from src.parking_system.parking_system.client.intake import IntakeScreen
from src.parking_system.parking_system.core.enums import ParkingStatus


class FlaskSessionAdapter:
    """Minimal ``requests.Session`` stand-in that routes calls into a Flask test client."""

    class _Response:
        def __init__(self, resp):
            self.status_code = resp.status_code
            self._json = resp.get_json(silent=True)

        @property
        def ok(self):
            return self.status_code < 400

        def json(self):
            if self._json is None:
                raise ValueError("no json")
            return self._json

    def __init__(self, client, base_url):
        self._client = client
        self._base_url = base_url

    def request(self, method, url, json=None, headers=None, timeout=None):
        path = url[len(self._base_url):]
        return self._Response(self._client.open(path, method=method, json=json, headers=headers))


@pytest.fixture
def api(client):
    return ParkingAPI("http://testserver", session=FlaskSessionAdapter(client, "http://testserver"))


def test_intake_then_admin_sees_paid_record(api):
    intake = IntakeScreen(api)
    intake.submit("b 1234 xyz")
    assert intake.confirm_payment()

    intake.submit("d 55 qq")
    intake.cancel()

    dash = AdminDashboard(api)
    assert dash.load()

    by_plate = {r.plate_number: r.status for r in dash.records}
    assert by_plate == {"B 1234 XYZ": ParkingStatus.PAID, "D 55 QQ": ParkingStatus.PENDING}
    stats = dash.stats()
    assert (stats.total, stats.paid, stats.pending) == (2, 1, 1)


def test_admin_delete_all_through_api(api):
    for plate in ("B 1", "B 2"):
        api.create(plate)

    dash = AdminDashboard(api)
    dash.load()

    assert dash.delete_all() == 2
    assert dash.records == []
