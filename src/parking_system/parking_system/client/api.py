"""HTTP client for the parking record service."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS
from ..core.enums import ParkingStatus
from ..parking.model import ParkingRecord

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the service answers with an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ParkingAPI:
    def __init__(
        self,
        base_url: str,
        *,
        token: Optional[str] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._headers = {"Content-Type": "application/json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def payment_image_url(self) -> str:
        return f"{self._base_url}/payment/qris.png"

    def _request(self, method: str, endpoint: str, *, json: Optional[dict] = None) -> dict[str, Any]:
        url = f"{self._base_url}{endpoint}"
        try:
            response = self._session.request(method, url, json=json, headers=self._headers, timeout=self._timeout)
        except requests.exceptions.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError("Request failed") from e

        if not response.ok:
            try:
                message = response.json().get("error") or "Request failed"
            except (ValueError, AttributeError):
                message = "Request failed"
            raise ApiError(message, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body", method, url)
            raise ApiError("Request failed", status_code=response.status_code) from e
        if not isinstance(body, dict):
            logger.error("%s %s returned an unexpected body: %r", method, url, body)
            raise ApiError("Request failed", status_code=response.status_code)
        return body

    @staticmethod
    def _parse_record(item: Any) -> ParkingRecord:
        try:
            return ParkingRecord.from_dict(item)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error("Malformed parking record %r: %s", item, e)
            raise ApiError("Request failed") from e

    def get_all(self) -> list[ParkingRecord]:
        result = self._request("GET", "/parking")
        items = result.get("data")
        if not isinstance(items, list):
            raise ApiError("Request failed")
        return [self._parse_record(item) for item in items]

    def create(self, plate_number: str) -> ParkingRecord:
        result = self._request("POST", "/parking", json={"plateNumber": plate_number})
        return self._parse_record(result.get("data"))

    def update_status(self, record_id: str, status: ParkingStatus) -> ParkingRecord:
        result = self._request("PUT", f"/parking/{record_id}", json={"status": ParkingStatus(status).value})
        return self._parse_record(result.get("data"))

    def delete(self, record_id: str) -> None:
        self._request("DELETE", f"/parking/{record_id}")

    def delete_all(self) -> int:
        result = self._request("DELETE", "/parking")
        try:
            return int(result.get("deleted", 0))
        except (TypeError, ValueError) as e:
            raise ApiError("Request failed") from e

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health")
