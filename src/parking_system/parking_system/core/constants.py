"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PARKING_KEY_PREFIX = "parking:"

DEFAULT_POLL_INTERVAL_SECONDS = 3.0
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10

CSV_HEADERS = ("Plat Nomor", "Waktu Masuk", "Status")
STATUS_LABELS = {
    "paid": "Lunas",
    "pending": "Pending",
}
