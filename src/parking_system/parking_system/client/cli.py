"""Terminal client: intake and admin screens over the parking API.

Usage:
    parking-client intake [PLATE]
    parking-client admin [--search S] [--status all|pending|paid] [--interval N]
    parking-client export [--output FILE]
    parking-client delete ID
    parking-client clear
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from ..common.datetime_utils import format_id_locale
from ..core.constants import DEFAULT_POLL_INTERVAL_SECONDS
from ..core.enums import StatusFilter
from .admin import AdminDashboard
from .api import ApiError, ParkingAPI
from .export import export_filename, status_label
from .intake import IntakeScreen

logger = logging.getLogger(__name__)


def build_api() -> ParkingAPI:
    return ParkingAPI(
        os.getenv("PARKING_API_URL", "http://localhost:5000"),
        token=os.getenv("PARKING_API_TOKEN") or None,
    )


def render_dashboard(dashboard: AdminDashboard, out=None) -> None:
    if out is None:
        out = sys.stdout
    stats = dashboard.stats()
    lines = [
        "",
        "Dashboard Admin",
        f"Total Transaksi: {stats.total}   Sudah Bayar: {stats.paid}   Pending: {stats.pending}",
    ]
    if dashboard.error:
        lines.append(f"! {dashboard.error}")

    lines.append(f"{'Plat Nomor':<16} {'Waktu Masuk':<22} {'Status':<8} ID")
    empty = dashboard.empty_message()
    if empty:
        lines.append(empty)
    for r in dashboard.filtered_records():
        lines.append(f"{r.plate_number:<16} {format_id_locale(r.entry_time):<22} {status_label(r):<8} {r.id}")

    out.write("\n".join(lines) + "\n")
    out.flush()


def run_intake(api: ParkingAPI, plate: Optional[str]) -> int:
    screen = IntakeScreen(api)
    plate = plate if plate is not None else input("Plat Nomor Kendaraan: ")

    if screen.submit(plate) is None:
        print(screen.error or "Plat nomor wajib diisi")
        return 1

    booking = screen.current_booking
    print(f"Data Berhasil Disimpan! Plat Nomor: {booking.plate_number}")
    print(f"Silakan Scan QRIS untuk Pembayaran: {screen.payment_image_url}")

    while True:
        answer = input("Konfirmasi pembayaran? [y/n] ").strip().lower()
        if answer in {"n", "no", "batal"}:
            screen.cancel()
            print("Dibatalkan.")
            return 0
        if answer not in {"y", "yes", "ya"}:
            continue
        if screen.confirm_payment():
            print(screen.notice)
            return 0
        print(screen.error)


def run_admin(api: ParkingAPI, *, search: str, status: str, interval: float) -> int:
    dashboard = AdminDashboard(api, poll_interval=interval, on_change=render_dashboard)
    dashboard.set_search(search)
    dashboard.set_status_filter(status)

    dashboard.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        dashboard.stop()
    return 0


def run_export(api: ParkingAPI, output: Optional[str]) -> int:
    dashboard = AdminDashboard(api)
    if not dashboard.load():
        print(dashboard.error)
        return 1

    path = Path(output or export_filename(date.today()))
    # BOM so spreadsheet apps pick up UTF-8
    path.write_text(dashboard.export_csv(), encoding="utf-8-sig")
    print(f"{len(dashboard.records)} baris diekspor ke {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="parking-client", description="Parking payment tracker client")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    intake = sub.add_parser("intake", help="Register a plate and confirm payment")
    intake.add_argument("plate", nargs="?")

    admin = sub.add_parser("admin", help="Live admin dashboard")
    admin.add_argument("--search", default="")
    admin.add_argument("--status", choices=[s.value for s in StatusFilter], default=StatusFilter.ALL.value)
    admin.add_argument(
        "--interval",
        type=float,
        default=float(os.getenv("PARKING_POLL_INTERVAL", DEFAULT_POLL_INTERVAL_SECONDS)),
    )

    export = sub.add_parser("export", help="Export all records to CSV")
    export.add_argument("--output", "-o")

    delete = sub.add_parser("delete", help="Delete one record")
    delete.add_argument("record_id")

    sub.add_parser("clear", help="Delete all records")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    api = build_api()

    if args.command == "intake":
        return run_intake(api, args.plate)
    if args.command == "admin":
        return run_admin(api, search=args.search, status=args.status, interval=args.interval)
    if args.command == "export":
        return run_export(api, args.output)

    try:
        if args.command == "delete":
            api.delete(args.record_id)
            print("Data dihapus.")
        elif args.command == "clear":
            print(f"{api.delete_all()} data dihapus.")
    except ApiError as e:
        print(f"Gagal: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
