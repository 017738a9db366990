from __future__ import annotations

import io
from pathlib import Path
from typing import Optional

import qrcode


def build_qr_png(payload: str) -> io.BytesIO:
    """Render ``payload`` as a PNG QR code into an in-memory buffer."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf


def resolve_static_image(path: Optional[str]) -> Optional[Path]:
    if not path:
        return None
    p = Path(path)
    return p if p.is_file() else None
