from __future__ import annotations

from flask import Flask, jsonify, send_file

from .qr import build_qr_png, resolve_static_image


def register(app: Flask) -> None:
    @app.route("/payment/qris.png", methods=["GET"], endpoint="payment_qris_image")
    def payment_qris_image():
        """QRIS image shown on the intake payment view.

        A configured image file wins; otherwise the QR is generated from QRIS_PAYLOAD.
        """
        try:
            static_image = resolve_static_image(app.config.get("QRIS_IMAGE_PATH"))
            if static_image is not None:
                return send_file(static_image)

            buf = build_qr_png(app.config.get("QRIS_PAYLOAD") or "PARKING_PAYMENT")
            return send_file(buf, mimetype="image/png")
        except Exception as e:
            app.logger.exception("Failed to render QRIS image")
            return jsonify({"error": "Failed to render QRIS image", "details": str(e)}), 500
