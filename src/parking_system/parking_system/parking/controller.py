from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _server_error(message: str, e: Exception):
        app.logger.exception(message)
        return jsonify({"error": message, "details": str(e)}), 500

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/parking", methods=["GET"], endpoint="list_parking")
    def list_parking():
        try:
            records = container.parking_service.list_records()
            return jsonify({"data": [r.to_dict() for r in records]})
        except Exception as e:
            return _server_error("Failed to fetch parking data", e)

    @app.route("/parking", methods=["POST"], endpoint="create_parking")
    def create_parking():
        try:
            record = container.parking_service.create(_json_body().get("plateNumber"))
            return jsonify({"data": record.to_dict()})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            return _server_error("Failed to create parking entry", e)

    @app.route("/parking/<record_id>", methods=["PUT"], endpoint="update_parking_status")
    def update_parking_status(record_id: str):
        try:
            record = container.parking_service.update_status(record_id, _json_body().get("status"))
            return jsonify({"data": record.to_dict()})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception as e:
            return _server_error("Failed to update parking entry", e)

    @app.route("/parking/<record_id>", methods=["DELETE"], endpoint="delete_parking")
    def delete_parking(record_id: str):
        try:
            container.parking_service.delete(record_id)
            return jsonify({"success": True})
        except Exception as e:
            return _server_error("Failed to delete parking entry", e)

    @app.route("/parking", methods=["DELETE"], endpoint="delete_all_parking")
    def delete_all_parking():
        try:
            deleted = container.parking_service.delete_all()
            return jsonify({"success": True, "deleted": deleted})
        except Exception as e:
            return _server_error("Failed to delete all parking entries", e)
