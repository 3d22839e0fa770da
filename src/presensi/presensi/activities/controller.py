from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..core.constants import SERVER_ERROR_MESSAGE
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _server_error(context: str):
        logger.exception("Error on %s", context)
        return jsonify({"message": SERVER_ERROR_MESSAGE}), 500

    @app.route("/api/activities", methods=["GET"], endpoint="api_activities")
    def api_activities():
        try:
            return jsonify([a.to_dict() for a in container.activity_service.list_all()]), 200
        except Exception:
            return _server_error("GET /api/activities")

    @app.route("/api/activities/active", methods=["GET"], endpoint="api_activities_active")
    def api_activities_active():
        try:
            return jsonify([a.to_dict() for a in container.activity_service.list_active()]), 200
        except Exception:
            return _server_error("GET /api/activities/active")

    @app.route("/api/activities", methods=["POST"], endpoint="api_activity_create")
    def api_activity_create():
        data = request.get_json(silent=True) or {}
        try:
            activity = container.activity_service.create(
                name=data.get("nama_kegiatan"),
                mode=data.get("tipe_kegiatan"),
                status=data.get("status"),
            )
            return jsonify(activity.to_dict()), 201
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            return _server_error("POST /api/activities")

    @app.route("/api/activities/<int:activity_id>", methods=["PUT"], endpoint="api_activity_update")
    def api_activity_update(activity_id: int):
        data = request.get_json(silent=True) or {}
        try:
            activity = container.activity_service.update(
                activity_id,
                name=data.get("nama_kegiatan"),
                mode=data.get("tipe_kegiatan"),
                status=data.get("status"),
            )
            return jsonify(activity.to_dict()), 200
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            return _server_error("PUT /api/activities")

    @app.route("/api/activities/<int:activity_id>", methods=["DELETE"], endpoint="api_activity_delete")
    def api_activity_delete(activity_id: int):
        try:
            container.activity_service.delete(activity_id)
            return jsonify({"message": "Kegiatan berhasil dihapus."}), 200
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            return _server_error("DELETE /api/activities")

    @app.route("/api/activities/<int:activity_id>/qr.png", methods=["GET"], endpoint="api_activity_qr")
    def api_activity_qr(activity_id: int):
        """QR code yang membuka form presensi dengan kegiatan ini terkunci."""
        try:
            png = container.activity_service.qr_png(activity_id)
            return send_file(io.BytesIO(png), mimetype="image/png")
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            return _server_error("GET /api/activities/qr")
