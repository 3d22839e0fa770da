from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.constants import SERVER_ERROR_MESSAGE
from ..core.enums import UserType
from ..core.exceptions import ValidationError
from ..container import Container
from .model import NewAttendanceRecord
from .service import RecordFilter

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _record_filter() -> RecordFilter:
        user_type_s = request.args.get("user_type")
        date_s = request.args.get("date")
        try:
            user_type = UserType(user_type_s) if user_type_s and user_type_s != "all" else None
            on_date = parse_iso_date(date_s) if date_s else None
        except ValueError:
            raise ValidationError("Parameter filter tidak valid")

        activity = request.args.get("activity")
        return RecordFilter(
            search=request.args.get("q") or None,
            activity_name=activity if activity and activity != "all" else None,
            user_type=user_type,
            on_date=on_date,
        )

    @app.route("/api/records", methods=["GET"], endpoint="api_records")
    def api_records():
        try:
            records = container.attendance_service.list_records(_record_filter())
            return jsonify([r.to_dict() for r in records]), 200
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("Error executing query")
            return jsonify({"message": SERVER_ERROR_MESSAGE}), 500

    @app.route("/api/records", methods=["POST"], endpoint="api_record_create")
    def api_record_create():
        data = request.get_json(silent=True) or {}
        logger.info("Menerima POST /api/records (tipe_user=%s)", data.get("tipe_user"))
        try:
            try:
                command = NewAttendanceRecord.from_dict(data)
            except ValueError:
                raise ValidationError("Tipe user atau kegiatan tidak valid")

            record = container.attendance_service.create_record(command)
            return jsonify(record.to_dict()), 201
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except Exception:
            logger.exception("Error executing insert/update query")
            return jsonify({"message": SERVER_ERROR_MESSAGE}), 500

    @app.route("/api/records/stats", methods=["GET"], endpoint="api_record_stats")
    def api_record_stats():
        try:
            return jsonify(container.attendance_service.stats().to_dict()), 200
        except Exception:
            logger.exception("Error computing stats")
            return jsonify({"message": SERVER_ERROR_MESSAGE}), 500

    @app.route("/api/records.csv", methods=["GET"], endpoint="api_records_csv")
    def api_records_csv():
        try:
            records = container.attendance_service.list_records(_record_filter())
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        filename = f"presensi-{now_local().strftime('%Y-%m-%d')}.csv"
        return app.response_class(
            container.attendance_service.export_csv(records),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
