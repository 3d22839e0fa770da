from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.constants import SERVER_ERROR_MESSAGE
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<nip>", methods=["GET"], endpoint="api_employee_lookup")
    def api_employee_lookup(nip: str):
        try:
            employee = container.employee_service.lookup(nip)
            return jsonify(employee.to_dict()), 200
        except (NotFoundError, ValidationError) as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Error executing employee query")
            return jsonify({"message": SERVER_ERROR_MESSAGE}), 500
