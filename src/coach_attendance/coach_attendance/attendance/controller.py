from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..container import Container
from .model import count_attendance

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def coach_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "staff_id" not in session:
                return jsonify({"error": "Authentication required"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route(
        "/api/occurrences/<occurrence_id>/attendance",
        methods=["GET"],
        endpoint="occurrence_attendance",
    )
    @coach_required
    def occurrence_attendance(occurrence_id: str):
        try:
            rows = container.attendance_ledger.roster_for_occurrence(occurrence_id)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except StoreError as e:
            logger.error("Loading attendance for %s failed: %s", occurrence_id, e)
            return jsonify({"error": "Store unavailable"}), 503

        return jsonify(
            {
                "occurrence_id": occurrence_id,
                "students": [r.to_dict() for r in rows],
                "counts": count_attendance(rows).to_dict(),
            }
        )

    @app.route(
        "/api/occurrences/<occurrence_id>/attendance/<student_id>",
        methods=["PUT"],
        endpoint="set_attendance",
    )
    @coach_required
    def set_attendance(occurrence_id: str, student_id: str):
        payload = request.get_json(silent=True)
        assisted = payload.get("assisted") if isinstance(payload, dict) else None
        if not isinstance(assisted, bool):
            return jsonify({"error": "assisted must be true or false"}), 400

        try:
            mark = container.attendance_ledger.set_mark(occurrence_id, student_id, assisted)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError as e:
            logger.error("Saving attendance for %s/%s failed: %s", occurrence_id, student_id, e)
            return jsonify({"error": "Store unavailable"}), 503

        return jsonify({"assistance": mark.to_dict()})
