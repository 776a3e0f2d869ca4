from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date, today_local
from ..core.exceptions import StoreError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def coach_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "staff_id" not in session:
                return jsonify({"error": "Authentication required"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/coach/teams", methods=["GET"], endpoint="coach_teams")
    @coach_required
    def coach_teams():
        try:
            teams = container.team_service.my_teams(str(session["staff_id"]))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError as e:
            logger.error("Loading teams failed: %s", e)
            return jsonify({"error": "Store unavailable"}), 503
        return jsonify({"teams": [t.to_dict() for t in teams]})

    @app.route("/api/coach/occurrences", methods=["GET"], endpoint="coach_occurrences")
    @coach_required
    def coach_occurrences():
        today_s = request.args.get("today")
        try:
            today = parse_iso_date(today_s) if today_s else today_local()
        except ValueError:
            return jsonify({"error": "today must be YYYY-MM-DD"}), 400

        try:
            occurrences = container.occurrence_service.upcoming_for_coach(str(session["staff_id"]), today=today)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError as e:
            logger.error("Loading occurrences failed: %s", e)
            return jsonify({"error": "Store unavailable"}), 503

        return jsonify({"today": today.isoformat(), "occurrences": [o.to_dict() for o in occurrences]})
