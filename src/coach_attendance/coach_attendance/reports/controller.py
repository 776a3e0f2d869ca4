from __future__ import annotations

import logging
from datetime import timedelta
from functools import wraps

from flask import Flask, Response, jsonify, request, session

from ..common.datetime_utils import parse_iso_date, today_local
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import Role
from ..core.exceptions import StoreError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "staff_id" not in session:
                return jsonify({"error": "Authentication required"}), 401
            if session.get("role") != Role.ADMIN.value:
                return jsonify({"error": "Admin role required"}), 403
            return view(*args, **kwargs)

        return wrapper

    def _range_args():
        today = today_local()
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        start = parse_iso_date(start_s) if start_s else today - timedelta(days=DEFAULT_REPORT_DAYS)
        end = parse_iso_date(end_s) if end_s else today
        return start, end, request.args.get("team_id") or None

    @app.route("/api/admin/attendance/stats", methods=["GET"], endpoint="admin_attendance_stats")
    @admin_required
    def admin_attendance_stats():
        try:
            start, end, team_id = _range_args()
            stats = container.report_service.build_stats(start=start, end=end, team_id=team_id)
        except ValueError:
            return jsonify({"error": "Dates must be YYYY-MM-DD"}), 400
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError as e:
            logger.error("Attendance stats failed: %s", e)
            return jsonify({"error": "Store unavailable"}), 503

        return jsonify(stats.to_dict())

    @app.route("/api/admin/attendance/export.csv", methods=["GET"], endpoint="admin_attendance_export")
    @admin_required
    def admin_attendance_export():
        try:
            start, end, team_id = _range_args()
            text = container.report_service.export_csv(start=start, end=end, team_id=team_id)
        except ValueError:
            return jsonify({"error": "Dates must be YYYY-MM-DD"}), 400
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StoreError as e:
            logger.error("Attendance export failed: %s", e)
            return jsonify({"error": "Store unavailable"}), 503

        filename = f"attendance_{start:%Y%m%d}_{end:%Y%m%d}.csv"
        return Response(
            text,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
