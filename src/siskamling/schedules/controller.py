from __future__ import annotations

from flask import Flask, jsonify

from ..common.formatting import format_long_date
from ..core.constants import NO_SCHEDULE_MESSAGE, NO_SCHEDULE_TITLE
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["GET"], endpoint="schedules_list")
    def schedules_list():
        return jsonify([r.to_dict() for r in container.schedule_service.list_rosters()])

    @app.route("/api/schedules/today", methods=["GET"], endpoint="schedules_today")
    def schedules_today():
        today = container.roster_watcher.today.date()
        roster = container.attendance_session.roster
        if roster is None:
            return jsonify(
                {
                    "date": today.isoformat(),
                    "date_label": format_long_date(today),
                    "roster": None,
                    "title": NO_SCHEDULE_TITLE,
                    "message": NO_SCHEDULE_MESSAGE,
                }
            )

        return jsonify({"date": today.isoformat(), "date_label": format_long_date(today), "roster": roster.to_dict()})
