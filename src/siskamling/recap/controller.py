from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..core.constants import RECAP_FILTER_ALL
from ..core.enums import AttendanceStatus
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/recap", methods=["GET"], endpoint="recap_list")
    def recap_list():
        schedule = request.args.get("schedule") or RECAP_FILTER_ALL
        items = container.recap_service.list_ui(schedule)
        return jsonify(
            {
                "filter": schedule,
                "filter_options": container.recap_service.filter_options(),
                "count": len(items),
                "submissions": items,
            }
        )

    @app.route("/api/recap/export.csv", methods=["GET"], endpoint="recap_export")
    def recap_export():
        schedule = request.args.get("schedule") or RECAP_FILTER_ALL
        items = container.recap_service.list_ui(schedule)

        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(
            ["id", "submitted_at", "schedule_title"]
            + [s.value for s in AttendanceStatus]
            + ["prelek_result", "notes"]
        )
        for item in items:
            notes = "; ".join(f"{n['member_name']}: {n['note']}" for n in item["notes"])
            writer.writerow(
                [item["id"], item["submitted_at"], item["schedule_title"]]
                + [item["status_counts"][s.value] for s in AttendanceStatus]
                + [item["prelek_result"], notes]
            )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=rekap_siskamling.csv"},
        )
