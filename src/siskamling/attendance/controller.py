from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import AttendanceStatus
from ..container import Container


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_session

    def _payload() -> dict:
        return request.get_json(silent=True) or {}

    def _error(message: str, status: int = 400, **extra):
        return jsonify({"success": False, "message": message, **extra}), status

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_form")
    def attendance_form():
        return jsonify(attendance.snapshot())

    @app.route("/api/attendance/status", methods=["POST"], endpoint="attendance_status")
    def attendance_status():
        data = _payload()
        member = str(data.get("member") or "")
        try:
            status = AttendanceStatus.parse(str(data.get("status") or ""))
        except ValueError:
            return _error("Status kehadiran tidak dikenal")

        entry = attendance.set_status(member, status)
        return jsonify({"success": True, "member": member, **entry.to_dict(), "is_complete": attendance.is_complete})

    @app.route("/api/attendance/notes", methods=["POST"], endpoint="attendance_notes")
    def attendance_notes():
        data = _payload()
        member = str(data.get("member") or "")
        if attendance.entry(member).status == AttendanceStatus.PRESENT:
            return _error("Keterangan tidak diisi untuk petugas yang hadir")

        entry = attendance.set_notes(member, str(data.get("notes") or ""))
        return jsonify({"success": True, "member": member, **entry.to_dict()})

    @app.route("/api/attendance/prelek", methods=["POST"], endpoint="attendance_prelek")
    def attendance_prelek():
        amount = _payload().get("amount")
        attendance.set_prelek_input("" if amount is None else str(amount))
        return jsonify({"success": True, "prelek_input": attendance.prelek_input})

    @app.route("/api/attendance/submit", methods=["POST"], endpoint="attendance_submit")
    def attendance_submit():
        result = attendance.submit()
        if not result.accepted:
            return _error(
                "Lengkapi status kehadiran semua petugas sebelum mengirim",
                422,
                missing_members=list(result.missing_members),
            )

        return jsonify(
            {
                "success": True,
                "persisted": result.persisted,
                "submission_id": result.record.id,
                "analysis": result.analysis.to_dict(),
            }
        )

    @app.route("/api/attendance/reset", methods=["POST"], endpoint="attendance_reset")
    def attendance_reset():
        attendance.reset()
        return jsonify({"success": True, **attendance.snapshot()})
