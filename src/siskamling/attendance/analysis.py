from __future__ import annotations

from typing import Mapping

from ..core.enums import AttendanceStatus
from .model import Analysis, AttendanceEntry, MemberNote, Number


def build_analysis(attendance: Mapping[str, AttendanceEntry], prelek_result: Number) -> Analysis:
    """Aggregate one attendance round.

    Shared by the post-submit view and the recap so both always agree.
    """
    counts = {status: 0 for status in AttendanceStatus}
    notes: list[MemberNote] = []

    for member_name, entry in attendance.items():
        if entry.status is not None:
            counts[entry.status] += 1
        if entry.notes.strip():
            notes.append(MemberNote(member_name=member_name, note=entry.notes))

    return Analysis(status_counts=counts, prelek_result=prelek_result, notes=tuple(notes))
