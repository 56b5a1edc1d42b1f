"""JSON encoding of the submission log.

The layout matches the one written by the browser version of the form, so an
exported ``siskamlingSubmissions`` value can be loaded as-is::

    [{"id": 1760857200000, "submittedAt": "2025-10-19T07:00:00.000Z",
      "scheduleTitle": "...", "attendance": {"<name>": {"status": "Hadir", "notes": ""}},
      "prelekResult": 75000}]
"""

from __future__ import annotations

import json
import math
from typing import Any, Iterable, List, Optional

from ..common.datetime_utils import format_iso_timestamp, parse_iso_timestamp
from ..core.enums import AttendanceStatus
from ..core.exceptions import MalformedLogError
from .model import AttendanceEntry, SubmissionRecord


def record_to_dict(record: SubmissionRecord) -> dict:
    return {
        "id": record.id,
        "submittedAt": format_iso_timestamp(record.submitted_at),
        "scheduleTitle": record.schedule_title,
        "attendance": {name: entry.to_dict() for name, entry in record.attendance.items()},
        "prelekResult": record.prelek_result,
    }


def dumps_log(records: Iterable[SubmissionRecord]) -> str:
    return json.dumps([record_to_dict(r) for r in records], ensure_ascii=False)


def loads_log(raw: Optional[str]) -> List[SubmissionRecord]:
    """Decode the stored log. Absent/blank text is an empty log."""
    if raw is None or not raw.strip():
        return []

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise MalformedLogError(f"Log is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedLogError(f"Log must be a JSON array, got {type(data).__name__}")

    return [_record_from_dict(item, index) for index, item in enumerate(data)]


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integer too large for a float amount.
        return False


def _entry_from_dict(member: str, value: Any, index: int) -> AttendanceEntry:
    if not isinstance(value, dict):
        raise MalformedLogError(f"Record #{index}: entry for {member!r} is not an object")

    status_raw = value.get("status")
    notes = value.get("notes", "")
    if not isinstance(notes, str):
        raise MalformedLogError(f"Record #{index}: notes for {member!r} must be a string")

    if status_raw is None:
        return AttendanceEntry(status=None, notes=notes)
    try:
        status = AttendanceStatus(status_raw)
    except ValueError as e:
        raise MalformedLogError(f"Record #{index}: unknown status {status_raw!r}") from e
    return AttendanceEntry(status=status, notes=notes)


def _record_from_dict(item: Any, index: int) -> SubmissionRecord:
    if not isinstance(item, dict):
        raise MalformedLogError(f"Record #{index} is not an object")

    record_id = item.get("id")
    submitted_at = item.get("submittedAt")
    title = item.get("scheduleTitle")
    attendance = item.get("attendance")
    prelek = item.get("prelekResult")

    if not isinstance(record_id, int) or isinstance(record_id, bool):
        raise MalformedLogError(f"Record #{index}: id must be an integer")
    if not isinstance(submitted_at, str):
        raise MalformedLogError(f"Record #{index}: submittedAt must be a string")
    if not isinstance(title, str):
        raise MalformedLogError(f"Record #{index}: scheduleTitle must be a string")
    if not isinstance(attendance, dict):
        raise MalformedLogError(f"Record #{index}: attendance must be an object")
    if not _is_number(prelek) or prelek < 0:
        raise MalformedLogError(f"Record #{index}: prelekResult must be a non-negative number")

    try:
        submitted = parse_iso_timestamp(submitted_at)
    except ValueError as e:
        raise MalformedLogError(f"Record #{index}: bad submittedAt {submitted_at!r}") from e

    return SubmissionRecord(
        id=record_id,
        submitted_at=submitted,
        schedule_title=title,
        attendance={name: _entry_from_dict(name, value, index) for name, value in attendance.items()},
        prelek_result=prelek,
    )
