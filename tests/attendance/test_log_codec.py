from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from siskamling.attendance.codec import dumps_log, loads_log
from siskamling.attendance.model import AttendanceEntry, SubmissionRecord
from siskamling.core.enums import AttendanceStatus
from siskamling.core.exceptions import MalformedLogError


def _record(record_id: int, title: str = "RABU MALAM KAMIS", prelek=0) -> SubmissionRecord:
    return SubmissionRecord(
        id=record_id,
        submitted_at=datetime(2025, 10, 23, 0, 15, 30, 123000, tzinfo=timezone.utc),
        schedule_title=title,
        attendance={
            "Bp Lili": AttendanceEntry(status=AttendanceStatus.PRESENT),
            "Bp Kosim": AttendanceEntry(status=AttendanceStatus.ABSENT, notes="tanpa kabar"),
        },
        prelek_result=prelek,
    )


def test_round_trip_keeps_records_and_order():
    records = [_record(1761178530123, prelek=50000), _record(1761178530124, "KAMIS MALAM JUMAT", 2500.5)]

    assert loads_log(dumps_log(records)) == records


def test_wire_format_uses_browser_field_names():
    data = json.loads(dumps_log([_record(1, prelek=75000)]))

    assert data == [
        {
            "id": 1,
            "submittedAt": "2025-10-23T00:15:30.123Z",
            "scheduleTitle": "RABU MALAM KAMIS",
            "attendance": {
                "Bp Lili": {"status": "Hadir", "notes": ""},
                "Bp Kosim": {"status": "Alpa", "notes": "tanpa kabar"},
            },
            "prelekResult": 75000,
        }
    ]


def test_reads_log_written_by_browser_version():
    raw = (
        '[{"id":1760857200000,"submittedAt":"2025-10-19T07:00:00.000Z",'
        '"scheduleTitle":"SABTU MALAM MINGGU",'
        '"attendance":{"Bp Ayo":{"status":"Sakit","notes":"demam"},"Bp Ajo":{"status":null,"notes":""}},'
        '"prelekResult":0}]'
    )

    [record] = loads_log(raw)

    assert record.submitted_at == datetime(2025, 10, 19, 7, 0, tzinfo=timezone.utc)
    assert record.attendance["Bp Ayo"] == AttendanceEntry(status=AttendanceStatus.SICK, notes="demam")
    assert record.attendance["Bp Ajo"].status is None


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_absent_value_is_empty_log(raw):
    assert loads_log(raw) == []


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '{"id": 1}',
        '[{"id": "1", "submittedAt": "2025-10-19T07:00:00Z", "scheduleTitle": "X", "attendance": {}, "prelekResult": 0}]',
        '[{"id": 1, "submittedAt": "2025-10-19T07:00:00Z", "scheduleTitle": "X", "attendance": {}, "prelekResult": -5}]',
        '[{"id": 1, "submittedAt": "2025-10-19T07:00:00Z", "scheduleTitle": "X",'
        ' "attendance": {"A": {"status": "Telat", "notes": ""}}, "prelekResult": 0}]',
        '[{"id": 1, "submittedAt": "kemarin", "scheduleTitle": "X", "attendance": {}, "prelekResult": 0}]',
        '[{"id": 1, "submittedAt": "2025-10-19T07:00:00Z", "scheduleTitle": "X", "attendance": {}, "prelekResult": 1'
        + "0" * 400
        + "}]",
        "[" * 100000 + "]" * 100000,
    ],
)
def test_malformed_log_raises(raw):
    with pytest.raises(MalformedLogError):
        loads_log(raw)
