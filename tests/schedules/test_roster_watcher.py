from __future__ import annotations

from datetime import datetime, timedelta

from siskamling.attendance.repository import KeyValueSubmissionRepository
from siskamling.attendance.session import AttendanceSession
from siskamling.core.enums import AttendanceStatus
from siskamling.schedules.repository import StaticRosterRepository
from siskamling.schedules.roster_data import SISKAMLING_SCHEDULE
from siskamling.schedules.service import ScheduleService
from siskamling.schedules.watcher import RosterWatcher
from siskamling.storage.kv_store import InMemoryKeyValueStore


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def _setup(now: datetime):
    clock = FakeClock(now)
    session = AttendanceSession(KeyValueSubmissionRepository(InMemoryKeyValueStore()), clock=clock)
    watcher = RosterWatcher(
        ScheduleService(StaticRosterRepository(SISKAMLING_SCHEDULE)),
        session,
        clock=clock,
        interval_seconds=60,
    )
    return clock, session, watcher


def test_first_refresh_sets_roster():
    _, session, watcher = _setup(datetime(2025, 10, 21, 6, 0))

    assert watcher.refresh() is True
    assert session.roster.title == "SENIN MALAM SELASA"


def test_rollover_after_midnight_discards_draft():
    clock, session, watcher = _setup(datetime(2025, 10, 21, 23, 59, 30))
    watcher.refresh()
    member = session.roster.members[0]
    session.set_status(member, AttendanceStatus.SICK)

    clock.now = datetime(2025, 10, 22, 0, 0, 10)
    # Within the interval: no re-check yet.
    assert watcher.refresh() is False
    assert session.roster.title == "SENIN MALAM SELASA"

    clock.now = datetime(2025, 10, 22, 0, 0, 31)
    assert watcher.refresh() is True
    assert session.roster.title == "SELASA MALAM RABU"
    assert all(e.status is None for e in session.draft.values())


def test_same_day_recheck_keeps_draft():
    clock, session, watcher = _setup(datetime(2025, 10, 21, 7, 0))
    watcher.refresh()
    member = session.roster.members[0]
    session.set_status(member, AttendanceStatus.PRESENT)

    clock.now += timedelta(minutes=5)
    assert watcher.refresh() is False
    assert session.entry(member).status == AttendanceStatus.PRESENT
