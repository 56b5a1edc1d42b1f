from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.repository import KeyValueSubmissionRepository
from .attendance.session import AttendanceSession
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_ROSTER_CHECK_INTERVAL_SECONDS, DEFAULT_STORAGE_KEY
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .recap.service import RecapService
from .schedules.repository import StaticRosterRepository
from .schedules.roster_data import SISKAMLING_SCHEDULE
from .schedules.service import ScheduleService
from .schedules.watcher import RosterWatcher
from .storage.kv_store import InMemoryKeyValueStore, KeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    rosters_repo: StaticRosterRepository
    submissions_repo: KeyValueSubmissionRepository

    schedule_service: ScheduleService
    attendance_session: AttendanceSession
    roster_watcher: RosterWatcher
    recap_service: RecapService


def build_store(settings) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        config = DBConfig.from_dict(getattr(settings, "DB_CONFIG"))
        return MySQLKeyValueStore(DatabaseConnection.get_instance(config))
    raise ValidationError(f"STORAGE_BACKEND tidak dikenal: {backend}")


def build_container(
    settings,
    *,
    store: Optional[KeyValueStore] = None,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    store = store or build_store(settings)

    rosters_repo = StaticRosterRepository(SISKAMLING_SCHEDULE)
    submissions_repo = KeyValueSubmissionRepository(
        store, key=getattr(settings, "STORAGE_KEY", DEFAULT_STORAGE_KEY)
    )

    schedule_service = ScheduleService(rosters_repo)
    attendance_session = AttendanceSession(submissions_repo, clock=clock)
    roster_watcher = RosterWatcher(
        schedule_service,
        attendance_session,
        clock=clock,
        interval_seconds=int(
            getattr(settings, "ROSTER_CHECK_INTERVAL_SECONDS", DEFAULT_ROSTER_CHECK_INTERVAL_SECONDS)
        ),
    )
    roster_watcher.refresh(force=True)
    recap_service = RecapService(submissions_repo, schedule_service)

    return Container(
        store=store,
        rosters_repo=rosters_repo,
        submissions_repo=submissions_repo,
        schedule_service=schedule_service,
        attendance_session=attendance_session,
        roster_watcher=roster_watcher,
        recap_service=recap_service,
    )
