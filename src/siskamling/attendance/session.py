from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

from ..common.datetime_utils import now_local, to_epoch_millis, to_utc_millis
from ..common.validators import parse_prelek_amount
from ..core.enums import AttendanceStatus, SessionState
from ..core.exceptions import StorageError, ValidationError
from ..schedules.model import Roster
from .analysis import build_analysis
from .model import Analysis, AttendanceEntry, SubmissionRecord
from .repository import SubmissionLogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of ``AttendanceSession.submit``.

    ``accepted`` is False when some members still have no status; nothing is
    stored in that case and ``missing_members`` lists who is left.
    """

    accepted: bool
    missing_members: Tuple[str, ...] = ()
    analysis: Optional[Analysis] = None
    record: Optional[SubmissionRecord] = None
    persisted: bool = False


def fresh_draft(roster: Optional[Roster]) -> Dict[str, AttendanceEntry]:
    if roster is None:
        return {}
    return {member: AttendanceEntry() for member in roster.members}


class AttendanceSession:
    """Form absensi untuk jadwal aktif: draft -> kirim -> reset."""

    def __init__(
        self,
        log: SubmissionLogRepository,
        roster: Optional[Roster] = None,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._log = log
        self._clock = clock
        self._roster = roster
        self._last_id = 0
        self._start_drafting()

    def _start_drafting(self) -> None:
        self._state = SessionState.DRAFTING
        self._draft = fresh_draft(self._roster)
        self._prelek_input = ""
        self._analysis: Optional[Analysis] = None
        self._last_record: Optional[SubmissionRecord] = None

    @property
    def roster(self) -> Optional[Roster]:
        return self._roster

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def analysis(self) -> Optional[Analysis]:
        return self._analysis

    @property
    def last_record(self) -> Optional[SubmissionRecord]:
        return self._last_record

    @property
    def prelek_input(self) -> str:
        return self._prelek_input

    @property
    def draft(self) -> Dict[str, AttendanceEntry]:
        return dict(self._draft)

    def entry(self, member: str) -> AttendanceEntry:
        self._require_member(member)
        return self._draft[member]

    def missing_members(self) -> Tuple[str, ...]:
        return tuple(name for name, entry in self._draft.items() if entry.status is None)

    @property
    def is_complete(self) -> bool:
        return self._roster is not None and not self.missing_members()

    def change_roster(self, roster: Optional[Roster]) -> bool:
        """Switch to another roster, dropping any unsaved draft.

        Returns True when the roster actually changed.
        """
        if _same_roster(self._roster, roster):
            return False

        logger.info(
            "Active roster changed: %s -> %s",
            self._roster.title if self._roster else None,
            roster.title if roster else None,
        )
        self._roster = roster
        self._start_drafting()
        return True

    def set_status(self, member: str, status: AttendanceStatus) -> AttendanceEntry:
        self._require_drafting()
        self._require_member(member)
        entry = self._draft[member].with_status(AttendanceStatus(status))
        self._draft[member] = entry
        return entry

    def set_notes(self, member: str, notes: str) -> AttendanceEntry:
        self._require_drafting()
        self._require_member(member)
        entry = self._draft[member].with_notes(notes or "")
        self._draft[member] = entry
        return entry

    def set_prelek_input(self, text: str) -> None:
        self._require_drafting()
        self._prelek_input = "" if text is None else str(text)

    def submit(self, *, now: Optional[datetime] = None) -> SubmissionResult:
        self._require_drafting()
        if self._roster is None:
            raise ValidationError("Tidak ada jadwal siskamling untuk hari ini")

        missing = self.missing_members()
        if missing:
            return SubmissionResult(accepted=False, missing_members=missing)

        now = now or self._clock()
        prelek = parse_prelek_amount(self._prelek_input)
        snapshot = dict(self._draft)
        analysis = build_analysis(snapshot, prelek)

        record = SubmissionRecord(
            id=self._next_id(now),
            submitted_at=to_utc_millis(now),
            schedule_title=self._roster.title,
            attendance=snapshot,
            prelek_result=prelek,
        )

        persisted = True
        try:
            self._log.append(record)
            logger.info("Submission %s stored for %s", record.id, record.schedule_title)
        except StorageError:
            persisted = False
            logger.exception("Failed to store submission %s for %s", record.id, record.schedule_title)

        self._state = SessionState.SUBMITTED
        self._analysis = analysis
        self._last_record = record
        return SubmissionResult(accepted=True, analysis=analysis, record=record, persisted=persisted)

    def reset(self) -> None:
        self._start_drafting()

    def snapshot(self) -> dict:
        return {
            "state": self._state.value,
            "schedule_title": self._roster.title if self._roster else None,
            "attendance": [
                {"member_name": name, **entry.to_dict()} for name, entry in self._draft.items()
            ],
            "prelek_input": self._prelek_input,
            "is_complete": self.is_complete,
            "missing_members": list(self.missing_members()),
            "analysis": self._analysis.to_dict() if self._analysis else None,
            "submission_id": self._last_record.id if self._last_record else None,
        }

    def _next_id(self, now: datetime) -> int:
        # Millisecond timestamp, bumped so ids stay strictly increasing.
        candidate = max(to_epoch_millis(now), self._last_id + 1)
        self._last_id = candidate
        return candidate

    def _require_drafting(self) -> None:
        if self._state != SessionState.DRAFTING:
            raise ValidationError("Absensi sudah dikirim. Isi absensi baru terlebih dahulu.")

    def _require_member(self, member: str) -> None:
        if member not in self._draft:
            raise ValidationError(f"Petugas {member!r} tidak ada di jadwal ini")


def _same_roster(a: Optional[Roster], b: Optional[Roster]) -> bool:
    if a is None or b is None:
        return a is b
    return a.day_index == b.day_index and a.title == b.title
