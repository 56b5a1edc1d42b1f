from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..attendance.analysis import build_analysis
from ..attendance.model import Analysis, SubmissionRecord
from ..attendance.repository import SubmissionLogRepository
from ..common.datetime_utils import format_iso_timestamp
from ..common.formatting import format_rupiah
from ..core.constants import RECAP_FILTER_ALL
from ..core.exceptions import StorageError
from ..schedules.service import ScheduleService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecapItem:
    record: SubmissionRecord
    analysis: Analysis


class RecapService:
    """Read-only view over all past submissions."""

    def __init__(self, log: SubmissionLogRepository, schedules: ScheduleService):
        self._log = log
        self._schedules = schedules

    def list_submissions(self, schedule_title: Optional[str] = RECAP_FILTER_ALL) -> List[RecapItem]:
        records = self._load()
        if schedule_title and schedule_title != RECAP_FILTER_ALL:
            records = [r for r in records if r.schedule_title == schedule_title]

        records.sort(key=lambda r: r.id, reverse=True)
        return [RecapItem(record=r, analysis=build_analysis(r.attendance, r.prelek_result)) for r in records]

    def filter_options(self) -> List[str]:
        return [RECAP_FILTER_ALL] + [r.title for r in self._schedules.list_rosters()]

    def list_ui(self, schedule_title: Optional[str] = RECAP_FILTER_ALL) -> List[dict]:
        return [self._to_ui(item) for item in self.list_submissions(schedule_title)]

    def _load(self) -> List[SubmissionRecord]:
        try:
            records: Sequence[SubmissionRecord] = self._log.load_all()
        except StorageError:
            logger.exception("Failed to load submissions, showing an empty recap")
            return []
        return list(records)

    def _to_ui(self, item: RecapItem) -> dict:
        r = item.record
        data = item.analysis.to_dict()
        return {
            "id": r.id,
            "submitted_at": format_iso_timestamp(r.submitted_at),
            "schedule_title": r.schedule_title,
            "status_counts": data["status_counts"],
            "prelek_result": r.prelek_result,
            "prelek_display": format_rupiah(r.prelek_result),
            "notes": data["notes"],
        }
