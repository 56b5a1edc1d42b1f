from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional, Protocol

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_ROSTER_CHECK_INTERVAL_SECONDS
from .model import Roster
from .service import ScheduleService


class RosterTarget(Protocol):
    def change_roster(self, roster: Optional[Roster]) -> bool:
        raise NotImplementedError


class RosterWatcher:
    """Re-checks today's date at most once per interval and swaps the roster.

    Keeps a form left open past midnight on the right roster.
    """

    def __init__(
        self,
        schedules: ScheduleService,
        target: RosterTarget,
        *,
        clock: Callable[[], datetime] = now_local,
        interval_seconds: int = DEFAULT_ROSTER_CHECK_INTERVAL_SECONDS,
    ):
        self._schedules = schedules
        self._target = target
        self._clock = clock
        self._interval = timedelta(seconds=int(interval_seconds))
        self._last_check: Optional[datetime] = None
        self._today: Optional[datetime] = None

    @property
    def today(self) -> datetime:
        return self._today or self._clock()

    def refresh(self, *, force: bool = False) -> bool:
        """Returns True when the roster was swapped."""
        now = self._clock()
        if not force and self._last_check is not None and timedelta(0) <= now - self._last_check < self._interval:
            return False

        self._last_check = now
        self._today = now
        return self._target.change_roster(self._schedules.resolve_for(now.date()))
