from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import day_of_week
from .model import Roster
from .repository import RosterRepository


def previous_day_index(current_day_of_week: int) -> int:
    """Index of the day before, wrapping Sunday (0) back to Saturday (6)."""
    return (int(current_day_of_week) + 6) % 7


class ScheduleService:
    """Use case: which roster does today's attendance form belong to?

    A roster for weekday D covers the night of D into D+1 and is filled in the
    morning after, so the form shown on day X is the roster of day X-1.
    """

    def __init__(self, rosters: RosterRepository):
        self._rosters = rosters

    def resolve_for(self, today: date) -> Optional[Roster]:
        return self._rosters.get_by_day_index(previous_day_index(day_of_week(today)))

    def list_rosters(self) -> Sequence[Roster]:
        return self._rosters.list_all()

    def get_by_title(self, title: str) -> Optional[Roster]:
        return self._rosters.get_by_title(title)
