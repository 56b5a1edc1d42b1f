from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.exceptions import ValidationError
from .model import Roster


class RosterRepository(Protocol):
    def list_all(self) -> Sequence[Roster]:
        raise NotImplementedError

    def get_by_day_index(self, day_index: int) -> Optional[Roster]:
        raise NotImplementedError

    def get_by_title(self, title: str) -> Optional[Roster]:
        raise NotImplementedError


class StaticRosterRepository(RosterRepository):
    """Rosters fixed for the life of the process."""

    def __init__(self, rosters: Iterable[Roster]):
        self._rosters = tuple(rosters)

        by_day: dict[int, Roster] = {}
        by_title: dict[str, Roster] = {}
        for roster in self._rosters:
            if roster.day_index in by_day:
                raise ValidationError(f"Lebih dari satu jadwal untuk hari {roster.day_index}")
            if roster.title in by_title:
                raise ValidationError(f"Judul jadwal ganda: {roster.title}")
            by_day[roster.day_index] = roster
            by_title[roster.title] = roster

        self._by_day = by_day
        self._by_title = by_title

    def list_all(self) -> Sequence[Roster]:
        return self._rosters

    def get_by_day_index(self, day_index: int) -> Optional[Roster]:
        return self._by_day.get(int(day_index))

    def get_by_title(self, title: str) -> Optional[Roster]:
        return self._by_title.get(title)
