from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status kehadiran ronda. Value is both the display label and the stored value."""

    PRESENT = "Hadir"
    EXCUSED = "Izin"
    SICK = "Sakit"
    ABSENT = "Alpa"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        """Accept either the label ("Hadir") or the member name ("PRESENT")."""
        text = (value or "").strip()
        for status in cls:
            if text == status.value or text.upper() == status.name:
                return status
        raise ValueError(f"Unknown attendance status: {value!r}")


class SessionState(str, Enum):
    """Lifecycle of the attendance form for the active roster."""

    DRAFTING = "DRAFTING"
    SUBMITTED = "SUBMITTED"
