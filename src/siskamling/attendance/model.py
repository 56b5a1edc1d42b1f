from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Mapping, Optional, Tuple, Union

from ..core.enums import AttendanceStatus

Number = Union[int, float]


@dataclass(frozen=True)
class AttendanceEntry:
    """Isian satu petugas: status (boleh kosong) dan keterangan."""

    status: Optional[AttendanceStatus] = None
    notes: str = ""

    def with_status(self, status: AttendanceStatus) -> "AttendanceEntry":
        # Hadir never carries a note.
        notes = "" if status == AttendanceStatus.PRESENT else self.notes
        return replace(self, status=status, notes=notes)

    def with_notes(self, notes: str) -> "AttendanceEntry":
        return replace(self, notes=notes)

    def to_dict(self) -> dict:
        return {"status": self.status.value if self.status else None, "notes": self.notes}


@dataclass(frozen=True)
class SubmissionRecord:
    """Entitas tersimpan: satu kali pengiriman absensi. Tidak pernah diubah."""

    id: int
    submitted_at: datetime
    schedule_title: str
    attendance: Mapping[str, AttendanceEntry]
    prelek_result: Number


@dataclass(frozen=True)
class MemberNote:
    member_name: str
    note: str


@dataclass(frozen=True)
class Analysis:
    """Read-model shown after submit and in the recap."""

    status_counts: Dict[AttendanceStatus, int]
    prelek_result: Number
    notes: Tuple[MemberNote, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "status_counts": {status.value: count for status, count in self.status_counts.items()},
            "prelek_result": self.prelek_result,
            "notes": [{"member_name": n.member_name, "note": n.note} for n in self.notes],
        }
