from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Roster:
    """Jadwal ronda satu malam: petugas untuk hari ``day_index`` (0 = Minggu)."""

    day_index: int
    title: str
    members: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not 0 <= int(self.day_index) <= 6:
            raise ValidationError(f"day_index harus 0-6, bukan {self.day_index}")
        if not self.title or not self.title.strip():
            raise ValidationError("Judul jadwal tidak boleh kosong")
        members = tuple(self.members)
        if len(set(members)) != len(members):
            raise ValidationError(f"Anggota ganda pada jadwal {self.title}")
        object.__setattr__(self, "members", members)

    def to_dict(self) -> dict:
        return {"day_index": self.day_index, "title": self.title, "members": list(self.members)}
