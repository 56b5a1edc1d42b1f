"""Indonesian display helpers for the HTTP layer (id-ID locale conventions)."""

from __future__ import annotations

from datetime import date

_DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")
_MONTH_NAMES = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


def format_rupiah(amount: float) -> str:
    """75000 -> "Rp 75.000" (whole rupiah, dot as thousands separator)."""
    rounded = int(round(amount))
    sign = "-" if rounded < 0 else ""
    grouped = f"{abs(rounded):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"


def format_long_date(value: date) -> str:
    """date(2025, 10, 19) -> "Minggu, 19 Oktober 2025"."""
    return f"{_DAY_NAMES[value.weekday()]}, {value.day} {_MONTH_NAMES[value.month - 1]} {value.year}"
