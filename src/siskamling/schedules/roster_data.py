"""Jadwal siskamling Blok H Tanjung Residence.

Each roster covers the night of ``day_index`` into the following day.
"""

from .model import Roster

SISKAMLING_SCHEDULE = (
    Roster(
        day_index=1,
        title="SENIN MALAM SELASA",
        members=("Bp Aris H01", "Bp Asep H03", "Bp Iyeng H04", "Bp Yayan", "Bp Erik"),
    ),
    Roster(
        day_index=2,
        title="SELASA MALAM RABU",
        members=("Bp Ma'ruf", "Bp Sunara", "Bp Eka"),
    ),
    Roster(
        day_index=3,
        title="RABU MALAM KAMIS",
        members=("Bp Ujang Nur", "Bp Lili", "Bp Kosim", "Bp Asep Sarboah"),
    ),
    Roster(
        day_index=4,
        title="KAMIS MALAM JUMAT",
        members=("Bp Didin", "Bp Hamzah", "Bp Amrin", "Bp Aden", "Bp Nanda"),
    ),
    Roster(
        day_index=5,
        title="JUM'AT MALAM SABTU",
        members=(
            "Bp Ujang Guru",
            "Bp Wawan",
            "Bp Riyan",
            "Bp Asep H62",
            "Bp Irwan",
            "Bp Carkaya",
            "Bp Andre",
        ),
    ),
    Roster(
        day_index=6,
        title="SABTU MALAM MINGGU",
        members=("Bp Imam Kurtubi", "Bp Ayo", "Bp Ajo", "Bp Rizki"),
    ),
    Roster(
        day_index=0,
        title="MINGGU MALAM SENIN",
        members=("Bp Haji Udin", "Bp Imam H47", "Bp Ikhsan", "Bp Rastam"),
    ),
)
