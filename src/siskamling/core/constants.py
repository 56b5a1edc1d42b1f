"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_KEY = "siskamlingSubmissions"
DEFAULT_ROSTER_CHECK_INTERVAL_SECONDS = 60
RECAP_FILTER_ALL = "all"
NO_SCHEDULE_TITLE = "Jadwal Tidak Ditemukan"
NO_SCHEDULE_MESSAGE = "Tidak ada jadwal siskamling yang terdaftar untuk hari ini."
