"""Example: drive the attendance session without Flask.

Controllers are a thin layer; the use cases live in the services/session.
"""

from datetime import datetime

from siskamling.config import testing as settings
from siskamling.container import build_container
from siskamling.core.enums import AttendanceStatus


def main():
    container = build_container(settings, clock=lambda: datetime(2025, 10, 21, 6, 30))
    session = container.attendance_session
    print("Jadwal:", session.roster.title)

    for member in session.roster.members:
        session.set_status(member, AttendanceStatus.PRESENT)
    session.set_prelek_input("50000")

    result = session.submit()
    print(result.analysis.to_dict())
    print(container.recap_service.list_ui())


if __name__ == "__main__":
    main()
