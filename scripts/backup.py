"""Export the stored submission log.

Note: writes the raw JSON value as-is, so the file can be loaded back into the
store (or into the browser version under the same key) without conversion.
"""

from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path

from siskamling.attendance.repository import KeyValueSubmissionRepository
from siskamling.config import get_settings_module
from siskamling.container import build_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    repo = KeyValueSubmissionRepository(build_store(settings), key=settings.STORAGE_KEY)

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{repo.key}_{ts}.json"

    raw = repo.raw()
    out_file.write_text(raw if raw is not None else "[]", encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(repo.load_all())} submissions)")


if __name__ == "__main__":
    main()
