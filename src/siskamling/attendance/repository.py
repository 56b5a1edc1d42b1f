from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from ..core.constants import DEFAULT_STORAGE_KEY
from ..core.exceptions import MalformedLogError
from ..storage.kv_store import KeyValueStore
from .codec import dumps_log, loads_log
from .model import SubmissionRecord

logger = logging.getLogger(__name__)


class SubmissionLogRepository(Protocol):
    def load_all(self) -> Sequence[SubmissionRecord]:
        """All records in append order."""

        raise NotImplementedError

    def append(self, record: SubmissionRecord) -> None:
        raise NotImplementedError


class KeyValueSubmissionRepository(SubmissionLogRepository):
    """The whole log lives as one JSON string under a single key.

    ``append`` is read-modify-write of the full value. With more than one
    writer the last write wins.
    """

    def __init__(self, store: KeyValueStore, *, key: str = DEFAULT_STORAGE_KEY):
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load_all(self) -> Sequence[SubmissionRecord]:
        return self._read()

    def append(self, record: SubmissionRecord) -> None:
        records = self._read()
        records.append(record)
        self._store.set(self._key, dumps_log(records))

    def raw(self) -> Optional[str]:
        return self._store.get(self._key)

    def _read(self) -> List[SubmissionRecord]:
        raw = self._store.get(self._key)
        try:
            return loads_log(raw)
        except MalformedLogError as e:
            logger.warning("Stored submission log %r is unreadable, using an empty log: %s", self._key, e)
            return []
