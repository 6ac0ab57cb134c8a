import threading
import uuid
from collections import deque
from typing import List, Optional, Sequence

import structlog

from bloodwise.core.config import settings
from bloodwise.schemas.history import HistoryEntry
from bloodwise.schemas.prediction import Prediction

logger = structlog.get_logger()

class HistoryStore:
    """
    Past classifications for the running process only. Oldest entries
    fall off once ``limit`` is reached; nothing survives a restart.
    """

    def __init__(self, limit: int = 50):
        self._entries = deque(maxlen=limit)
        self._lock = threading.Lock()

    def add(self, entry: HistoryEntry) -> HistoryEntry:
        with self._lock:
            self._entries.append(entry)
        return entry

    def list(self, disease: Optional[str] = None) -> List[HistoryEntry]:
        """Newest first, optionally only entries that predicted ``disease``."""
        with self._lock:
            entries = list(reversed(self._entries))
        if disease:
            wanted = disease.strip().lower()
            entries = [
                e for e in entries
                if any(p.disease.value.lower() == wanted for p in e.predictions)
            ]
        return entries

    def remove(self, entry_id: uuid.UUID) -> bool:
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    self._entries.remove(entry)
                    return True
        return False

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


history_store = HistoryStore(limit=settings.HISTORY_LIMIT)

def get_history_store() -> HistoryStore:
    return history_store

def record_history_entry(
    store: HistoryStore,
    predictions: Sequence[Prediction],
    lab_name: Optional[str] = None
) -> HistoryEntry:
    """
    Stores a copy of a classification result in the session history.
    """
    entry = store.add(HistoryEntry(lab_name=lab_name, predictions=list(predictions)))
    logger.info(
        "history_entry_recorded",
        entry_id=str(entry.id),
        diseases=[p.disease.value for p in entry.predictions]
    )
    return entry
