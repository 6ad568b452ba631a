"""In-process message store for local runs and tests."""
import copy
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from linehook.domain.exceptions import DuplicateMessageError
from linehook.domain.interfaces.message_store import IMessageStore, WriteResult


class InMemoryMessageStore(IMessageStore):
    """Dictionary-backed store; contents are lost when the process exits."""

    def __init__(self):
        self._documents: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def create(self, message_id: str, document: Dict[str, Any]) -> WriteResult:
        with self._lock:
            if message_id in self._documents:
                raise DuplicateMessageError(message_id)
            self._documents[message_id] = copy.deepcopy(document)
        return WriteResult(message_id=message_id, update_time=datetime.now(timezone.utc))

    def get(self, message_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            document = self._documents.get(message_id)
            return copy.deepcopy(document) if document is not None else None

    def delete(self, message_id: str) -> bool:
        with self._lock:
            return self._documents.pop(message_id, None) is not None

    def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)
