"""Interface for message stores (Repository Pattern).

Allows switching document store backends (Firestore, Redis, in-memory)
without changing the dispatch logic.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class WriteResult:
    """Acknowledgement of a successful create."""
    message_id: str
    update_time: Optional[datetime] = None


class IMessageStore(ABC):
    """
    Interface for message persistence following Repository Pattern.

    Documents are addressed by message ID and created exactly once.
    Implementations must be safe to call from several threads at a time.
    """

    @abstractmethod
    def create(self, message_id: str, document: Dict[str, Any]) -> WriteResult:
        """
        Create a document, failing if one already exists under the ID.

        Args:
            message_id: Platform-assigned message identifier (document key)
            document: Document fields

        Returns:
            WriteResult acknowledgement

        Raises:
            DuplicateMessageError: If a document with the ID exists
            MessageStoreError: If the store fails the write
        """
        pass

    @abstractmethod
    def get(self, message_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve a document.

        Args:
            message_id: Message identifier

        Returns:
            Document fields, or None if no document exists
        """
        pass

    @abstractmethod
    def delete(self, message_id: str) -> bool:
        """
        Delete a document.

        Args:
            message_id: Message identifier

        Returns:
            True if a document was deleted, False otherwise
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """
        Check that the backing store is reachable.

        Returns:
            True if reachable, False otherwise
        """
        pass
