"""Message store backed by Cloud Firestore (Repository Pattern)."""
import logging
from typing import Any, Dict, Optional

from google.api_core import exceptions as gcp_exceptions
from google.cloud import firestore

from linehook.domain.exceptions import DuplicateMessageError, MessageStoreError
from linehook.domain.interfaces.message_store import IMessageStore, WriteResult


class FirestoreMessageStore(IMessageStore):
    """
    Stores one document per message under ``<collection>/<message id>``.

    Uniqueness is enforced by Firestore: ``DocumentReference.create`` fails
    with AlreadyExists when the document is present.
    """

    def __init__(self, client: firestore.Client, collection: str = "Messages"):
        """
        Initialize the store.

        Args:
            client: Firestore client (Dependency Injection)
            collection: Collection the message documents live in
        """
        self.client = client
        self.collection = collection
        self._logger = logging.getLogger(__name__)

    def _document(self, message_id: str):
        return self.client.collection(self.collection).document(message_id)

    def create(self, message_id: str, document: Dict[str, Any]) -> WriteResult:
        try:
            result = self._document(message_id).create(document)
        except gcp_exceptions.AlreadyExists as e:
            raise DuplicateMessageError(message_id) from e
        except (gcp_exceptions.GoogleAPICallError, gcp_exceptions.RetryError, ValueError) as e:
            raise MessageStoreError(message_id, str(e)) from e

        return WriteResult(message_id=message_id, update_time=result.update_time)

    def get(self, message_id: str) -> Optional[Dict[str, Any]]:
        try:
            snapshot = self._document(message_id).get()
        except gcp_exceptions.GoogleAPICallError as e:
            self._logger.error(f"Error retrieving message {message_id}: {e}")
            return None
        return snapshot.to_dict() if snapshot.exists else None

    def delete(self, message_id: str) -> bool:
        doc_ref = self._document(message_id)
        try:
            if not doc_ref.get().exists:
                self._logger.debug(f"No message to delete for {message_id}")
                return False
            doc_ref.delete()
        except gcp_exceptions.GoogleAPICallError as e:
            self._logger.error(f"Error deleting message {message_id}: {e}")
            return False

        self._logger.info(f"Deleted message {message_id}")
        return True

    def ping(self) -> bool:
        try:
            list(self.client.collection(self.collection).limit(1).stream())
            return True
        except (gcp_exceptions.GoogleAPICallError, gcp_exceptions.RetryError) as e:
            self._logger.error(f"Firestore health check failed: {e}")
            return False
