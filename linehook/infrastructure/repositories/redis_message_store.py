"""Message store backed by Redis (Repository Pattern)."""
import json
import logging
from typing import Any, Dict, Optional
import redis

from linehook.domain.exceptions import DuplicateMessageError, MessageStoreError
from linehook.domain.interfaces.message_store import IMessageStore, WriteResult


class RedisMessageStore(IMessageStore):
    """
    Stores each message as a JSON string under ``<collection>:<message id>``.

    Create-only semantics come from ``SET ... NX``. Keys never expire.
    """

    def __init__(self, redis_client: redis.Redis, collection: str = "Messages"):
        """
        Initialize the message store.

        Args:
            redis_client: Redis client instance (Dependency Injection)
            collection: Key prefix the message documents live under
        """
        self.redis = redis_client
        self._logger = logging.getLogger(__name__)
        self._key_prefix = f"{collection}:"

    def _get_key(self, message_id: str) -> str:
        """Generate Redis key for a message."""
        return f"{self._key_prefix}{message_id}"

    def create(self, message_id: str, document: Dict[str, Any]) -> WriteResult:
        try:
            created = self.redis.set(self._get_key(message_id), json.dumps(document), nx=True)
        except (redis.RedisError, TypeError, ValueError) as e:
            raise MessageStoreError(message_id, str(e)) from e

        if not created:
            raise DuplicateMessageError(message_id)

        return WriteResult(message_id=message_id)

    def get(self, message_id: str) -> Optional[Dict[str, Any]]:
        try:
            data = self.redis.get(self._get_key(message_id))
            return json.loads(data) if data else None
        except (redis.RedisError, json.JSONDecodeError) as e:
            self._logger.error(f"Error retrieving message {message_id}: {e}")
            return None

    def delete(self, message_id: str) -> bool:
        try:
            result = self.redis.delete(self._get_key(message_id))
        except redis.RedisError as e:
            self._logger.error(f"Error deleting message {message_id}: {e}")
            return False

        if result:
            self._logger.info(f"Deleted message {message_id}")
        return bool(result)

    def ping(self) -> bool:
        try:
            return bool(self.redis.ping())
        except redis.RedisError as e:
            self._logger.error(f"Redis health check failed: {e}")
            return False
