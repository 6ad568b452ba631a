"""Factory for creating message store instances (Factory Pattern)."""
import logging

from linehook.config.settings import Config
from linehook.domain.interfaces.message_store import IMessageStore
from linehook.infrastructure.firestore_client import FirestoreClientFactory
from linehook.infrastructure.redis_client import RedisClientFactory
from linehook.infrastructure.repositories.firestore_message_store import FirestoreMessageStore
from linehook.infrastructure.repositories.memory_message_store import InMemoryMessageStore
from linehook.infrastructure.repositories.redis_message_store import RedisMessageStore


logger = logging.getLogger(__name__)


class StoreFactory:
    """
    Factory for creating message stores following Factory Pattern.

    Centralizes store creation logic and allows switching backends by configuration.
    """

    @staticmethod
    def create_message_store(config: type[Config]) -> IMessageStore:
        """
        Create a message store instance.

        Args:
            config: Configuration class (MESSAGE_STORE_TYPE selects the backend)

        Returns:
            IMessageStore instance

        Raises:
            ValueError: If the store type is not supported or misconfigured
        """
        storage_type = config.MESSAGE_STORE_TYPE.lower()

        if storage_type == "firestore":
            client = FirestoreClientFactory.create_client(config.GCP_PROJECT)
            return FirestoreMessageStore(client, collection=config.MESSAGES_COLLECTION)
        elif storage_type == "redis":
            client = RedisClientFactory.create_client(config.REDIS_URL)
            return RedisMessageStore(client, collection=config.MESSAGES_COLLECTION)
        elif storage_type == "memory":
            logger.warning("Using in-memory message store, messages will not survive a restart")
            return InMemoryMessageStore()
        else:
            raise ValueError(f"Unsupported message store type: {storage_type}")
