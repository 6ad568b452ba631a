"""Repository implementations (Infrastructure Layer).

Message store implementations for data persistence.
These implement domain interfaces defined in linehook.domain.interfaces.
"""
from linehook.infrastructure.repositories.firestore_message_store import FirestoreMessageStore
from linehook.infrastructure.repositories.memory_message_store import InMemoryMessageStore
from linehook.infrastructure.repositories.redis_message_store import RedisMessageStore

__all__ = [
    "FirestoreMessageStore",
    "InMemoryMessageStore",
    "RedisMessageStore",
]
