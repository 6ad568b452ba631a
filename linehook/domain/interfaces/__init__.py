"""Domain interfaces following Dependency Inversion Principle."""

from linehook.domain.interfaces.message_store import IMessageStore, WriteResult

__all__ = [
    "IMessageStore",
    "WriteResult",
]
