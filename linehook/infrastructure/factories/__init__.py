"""Factories for creating message store instances (Factory Pattern)."""

from linehook.infrastructure.factories.store_factory import StoreFactory

__all__ = [
    "StoreFactory",
]
