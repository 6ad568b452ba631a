"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from linehook.application.services.record_mapper import RecordMapper
from linehook.application.use_cases.persist_events_use_case import PersistEventsUseCase
from linehook.config.settings import Config
from linehook.domain.interfaces.message_store import IMessageStore
from linehook.infrastructure.factories.store_factory import StoreFactory
from linehook.utils.signature import SignatureVerifier


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.

    One container per application. The app factory creates every service
    at startup; they are then shared by every request the application
    serves. A store passed in at construction replaces the configured backend.
    """

    def __init__(self, config: type[Config], message_store: Optional[IMessageStore] = None):
        """
        Initialize service container.

        Args:
            config: Configuration class
            message_store: Optional pre-built message store (tests, embedding)
        """
        self.config = config
        self._logger = logging.getLogger(__name__)
        self._message_store = message_store
        self._record_mapper: Optional[RecordMapper] = None
        self._signature_verifier: Optional[SignatureVerifier] = None
        self._persist_events_use_case: Optional[PersistEventsUseCase] = None

    def get_message_store(self) -> IMessageStore:
        """Get or create message store instance."""
        if self._message_store is None:
            storage_type = self.config.MESSAGE_STORE_TYPE
            try:
                self._message_store = StoreFactory.create_message_store(self.config)
                self._logger.info(f"MessageStore created with {storage_type}")
            except Exception as e:
                self._logger.error(f"Failed to create MessageStore: {e}")
                raise
        return self._message_store

    def get_record_mapper(self) -> RecordMapper:
        """Get or create record mapper instance."""
        if self._record_mapper is None:
            self._record_mapper = RecordMapper()
        return self._record_mapper

    def get_signature_verifier(self) -> SignatureVerifier:
        """Get or create signature verifier instance."""
        if self._signature_verifier is None:
            secret = self.config.LINE_CHANNEL_SECRET
            if not secret:
                raise ValueError("LINE_CHANNEL_SECRET not configured")
            self._signature_verifier = SignatureVerifier(secret)
        return self._signature_verifier

    def get_persist_events_use_case(self) -> PersistEventsUseCase:
        """Get or create persist events use case instance."""
        if self._persist_events_use_case is None:
            self._persist_events_use_case = PersistEventsUseCase(
                message_store=self.get_message_store(),
                record_mapper=self.get_record_mapper(),
                max_workers=self.config.PERSIST_MAX_WORKERS,
            )
            self._logger.info("PersistEventsUseCase created")
        return self._persist_events_use_case

    def shutdown(self) -> None:
        """Release worker threads held by the services."""
        if self._persist_events_use_case is not None:
            self._persist_events_use_case.shutdown()
            self._persist_events_use_case = None
