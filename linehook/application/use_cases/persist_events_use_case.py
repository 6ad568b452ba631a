"""Use case for persisting webhook events (Use Case Pattern)."""
import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import List, Optional

from linehook.application.services.record_mapper import RecordMapper
from linehook.domain.entities.event import Envelope, Event
from linehook.domain.entities.record import MessageRecord
from linehook.domain.exceptions import DuplicateMessageError, MessageStoreError
from linehook.domain.interfaces.message_store import IMessageStore


logger = logging.getLogger(__name__)

PERSISTED = "persisted"
DUPLICATE = "duplicate"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass
class PersistOutcome:
    """Result of dispatching one event."""
    message_id: str
    status: str
    message_type: str = ""
    error: Optional[str] = None


@dataclass
class DispatchResult:
    """Outcomes of every event in one envelope, in event order."""
    outcomes: List[PersistOutcome] = field(default_factory=list)

    def _with_status(self, status: str) -> List[PersistOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def persisted(self) -> List[PersistOutcome]:
        return self._with_status(PERSISTED)

    @property
    def duplicates(self) -> List[PersistOutcome]:
        return self._with_status(DUPLICATE)

    @property
    def skipped(self) -> List[PersistOutcome]:
        return self._with_status(SKIPPED)

    @property
    def failed(self) -> List[PersistOutcome]:
        return self._with_status(FAILED)

    @property
    def success(self) -> bool:
        return not self.failed


class PersistEventsUseCase:
    """
    Use case for persisting every message event of an envelope.

    Fans the writes out to a bounded thread pool and waits for all of them
    before returning. A failed write is recorded as an outcome; it never
    aborts the other writes.
    """

    def __init__(
        self,
        message_store: IMessageStore,
        record_mapper: Optional[RecordMapper] = None,
        max_workers: int = 8
    ):
        """
        Initialize use case with dependencies (Dependency Injection).

        Args:
            message_store: Store the records are created in
            record_mapper: Event to record mapper
            max_workers: Upper bound on concurrent writes
        """
        self.message_store = message_store
        self.record_mapper = record_mapper or RecordMapper()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="persist",
        )

    def execute(self, envelope: Envelope) -> DispatchResult:
        """
        Map and persist every event, then join.

        Args:
            envelope: Decoded webhook envelope

        Returns:
            DispatchResult with one outcome per event
        """
        logger.info(
            f"Dispatching {len(envelope.events)} event(s) for destination {envelope.destination}"
        )

        slots: List[Optional[PersistOutcome]] = []
        futures: List[Future] = []
        indexes: List[int] = []

        for event in envelope.events:
            record = self.record_mapper.map(event)
            if record is None:
                slots.append(PersistOutcome(
                    message_id=event.message.id,
                    status=SKIPPED,
                    message_type=event.message.type,
                ))
                continue

            indexes.append(len(slots))
            slots.append(None)
            futures.append(self._executor.submit(self._write, event, record))

        wait(futures)

        for index, future in zip(indexes, futures):
            slots[index] = future.result()

        result = DispatchResult(outcomes=[o for o in slots if o is not None])
        logger.info(
            f"Dispatch complete: persisted={len(result.persisted)} "
            f"duplicates={len(result.duplicates)} skipped={len(result.skipped)} "
            f"failed={len(result.failed)}"
        )
        return result

    def _write(self, event: Event, record: MessageRecord) -> PersistOutcome:
        """Create one record; every store error becomes an outcome."""
        message_id = event.message.id
        message_type = event.message.type

        if not message_id:
            logger.error(f"Message of type {message_type!r} has no id, cannot persist")
            return PersistOutcome(message_id, FAILED, message_type, "missing message id")

        document = record.to_document()
        logger.debug(f"writeMsg - id:{message_id} msg:{document}")

        try:
            write_result = self.message_store.create(message_id, document)
        except DuplicateMessageError as e:
            logger.warning(f"Message {message_id} already persisted: {e.reason}")
            return PersistOutcome(message_id, DUPLICATE, message_type, e.reason)
        except MessageStoreError as e:
            logger.error(f"Failed to persist message {message_id}: {e.reason}")
            return PersistOutcome(message_id, FAILED, message_type, e.reason)
        except Exception as e:
            logger.error(f"Unexpected error persisting message {message_id}: {e}", exc_info=True)
            return PersistOutcome(message_id, FAILED, message_type, str(e))

        logger.info(f"WriteResult: id={write_result.message_id} update_time={write_result.update_time}")
        return PersistOutcome(message_id, PERSISTED, message_type)

    def shutdown(self) -> None:
        """Wait for in-flight writes and release the worker threads."""
        self._executor.shutdown(wait=True)
