"""Domain exceptions."""


class WebhookDecodeError(Exception):
    """Webhook body could not be decoded into an envelope."""
    pass


class MessageStoreError(Exception):
    """A message store rejected or failed a write."""

    def __init__(self, message_id: str, reason: str):
        self.message_id = message_id
        self.reason = reason
        super().__init__(f"{message_id}: {reason}")


class DuplicateMessageError(MessageStoreError):
    """A document with the message ID already exists."""

    def __init__(self, message_id: str):
        super().__init__(message_id, "document already exists")
