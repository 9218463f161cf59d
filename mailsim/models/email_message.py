"""Outgoing email message data model."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

DEFAULT_SENDER = "noreply@localhost"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILENAME_FORMAT = "%Y-%m-%d_%H-%M-%S"


class SendStatus(Enum):
    """Outcome of a send attempt."""

    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class OutgoingMessage:
    """
    A plain-text message composed for one send attempt.

    Attributes:
        sender: Address placed in the From header
        recipient: Address placed in the To header (not validated)
        subject: Subject line
        body: Message body, usually ending with a newline
        sent_at: Wall-clock time captured when the message was built
        message_id: Message-ID derived from sent_at, e.g. <1700000000@local>
    """

    sender: str
    recipient: str
    subject: str
    body: str
    sent_at: datetime
    message_id: str

    @property
    def date_header(self) -> str:
        """Date header value in YYYY-MM-DD HH:MM:SS form."""
        return self.sent_at.strftime(DATE_FORMAT)

    def filename(self, extension: str = ".eml") -> str:
        """File name derived from the send timestamp."""
        return self.sent_at.strftime(FILENAME_FORMAT) + extension


@dataclass
class SendResult:
    """
    Combined outcome of composing, storing and dispatching a message.

    Attributes:
        status: SENT, SKIPPED (dispatch disabled) or FAILED
        message: The message that was composed
        file_path: Path of the stored message file, if it was written
        error_details: Human-readable failure reason
    """

    status: SendStatus
    message: OutgoingMessage
    file_path: Optional[Path] = None
    error_details: Optional[str] = None

    def __post_init__(self):
        """Validate fields after initialization."""
        if self.status != SendStatus.FAILED and self.file_path is None:
            raise ValueError(f"file_path required for {self.status.value} result")

    @property
    def ok(self) -> bool:
        """True when the message was persisted and not rejected."""
        return self.status in (SendStatus.SENT, SendStatus.SKIPPED)
