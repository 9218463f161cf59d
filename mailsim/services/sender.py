"""Compose, store and dispatch a single email."""

import logging
from datetime import datetime
from typing import Optional

from ..config.settings import AppConfig
from ..errors import DispatchError, StorageError
from ..models.email_message import DEFAULT_SENDER, OutgoingMessage, SendResult, SendStatus
from ..storage.audit_log import AuditLog
from ..storage.message_store import MessageStore
from .composer import build_message, render_message
from .dispatch.base import Dispatcher
from .dispatch.sendmail import SendmailDispatcher

logger = logging.getLogger(__name__)


class EmailSender:
    """Write each message to the store, then hand it to a dispatcher."""

    def __init__(
        self,
        store: MessageStore,
        dispatcher: Optional[Dispatcher] = None,
        enable_dispatch: bool = True,
        default_sender: str = DEFAULT_SENDER,
        message_id_domain: str = "local",
        audit_log: Optional[AuditLog] = None,
    ):
        """
        Initialize email sender.

        Args:
            store: Where message files are written
            dispatcher: Mail-transfer dispatcher (default: sendmail -t)
            enable_dispatch: Skip dispatch entirely when False
            default_sender: From address used when none is given
            message_id_domain: Domain part of generated Message-IDs
            audit_log: Optional record of send attempts
        """
        self.store = store
        self.dispatcher = dispatcher if dispatcher is not None else SendmailDispatcher()
        self.enable_dispatch = enable_dispatch
        self.default_sender = default_sender
        self.message_id_domain = message_id_domain
        self.audit_log = audit_log

    @classmethod
    def from_config(cls, config: AppConfig, dispatcher: Optional[Dispatcher] = None) -> "EmailSender":
        """Build a sender from application configuration."""
        audit_log_path = config.storage.get_audit_log_path()
        return cls(
            store=MessageStore(config.storage.get_storage_path(), config.storage.file_extension),
            dispatcher=dispatcher or SendmailDispatcher(config.dispatch.command),
            enable_dispatch=config.dispatch.enable_dispatch,
            default_sender=config.message.default_sender,
            message_id_domain=config.message.message_id_domain,
            audit_log=AuditLog(audit_log_path) if audit_log_path else None,
        )

    def send_email(
        self,
        recipient: str,
        subject: str,
        body: str,
        sender: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> SendResult:
        """
        Compose, write and dispatch one message.

        Args:
            recipient: To address
            subject: Subject line
            body: Message body
            sender: From address (default: configured default sender)
            now: Send time (default: current time)

        Returns:
            SendResult. FAILED results carry file_path whenever the message
            was written, so it can be resent by hand.

        Notes:
            - Storage and dispatch errors are returned as FAILED results
            - The written file is never removed
        """
        message = build_message(
            recipient,
            subject,
            body,
            sender=sender or self.default_sender,
            now=now,
            domain=self.message_id_domain,
        )

        result = self._send(message)
        self._record(result)
        return result

    def _send(self, message: OutgoingMessage) -> SendResult:
        try:
            self.store.ensure_storage_directory()
            file_path = self.store.write_message_file(
                message.filename(self.store.extension), render_message(message)
            )
        except StorageError as e:
            logger.error("Could not store message %s: %s", message.message_id, e)
            return SendResult(SendStatus.FAILED, message, error_details=str(e))

        if not self.enable_dispatch:
            logger.info("Dispatch disabled, message %s saved to %s", message.message_id, file_path)
            return SendResult(SendStatus.SKIPPED, message, file_path=file_path)

        try:
            delivered = self.dispatcher.dispatch(file_path)
        except DispatchError as e:
            logger.error("Dispatch of %s failed: %s", message.message_id, e)
            return SendResult(SendStatus.FAILED, message, file_path=file_path, error_details=str(e))

        if not delivered:
            return SendResult(
                SendStatus.FAILED,
                message,
                file_path=file_path,
                error_details=f"{self.dispatcher.description} rejected the message",
            )

        logger.info("Message %s dispatched via %s", message.message_id, self.dispatcher.name)
        return SendResult(SendStatus.SENT, message, file_path=file_path)

    def _record(self, result: SendResult) -> None:
        if self.audit_log is None:
            return
        try:
            self.audit_log.log_send_attempt(result)
        except OSError as e:
            logger.warning("Could not write audit log %s: %s", self.audit_log.log_path, e)
