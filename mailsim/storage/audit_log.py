"""Audit logging for send attempts."""

import json
from datetime import datetime
from pathlib import Path

from ..models.email_message import SendResult


class AuditLog:
    """Append-only JSON-lines record of send attempts."""

    def __init__(self, log_path: Path):
        """
        Initialize audit logger.

        Args:
            log_path: Path to audit log file
        """
        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)

    def log_send_attempt(self, result: SendResult) -> None:
        """
        Log the outcome of one send attempt.

        Args:
            result: Result returned by EmailSender.send_email
        """
        event = {
            "timestamp": datetime.now().isoformat(),
            "event_type": "send_attempt",
            "status": result.status.value,
            "message_id": result.message.message_id,
            "recipient": result.message.recipient,
            "subject": result.message.subject,
            "file_path": str(result.file_path) if result.file_path else None,
            "error_details": result.error_details,
        }

        self._write_event(event)

    def read_events(self) -> list[dict]:
        """
        Read all recorded events.

        Returns:
            Events in the order they were written
        """
        events = []

        if self.log_path.exists():
            with open(self.log_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line:
                        try:
                            events.append(json.loads(line))
                        except json.JSONDecodeError:
                            # Skip invalid lines
                            continue

        return events

    def _write_event(self, event: dict) -> None:
        """
        Write event to log file.

        Args:
            event: Event dictionary
        """
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(event, ensure_ascii=False) + "\n")
