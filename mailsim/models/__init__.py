"""Data models for outgoing messages"""

from .email_message import OutgoingMessage, SendResult, SendStatus

__all__ = ["OutgoingMessage", "SendResult", "SendStatus"]
