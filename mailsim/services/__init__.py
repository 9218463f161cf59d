"""Business logic services"""

from .composer import build_message, compose_message, generate_message_id, render_message
from .dispatch import Dispatcher, SendmailDispatcher
from .sender import EmailSender

__all__ = [
    "build_message",
    "compose_message",
    "generate_message_id",
    "render_message",
    "Dispatcher",
    "SendmailDispatcher",
    "EmailSender",
]
