"""Mail-transfer dispatch services."""

from .base import Dispatcher
from .sendmail import SendmailDispatcher

__all__ = ["Dispatcher", "SendmailDispatcher"]
