"""Message persistence layer"""

from .audit_log import AuditLog
from .message_store import MessageStore, ensure_storage_directory, write_message_file

__all__ = [
    "MessageStore",
    "ensure_storage_directory",
    "write_message_file",
    "AuditLog",
]
