"""mailsim - local email sender simulator"""

from .errors import ConfigError, DispatchError, DispatcherUnavailableError, MailSimError, StorageError

__version__ = "0.1.0"

__all__ = [
    "MailSimError",
    "ConfigError",
    "StorageError",
    "DispatchError",
    "DispatcherUnavailableError",
]
