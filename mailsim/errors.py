"""Exception hierarchy for mailsim."""


class MailSimError(Exception):
    """Base exception for mailsim errors."""

    pass


class ConfigError(MailSimError):
    """Raised when the configuration file is missing or invalid."""

    pass


class StorageError(MailSimError):
    """Raised when the storage directory or a message file cannot be used."""

    pass


class DispatchError(MailSimError):
    """Base exception for mail-transfer dispatch errors."""

    pass


class DispatcherUnavailableError(DispatchError):
    """Raised when the mail-transfer command cannot be started."""

    pass
