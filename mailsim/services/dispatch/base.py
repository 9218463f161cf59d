"""Abstract interface for handing a stored message to a mail-transfer agent."""

from abc import ABC, abstractmethod
from pathlib import Path


class Dispatcher(ABC):
    """
    Abstract interface for message delivery.

    Keeps the sender independent of any particular mail-transfer agent so
    that tests can substitute a fake.
    """

    @abstractmethod
    def dispatch(self, file_path: Path) -> bool:
        """
        Deliver the message stored at file_path.

        Args:
            file_path: Path to a composed message file

        Returns:
            True if the agent accepted the message, False otherwise

        Raises:
            DispatcherUnavailableError: If the agent cannot be started

        Notes:
            - Blocks until the agent has finished
            - Must not modify or delete the file
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of the dispatcher.

        Returns:
            Name used in status and log messages (e.g., "sendmail")
        """
        pass

    @property
    def description(self) -> str:
        """What was run, for failure reports. Defaults to the name."""
        return self.name
