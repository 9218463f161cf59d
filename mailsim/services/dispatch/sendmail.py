"""Dispatcher that pipes a message file into a sendmail-compatible command."""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ...errors import DispatcherUnavailableError
from .base import Dispatcher

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = ("sendmail", "-t")


class SendmailDispatcher(Dispatcher):
    """Run a local mail-transfer command with the message on stdin."""

    def __init__(self, command: Optional[Sequence[str]] = None):
        """
        Initialize sendmail dispatcher.

        Args:
            command: Command line to run (default: sendmail -t)
        """
        self.command = list(command) if command else list(DEFAULT_COMMAND)

    @property
    def name(self) -> str:
        """Executable name of the command."""
        return Path(self.command[0]).name

    @property
    def description(self) -> str:
        """Full command line, shell-quoted."""
        return shlex.join(self.command)

    def dispatch(self, file_path: Path) -> bool:
        """
        Run the command with file_path bound to its standard input.

        Args:
            file_path: Path to a composed message file

        Returns:
            True if the command exited with status 0. A nonzero status or
            termination by a signal (negative returncode) returns False.

        Raises:
            DispatcherUnavailableError: If the file cannot be opened or the
                command cannot be started
        """
        try:
            with open(file_path, "rb") as message_file:
                result = subprocess.run(
                    self.command,
                    stdin=message_file,
                    capture_output=True,
                    check=False,
                )
        except OSError as e:
            raise DispatcherUnavailableError(f"Failed to run {' '.join(self.command)}: {e}") from e

        if result.stdout:
            logger.debug("%s stdout: %s", self.name, result.stdout.decode("utf-8", errors="replace").strip())
        if result.stderr:
            logger.debug("%s stderr: %s", self.name, result.stderr.decode("utf-8", errors="replace").strip())

        if result.returncode != 0:
            logger.warning("%s exited with status %d for %s", self.name, result.returncode, file_path)
            return False

        return True
