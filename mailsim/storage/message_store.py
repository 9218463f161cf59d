"""Storage directory and message file handling."""

import logging
from pathlib import Path

from ..errors import StorageError

logger = logging.getLogger(__name__)


def ensure_storage_directory(path: Path) -> None:
    """
    Create the storage directory and missing parents if absent.

    Calling it again for an existing directory does nothing.

    Args:
        path: Storage directory

    Raises:
        StorageError: If path is a non-directory or cannot be created
    """
    if path.is_dir():
        return

    if path.exists():
        raise StorageError(f"Storage path exists and is not a directory: {path}")

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Error creating storage directory {path}: {e}") from e

    logger.info("Created storage directory %s", path)


def write_message_file(path: Path, content: str) -> Path:
    """
    Create or truncate path and write content to it.

    The file is closed before returning. Line endings are written as given.

    Args:
        path: Target file
        content: Full message text

    Returns:
        The path written

    Raises:
        StorageError: If content is not encodable as UTF-8, or the file
            cannot be opened or written
    """
    # Encode first so an unencodable message never truncates or creates the file
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise StorageError(f"Email content for {path} is not valid UTF-8 text: {e}") from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StorageError(f"Could not write email file {path}: {e}") from e

    logger.debug("Wrote %d characters to %s", len(content), path)
    return path


class MessageStore:
    """Directory of composed message files."""

    def __init__(self, storage_path: Path, extension: str = ".eml"):
        """
        Initialize message store.

        Args:
            storage_path: Directory holding message files
            extension: Suffix of message files
        """
        self.storage_path = storage_path
        self.extension = extension

    def ensure_storage_directory(self) -> None:
        """Create the storage directory if needed."""
        ensure_storage_directory(self.storage_path)

    def path_for(self, filename: str) -> Path:
        """Resolve a bare file name inside the storage directory."""
        if not filename or Path(filename).name != filename or filename in (".", ".."):
            raise StorageError(f"Invalid email filename: {filename!r}")
        return self.storage_path / filename

    def write_message_file(self, filename: str, content: str) -> Path:
        """Write content to filename inside the storage directory."""
        return write_message_file(self.path_for(filename), content)

    def list_messages(self) -> list[Path]:
        """
        List stored message files, newest first.

        Returns:
            Paths with the configured extension, sorted by modification
            time descending; empty if the directory does not exist

        Raises:
            StorageError: If the directory cannot be read
        """
        if not self.storage_path.exists():
            return []

        try:
            files = [
                entry
                for entry in self.storage_path.iterdir()
                if entry.is_file() and entry.suffix == self.extension
            ]
            files.sort(key=lambda p: p.stat().st_mtime, reverse=True)
        except OSError as e:
            raise StorageError(f"Error reading email directory {self.storage_path}: {e}") from e

        return files

    def read_message(self, filename: str) -> str:
        """
        Read a stored message.

        Args:
            filename: Bare file name inside the storage directory

        Returns:
            Message text

        Raises:
            StorageError: If the name has path components, or the file
                cannot be read or is not UTF-8
        """
        path = self.path_for(filename)
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise StorageError(f"Email file {filename} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Could not open email file {filename}: {e}") from e
