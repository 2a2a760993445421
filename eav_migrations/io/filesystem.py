"""File system access for stubs and generated migrations."""

from __future__ import annotations

from pathlib import Path

from eav_migrations.core.exceptions import MigrationWriteError, StubNotFoundError


class Filesystem:
    """Reads stub files and writes generated migrations.

    Write failures are reported as MigrationWriteError; a missing file on read
    is reported as StubNotFoundError.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the filesystem.

        Args:
            encoding: Text encoding used for reads and writes
        """
        self.encoding = encoding

    def exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def get(self, path: str | Path) -> str:
        """Get the contents of a file.

        Args:
            path: File to read

        Returns:
            The file contents

        Raises:
            StubNotFoundError: If the file does not exist
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise StubNotFoundError(str(file_path))

        with open(file_path, "r", encoding=self.encoding) as f:
            return f.read()

    def put(self, path: str | Path, content: str) -> int:
        """Write the contents of a file.

        The parent directory must already exist.

        Args:
            path: Destination file
            content: Text to write

        Returns:
            Number of characters written

        Raises:
            MigrationWriteError: If the file cannot be written
        """
        file_path = Path(path)
        try:
            with open(file_path, "w", encoding=self.encoding) as f:
                return f.write(content)
        except OSError as e:
            raise MigrationWriteError(str(file_path), e) from e

    def ensure_directory(self, path: str | Path) -> None:
        """Create a directory and its parents if they do not exist.

        Raises:
            PermissionError: If unable to create the directory
        """
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise PermissionError(
                f"Failed to create migrations directory {path}: {e}"
            ) from e
