"""Custom exception classes for the EAV migration generator."""

from __future__ import annotations


class MigrationGenerationError(Exception):
    """Base exception for migration generation errors.

    All custom exceptions in the EAV migration generator inherit from this class.
    """

    pass


class StubNotFoundError(MigrationGenerationError, FileNotFoundError):
    """Error when a migration stub cannot be found.

    Raised when one of the stub files required to build a migration does not
    exist in the stub directory.

    Args:
        path: Path of the missing stub file
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Migration stub not found: {path}")


class MigrationWriteError(MigrationGenerationError):
    """Error when a generated migration cannot be written.

    Args:
        path: Destination path of the migration
        cause: The underlying exception raised by the file system
    """

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write migration to '{path}': {cause}")


class ValidationError(MigrationGenerationError):
    """Error during identifier validation.

    Raised when the entity name, base class or a configured field type cannot
    be safely substituted into generated source code.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Migration validation failed: {'; '.join(errors)}")


class ConfigurationError(MigrationGenerationError):
    """Error in application configuration.

    Raised when configuration values are invalid, such as a malformed
    environment variable or a field type setting that is not a list.

    Args:
        variable_name: The name of the configuration variable that caused the error
    """

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name
        message = f"Configuration variable '{variable_name}' is invalid"
        super().__init__(message)
