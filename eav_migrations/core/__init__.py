"""Core data models and shared types."""

from eav_migrations.core.config import SettingsRepository, config
from eav_migrations.core.exceptions import (
    ConfigurationError,
    MigrationGenerationError,
    MigrationWriteError,
    StubNotFoundError,
    ValidationError,
)
from eav_migrations.core.schemas import (
    GeneratedMigration,
    MigrationRequest,
    ValidationResult,
)

__all__ = [
    "GeneratedMigration",
    "MigrationRequest",
    "ValidationResult",
    "MigrationGenerationError",
    "StubNotFoundError",
    "MigrationWriteError",
    "ValidationError",
    "ConfigurationError",
    "SettingsRepository",
    "config",
]
