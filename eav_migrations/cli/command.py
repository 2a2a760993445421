"""Command that creates the migrations of a new EAV entity."""

from __future__ import annotations

import sys
from pathlib import Path

from eav_migrations.core.config import SettingsRepository, config
from eav_migrations.core.exceptions import (
    ConfigurationError,
    MigrationGenerationError,
    StubNotFoundError,
    ValidationError,
)
from eav_migrations.io.filesystem import Filesystem
from eav_migrations.logger import logger, setup_logger
from eav_migrations.migrations.creator import EntityMigrationCreator


class MigrationCommand:
    """Creates the main and attribute migrations for one entity.

    Wraps an EntityMigrationCreator, ensures the migrations directory exists
    and reports each created file once generation has finished.
    """

    def __init__(
        self,
        name: str,
        path: Path | None = None,
        base_class: str | None = None,
        creator: EntityMigrationCreator | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            name: Entity name
            path: Directory for the migrations, defaults to the configured one
            base_class: Base class of the migrations, defaults to the configured one
            creator: Migration creator, built from the configuration if omitted
        """
        self.name = name
        self.path = Path(path) if path is not None else config.migrations_dir
        self.base_class = base_class or config.base_class
        self.creator = creator or EntityMigrationCreator(
            Filesystem(), SettingsRepository(config)
        )
        self.creator.after_create(self._report_created)

    def run(self) -> None:
        """Run the command, exiting the process on failure.

        Raises:
            SystemExit: If any critical error occurs during generation
        """
        try:
            setup_logger()
            logger.info("Creating migrations for entity '%s'...", self.name)
            self.execute()
        except ValidationError as e:
            logger.error("Invalid migration arguments: %s", e)
            sys.exit(config.exit_codes.error_validation_failed)
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(config.exit_codes.error_configuration)
        except StubNotFoundError as e:
            logger.error("Missing migration stub: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_stub_not_found)
        except MigrationGenerationError as e:
            logger.error("Migration generation error: %s", e, exc_info=True)
            sys.exit(config.exit_codes.error_file_system)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(config.exit_codes.error_file_system)

    def execute(self) -> Path:
        """Create the migrations, raising instead of exiting.

        Returns:
            Path of the attribute migration

        Raises:
            MigrationGenerationError: If generation fails
            PermissionError: If the migrations directory cannot be created
        """
        self.creator.get_filesystem().ensure_directory(self.path)
        return self.creator.create(self.name, self.path, self.base_class)

    def _report_created(self) -> None:
        for migration in self.creator.generated:
            logger.info("Created Migration: %s", migration)
