"""Creation of EAV entity migrations from stubs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from eav_migrations.core.config import Config, config
from eav_migrations.core.constants import (
    DATE_PREFIX_FORMAT,
    FIELD_TYPES_KEY,
    MAIN_CLASS_SUFFIX,
)
from eav_migrations.core.exceptions import ConfigurationError, ValidationError
from eav_migrations.core.interfaces import IConfigRepository, IFilesystem
from eav_migrations.core.schemas import GeneratedMigration, MigrationRequest
from eav_migrations.logger import logger
from eav_migrations.migrations.stub_populator import get_class_name, populate_stub
from eav_migrations.validation.identifier_validator import IdentifierValidator

PostCreateHook = Callable[[], object]


class EntityMigrationCreator:
    """Creates the main and attribute migrations of an EAV entity.

    Both migrations are stamped from a single captured instant; the attribute
    migration is placed ``attribute_offset_seconds`` after the main one so the
    two file names differ and sort in creation order.
    """

    def __init__(
        self,
        files: IFilesystem,
        config_repository: IConfigRepository,
        clock: Callable[[], datetime] = datetime.now,
        settings: Config = config,
    ) -> None:
        """Initialize the migration creator.

        Args:
            files: Filesystem used to read stubs and write migrations
            config_repository: Source of the attribute field types
            clock: Returns the instant migrations are stamped with
            settings: Stub names, file extension and timestamp offset
        """
        self.files = files
        self.config = config_repository
        self.clock = clock
        self.settings = settings
        self.validator = IdentifierValidator()
        self.generated: list[GeneratedMigration] = []
        self._post_create: list[PostCreateHook] = []

    def create(
        self,
        name: str,
        path: str | Path,
        base_class: str,
        hooks: Iterable[PostCreateHook] | None = None,
    ) -> Path:
        """Create the main and attribute migrations for an entity.

        Args:
            name: Entity name, used verbatim as the table name
            path: Directory the migrations are written to
            base_class: Class the generated migrations extend
            hooks: Callbacks run once after both migrations are written,
                after the hooks registered with after_create

        Returns:
            Path of the attribute migration

        Raises:
            ValidationError: If an identifier cannot be used in generated code
            ConfigurationError: If the configured field types are not a list
            StubNotFoundError: If a stub is missing
            MigrationWriteError: If a migration cannot be written
        """
        request = self._build_request(name, path, base_class)
        field_types = self._get_field_types()
        self._validate(request, field_types)

        instant = self.clock()
        generated: list[GeneratedMigration] = []

        main_path = self.get_main_path(request.name, request.path, instant)
        stub = self.get_main_stub()
        self.files.put(
            main_path,
            self._populate(request, stub, field_types, MAIN_CLASS_SUFFIX),
        )
        generated.append(self._record(request, main_path, MAIN_CLASS_SUFFIX))
        logger.info("Main migration written to: %s", main_path)

        offset = timedelta(seconds=self.settings.attribute_offset_seconds)
        attribute_path = self.get_path(request.name, request.path, instant + offset)
        stub = self.get_stub()
        self.files.put(attribute_path, self._populate(request, stub, field_types))
        generated.append(self._record(request, attribute_path))
        logger.info("Attribute migration written to: %s", attribute_path)

        self.generated = generated
        self.fire_post_create_hooks(hooks)

        return attribute_path

    def after_create(self, callback: PostCreateHook) -> None:
        """Register a post migration create hook."""
        self._post_create.append(callback)

    def fire_post_create_hooks(
        self, hooks: Iterable[PostCreateHook] | None = None
    ) -> None:
        """Run the registered hooks, then the per-call hooks, in order."""
        for callback in [*self._post_create, *(hooks or [])]:
            callback()

    def get_stub(self) -> str:
        return self.files.get(
            self.get_stub_path() / self.settings.file_names.attribute_stub
        )

    def get_main_stub(self) -> str:
        return self.files.get(self.get_stub_path() / self.settings.file_names.main_stub)

    def get_attribute_up_stub(self) -> str:
        return self.files.get(
            self.get_stub_path() / self.settings.file_names.attribute_up_stub
        )

    def get_attribute_down_stub(self) -> str:
        return self.files.get(
            self.get_stub_path() / self.settings.file_names.attribute_down_stub
        )

    def get_path(self, name: str, path: str | Path, instant: datetime) -> Path:
        """Get the full path of the attribute migration."""
        return Path(path) / (
            f"{self.get_date_prefix(instant)}_create_{name}_entity_table"
            f"{self.settings.file_extension}"
        )

    def get_main_path(self, name: str, path: str | Path, instant: datetime) -> Path:
        """Get the full path of the main migration."""
        return Path(path) / (
            f"{self.get_date_prefix(instant)}_create_{name}_entity_main_table"
            f"{self.settings.file_extension}"
        )

    @staticmethod
    def get_date_prefix(instant: datetime) -> str:
        return instant.strftime(DATE_PREFIX_FORMAT)

    def get_stub_path(self) -> Path:
        """Get the path to the stubs."""
        return Path(__file__).parent / "stubs"

    def get_filesystem(self) -> IFilesystem:
        return self.files

    def _populate(
        self,
        request: MigrationRequest,
        stub: str,
        field_types: list[str],
        suffix: str = "",
    ) -> str:
        return populate_stub(
            request.name,
            stub,
            request.base_class,
            self.get_attribute_up_stub(),
            self.get_attribute_down_stub(),
            field_types,
            suffix,
        )

    @staticmethod
    def _build_request(
        name: str, path: str | Path, base_class: str
    ) -> MigrationRequest:
        try:
            return MigrationRequest(name=name, path=Path(path), base_class=base_class)
        except PydanticValidationError as e:
            errors = [
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ValidationError(errors) from e

    def _get_field_types(self) -> list[str]:
        field_types = self.config.get(FIELD_TYPES_KEY, [])
        if not isinstance(field_types, (list, tuple)):
            raise ConfigurationError(variable_name="EAV__FIELD_TYPES")
        return list(field_types)

    def _validate(self, request: MigrationRequest, field_types: list[str]) -> None:
        result = self.validator.validate_request(request, field_types)
        for warning in result.warnings:
            logger.warning(warning)
        if not result.is_valid:
            raise ValidationError(result.errors)

    @staticmethod
    def _record(
        request: MigrationRequest, path: Path, suffix: str = ""
    ) -> GeneratedMigration:
        return GeneratedMigration(
            path=path,
            class_name=get_class_name(request.name, suffix),
            table=request.name,
        )
