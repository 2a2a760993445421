"""Configuration for the EAV migration generator."""

from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError


class FileNamesConfig(BaseModel):
    """Configuration for stub file names."""

    main_stub: str = "create.entity.main.stub"
    attribute_stub: str = "create.entity.stub"
    attribute_up_stub: str = "attribute.type.up.migration.stub"
    attribute_down_stub: str = "attribute.type.down.migration.stub"


class EavConfig(BaseModel):
    """Configuration for the EAV attribute storage."""

    field_types: list[str] = Field(
        default_factory=lambda: [
            "string",
            "integer",
            "decimal",
            "boolean",
            "datetime",
            "text",
        ],
        description="Attribute field types, one value table per entry",
    )


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_stub_not_found: int = 1
    error_validation_failed: int = 4
    error_file_system: int = 5
    error_configuration: int = 6


class Config(BaseSettings):
    """Main configuration class for the EAV migration generator."""

    migrations_dir: Path = Field(
        default=Path("migrations"), description="Directory for generated migrations"
    )
    base_class: str = Field(
        default="EntityMigration", description="Base class of generated migrations"
    )
    file_extension: str = Field(
        default=".py", description="Extension of generated migration files"
    )
    attribute_offset_seconds: int = Field(
        default=2,
        ge=1,
        description="Seconds between the main and attribute migration timestamps",
    )

    # Nested configurations
    eav: EavConfig = Field(default_factory=EavConfig)
    file_names: FileNamesConfig = Field(default_factory=FileNamesConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }

    def __init__(self, **data):
        """Initialize config, reporting invalid settings as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_path = "__".join(str(part) for part in error["loc"]) or "unknown"
            raise ConfigurationError(variable_name=field_path.upper()) from e


class SettingsRepository:
    """Dotted-key read access to a Config instance.

    Keys address nested settings, e.g. ``eav.field_types``. A key that does
    not resolve returns the supplied default.
    """

    def __init__(self, settings: Config) -> None:
        self.settings = settings

    def get(self, key: str, default: Any = None) -> Any:
        value: Any = self.settings
        for part in key.split("."):
            if isinstance(value, BaseModel) and part in type(value).model_fields:
                value = getattr(value, part)
            elif isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
