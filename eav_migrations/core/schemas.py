"""Pydantic models for migration requests and results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class MigrationRequest(BaseModel):
    """Arguments of a single entity migration generation."""

    name: str = Field(..., min_length=1, description="Entity (table) name")
    path: Path = Field(..., description="Directory the migrations are written to")
    base_class: str = Field(
        ..., min_length=1, description="Class the generated migrations extend"
    )


class GeneratedMigration(BaseModel):
    """A migration file written by the creator."""

    path: Path = Field(..., description="Location of the written file")
    class_name: str = Field(..., description="Generated migration class name")
    table: str = Field(..., description="Table the migration creates")

    def __str__(self) -> str:
        """Return the file name of the migration."""
        return self.path.name


class ValidationResult(BaseModel):
    """Result of identifier validation with type safety."""

    is_valid: bool = Field(..., description="Whether all identifiers are valid")
    errors: list[str] = Field(
        default_factory=list, description="Validation error messages"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Validation warning messages"
    )

    def add_error(self, message: str) -> None:
        """Add an error message to the validation result."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message to the validation result."""
        self.warnings.append(message)
