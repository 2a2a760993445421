"""Validation of the identifiers substituted into migration stubs."""

from __future__ import annotations

import keyword
import re

from eav_migrations.core.schemas import MigrationRequest, ValidationResult

TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
FIELD_TYPE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


class IdentifierValidator:
    """Validates entity names, base classes and field types.

    Values are spliced into generated Python source without escaping, so
    anything that is not a plain identifier is rejected rather than rewritten.
    """

    def validate_request(
        self, request: MigrationRequest, field_types: list[str]
    ) -> ValidationResult:
        """Validate a migration request together with the configured field types.

        Args:
            request: Entity name, target path and base class of the migration
            field_types: Attribute field types the stubs are expanded with

        Returns:
            ValidationResult with validation status and any errors/warnings
        """
        result = ValidationResult(is_valid=True)

        self._validate_table_name(request.name, result)
        self._validate_base_class(request.base_class, result)
        self._validate_field_types(field_types, result)

        return result

    def _validate_table_name(self, name: str, result: ValidationResult) -> None:
        if not TABLE_NAME_PATTERN.match(name):
            result.add_error(
                f"Invalid entity name '{name}' - use letters, digits and underscores"
            )

    def _validate_base_class(self, base_class: str, result: ValidationResult) -> None:
        if not base_class.isidentifier() or keyword.iskeyword(base_class):
            result.add_error(
                f"Invalid base class '{base_class}' - must be a Python identifier"
            )

    def _validate_field_types(
        self, field_types: list[str], result: ValidationResult
    ) -> None:
        if not field_types:
            result.add_warning(
                "No attribute field types configured - attribute blocks will be empty"
            )
            return

        seen: set[str] = set()
        for index, field_type in enumerate(field_types):
            if not isinstance(field_type, str) or not FIELD_TYPE_PATTERN.match(
                field_type
            ):
                result.add_error(f"Invalid field type at [{index}]: {field_type!r}")
                continue

            normalized = field_type.lower()
            if normalized in seen:
                result.add_warning(
                    f"Duplicate field type '{normalized}' - its block is generated twice"
                )
            seen.add(normalized)
