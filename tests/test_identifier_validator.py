from pathlib import Path

from eav_migrations.core.schemas import MigrationRequest, ValidationResult
from eav_migrations.validation.identifier_validator import IdentifierValidator


def make_request(name="product", base_class="EntityMigration"):
    return MigrationRequest(name=name, path=Path("migrations"), base_class=base_class)


def test_valid_request():
    validator = IdentifierValidator()
    result: ValidationResult = validator.validate_request(
        make_request(), ["string", "int", "DateTime"]
    )
    assert result.is_valid
    assert not result.errors
    assert not result.warnings


def test_invalid_entity_name():
    validator = IdentifierValidator()
    result = validator.validate_request(make_request(name="order-item"), ["string"])
    assert not result.is_valid
    assert "Invalid entity name 'order-item'" in result.errors[0]


def test_invalid_base_class():
    validator = IdentifierValidator()
    result = validator.validate_request(
        make_request(base_class="eav.EntityMigration"), ["string"]
    )
    assert not result.is_valid
    assert "Invalid base class" in result.errors[0]


def test_collects_all_errors():
    validator = IdentifierValidator()
    result = validator.validate_request(
        make_request(name="bad name", base_class="def"), ["string", "9lives", ""]
    )
    assert len(result.errors) == 4


def test_empty_field_types_is_a_warning():
    validator = IdentifierValidator()
    result = validator.validate_request(make_request(), [])
    assert result.is_valid
    assert "No attribute field types configured" in result.warnings[0]


def test_duplicate_field_types_is_a_warning():
    validator = IdentifierValidator()
    result = validator.validate_request(make_request(), ["string", "String"])
    assert result.is_valid
    assert result.warnings == [
        "Duplicate field type 'string' - its block is generated twice"
    ]
