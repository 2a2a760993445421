"""Placeholder substitution for migration stubs."""

from __future__ import annotations

import re

from eav_migrations.core.constants import (
    BASE_CLASS_PLACEHOLDER,
    CLASS_PLACEHOLDER,
    DOWN_MIGRATION_PLACEHOLDER,
    FIELD_TYPE_PLACEHOLDER,
    TABLE_PLACEHOLDER,
    UP_MIGRATION_PLACEHOLDER,
)
from eav_migrations.logger import logger

WORD_SEPARATORS = re.compile(r"[-_\s]+")


def studly(value: str) -> str:
    """Convert a value to StudlyCase.

    ``product_value`` and ``product-value`` both become ``ProductValue``.
    Only the first letter of each word is changed.
    """
    words = WORD_SEPARATORS.split(value)
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def get_class_name(name: str, suffix: str = "") -> str:
    """Get the migration class name for an entity.

    Args:
        name: Entity name
        suffix: Disambiguator placed between ``Entity`` and ``Table``

    Returns:
        Class name in format ``Create{Studly}Entity{suffix}Table``
    """
    return f"Create{studly(name)}Entity{suffix}Table"


def expand_attribute_stub(
    fragment: str, marker: str, field_types: list[str], stub: str
) -> str:
    """Replace a marker in a stub with one fragment copy per field type.

    Args:
        fragment: Stub fragment containing the field type placeholder
        marker: Placeholder in ``stub`` the expansion replaces
        field_types: Field types in generation order, duplicates included
        stub: Stub receiving the expansion

    Returns:
        The stub with ``marker`` replaced
    """
    blocks = "".join(
        fragment.replace(FIELD_TYPE_PLACEHOLDER, field_type.lower())
        for field_type in field_types
    )
    logger.debug(
        "Expanded %s with %d attribute block(s)", marker, len(field_types)
    )
    return stub.replace(marker, blocks)


def populate_stub(
    name: str,
    stub: str,
    base_class: str,
    up_stub: str,
    down_stub: str,
    field_types: list[str],
    suffix: str = "",
) -> str:
    """Populate the place-holders in a migration stub.

    Attribute blocks are expanded first so that the name placeholders inside
    the repeated fragments are substituted as well.

    Args:
        name: Entity name, used verbatim as the table name
        stub: Main or attribute migration stub
        base_class: Class the generated migration extends
        up_stub: Per field type fragment for the up migration
        down_stub: Per field type fragment for the down migration
        field_types: Configured attribute field types
        suffix: Class name disambiguator

    Returns:
        Generated migration source
    """
    stub = expand_attribute_stub(up_stub, UP_MIGRATION_PLACEHOLDER, field_types, stub)
    stub = expand_attribute_stub(
        down_stub, DOWN_MIGRATION_PLACEHOLDER, field_types, stub
    )

    stub = stub.replace(CLASS_PLACEHOLDER, get_class_name(name, suffix))
    stub = stub.replace(TABLE_PLACEHOLDER, name)
    stub = stub.replace(BASE_CLASS_PLACEHOLDER, base_class)

    return stub
