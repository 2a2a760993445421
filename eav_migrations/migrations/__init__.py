"""Entity migration creation from stubs."""

from eav_migrations.migrations.creator import EntityMigrationCreator
from eav_migrations.migrations.stub_populator import (
    expand_attribute_stub,
    get_class_name,
    populate_stub,
    studly,
)

__all__ = [
    "EntityMigrationCreator",
    "expand_attribute_stub",
    "get_class_name",
    "populate_stub",
    "studly",
]
