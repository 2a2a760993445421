"""Placeholder tokens used by the migration stubs."""

# Name placeholders
CLASS_PLACEHOLDER = "DummyClass"
TABLE_PLACEHOLDER = "DummyTable"
BASE_CLASS_PLACEHOLDER = "DummyBaseClass"

# Attribute block placeholders
UP_MIGRATION_PLACEHOLDER = "UPMIGRATION"
DOWN_MIGRATION_PLACEHOLDER = "DOWNMIGRATION"
FIELD_TYPE_PLACEHOLDER = "FIELDTYPE"

# Configuration keys
FIELD_TYPES_KEY = "eav.field_types"

# File name parts
DATE_PREFIX_FORMAT = "%Y_%m_%d_%H%M%S"
MAIN_CLASS_SUFFIX = "Main"
