"""
EAV Entity Migration Generator

A Python package for scaffolding Entity-Attribute-Value migrations: one main
entity table migration and one attribute value table migration per entity,
expanded once for every configured attribute field type.
"""

from eav_migrations.migrations.creator import EntityMigrationCreator

__all__ = ["EntityMigrationCreator"]
