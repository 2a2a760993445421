"""Shared test fixtures and configuration."""

import shutil
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

from eav_migrations.io.filesystem import Filesystem
from eav_migrations.migrations.creator import EntityMigrationCreator

PACKAGE_STUB_DIR = (
    Path(__file__).resolve().parent.parent / "eav_migrations" / "migrations" / "stubs"
)
FIXED_INSTANT = datetime(2024, 1, 1, 12, 0, 0)


class FakeConfigRepository:
    """In-memory stand-in for SettingsRepository."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = values or {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


class StubDirCreator(EntityMigrationCreator):
    """Creator that reads its stubs from a custom directory."""

    def __init__(self, stub_dir: Path, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.stub_dir = stub_dir

    def get_stub_path(self) -> Path:
        return self.stub_dir


@pytest.fixture
def fixed_clock():
    """Clock that always returns 2024-01-01 12:00:00."""
    return lambda: FIXED_INSTANT


@pytest.fixture
def config_repository():
    """Config repository with two attribute field types."""
    return FakeConfigRepository({"eav.field_types": ["string", "int"]})


@pytest.fixture
def migrations_dir(tmp_path):
    """Empty directory the migrations are written to."""
    path = tmp_path / "migrations"
    path.mkdir()
    return path


@pytest.fixture
def creator(config_repository, fixed_clock):
    """Creator using the packaged stubs and the real filesystem."""
    return EntityMigrationCreator(Filesystem(), config_repository, clock=fixed_clock)


@pytest.fixture
def stub_dir_factory(tmp_path):
    """Copy the packaged stubs to a temporary directory, leaving some out."""

    def make(exclude: tuple[str, ...] = ()) -> Path:
        stub_dir = tmp_path / "stubs"
        stub_dir.mkdir(exist_ok=True)
        for stub in PACKAGE_STUB_DIR.glob("*.stub"):
            if stub.name not in exclude:
                shutil.copy(stub, stub_dir / stub.name)
        return stub_dir

    return make
