"""Tests for the Filesystem class."""

from pathlib import Path
from unittest.mock import patch

import pytest

from eav_migrations.core.exceptions import MigrationWriteError, StubNotFoundError
from eav_migrations.io.filesystem import Filesystem


@pytest.fixture
def files():
    return Filesystem()


class TestFilesystem:
    """Test suite for Filesystem class."""

    def test_put_and_get(self, files, tmp_path):
        path = tmp_path / "migration.py"

        written = files.put(path, "class Migration:\n    pass\n")

        assert written == len("class Migration:\n    pass\n")
        assert files.get(path) == "class Migration:\n    pass\n"
        assert files.exists(path)

    def test_get_missing_file(self, files, tmp_path):
        missing = tmp_path / "create.entity.stub"

        with pytest.raises(StubNotFoundError) as exc_info:
            files.get(missing)

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value, FileNotFoundError)

    def test_get_directory_is_not_a_stub(self, files, tmp_path):
        with pytest.raises(StubNotFoundError):
            files.get(tmp_path)

    def test_put_into_missing_directory(self, files, tmp_path):
        path = tmp_path / "missing" / "migration.py"

        with pytest.raises(MigrationWriteError) as exc_info:
            files.put(path, "content")

        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert not path.exists()

    def test_put_overwrites(self, files, tmp_path):
        path = tmp_path / "migration.py"
        files.put(path, "old")
        files.put(path, "new")

        assert path.read_text() == "new"

    def test_ensure_directory(self, files, tmp_path):
        path = tmp_path / "database" / "migrations"

        files.ensure_directory(path)
        files.ensure_directory(path)

        assert path.is_dir()

    def test_ensure_directory_permission_error(self, files):
        with patch("pathlib.Path.mkdir", side_effect=PermissionError("Access denied")):
            with pytest.raises(
                PermissionError, match="Failed to create migrations directory"
            ):
                files.ensure_directory(Path("/root/migrations"))
