from pathlib import Path
from typing import Any, Protocol


class IFilesystem(Protocol):
    def get(self, path: str | Path) -> str: ...

    def put(self, path: str | Path, content: str) -> int: ...

    def ensure_directory(self, path: str | Path) -> None: ...


class IConfigRepository(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...
