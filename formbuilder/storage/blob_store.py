"""Key-value blob stores used to persist form layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re
from typing import Protocol


class BlobStoreError(RuntimeError):
    """Raised when a blob cannot be read from or written to its store."""


class BlobStore(Protocol):
    def get(self, key: str) -> str | bytes | None: ...

    def set(self, key: str, value: str) -> None: ...


@dataclass(slots=True)
class MemoryBlobStore:
    blobs: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self.blobs[key] = value


class FileBlobStore:
    """Stores each key as ``<key>.json`` inside ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def get(self, key: str) -> bytes | None:
        # Undecoded; the codec reports bad encodings as corrupt.
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as exc:
            raise BlobStoreError(f"Failed to read blob: {path}") from exc

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(value, encoding="utf-8")
        except OSError as exc:
            raise BlobStoreError(f"Failed to write blob: {path}") from exc

    def _path_for(self, key: str) -> Path:
        safe_key = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        if not safe_key.strip("."):
            raise ValueError(f"Invalid blob key: {key!r}")
        return self.directory / f"{safe_key}.json"
