"""
Storage Backends - key/value persistence for vector store documents

Every backend implements the same three operations over string values:

    get(key)        -> str or None when absent
    put(key, value) -> None, raises StorageError on failure
    delete(key)     -> None, deleting an absent key is not an error

Implementations:
- FileBackend:   one JSON file per key below a root directory
- HttpBackend:   remote key/value service (GET/PUT/DELETE on {base_url}/{key})
- MemoryBackend: process-local dict, for tests and throwaway sessions
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from common.exceptions import StorageError

from .http_client import send


class StorageBackend(ABC):
    """Contract for the persistence layer behind a VectorStore."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key does not exist."""

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove *key*. Idempotent."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Identifies where keys live; two backends with the same location share keys."""

    @property
    def name(self) -> str:
        return type(self).__name__


class FileBackend(StorageBackend):
    def __init__(self, root_dir: str = "."):
        self.root_dir = Path(root_dir).resolve()

    @property
    def location(self) -> str:
        return f"file:{self.root_dir}"

    @property
    def name(self) -> str:
        return "file"

    def path_for(self, key: str) -> Path:
        return self.root_dir / key

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(key, "get", details=str(exc)) from exc

    def put(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as exc:
            raise StorageError(key, "put", details=str(exc)) from exc

    def delete(self, key: str) -> None:
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(key, "delete", details=str(exc)) from exc


class HttpBackend(StorageBackend):
    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def location(self) -> str:
        return f"http:{self.base_url}"

    @property
    def name(self) -> str:
        return "http"

    def _url(self, key: str) -> str:
        return f"{self.base_url}/{quote(key, safe='')}"

    def get(self, key: str) -> Optional[str]:
        status, body = self._send(key, "GET")
        if status == 404:
            return None
        if not 200 <= status < 300:
            raise StorageError(key, "get", status=status, details=body or None)
        return body

    def put(self, key: str, value: str) -> None:
        status, body = self._send(key, "PUT", value)
        if not 200 <= status < 300:
            raise StorageError(key, "put", status=status, details=body or None)

    def delete(self, key: str) -> None:
        status, body = self._send(key, "DELETE")
        if status != 404 and not 200 <= status < 300:
            raise StorageError(key, "delete", status=status, details=body or None)

    def _send(self, key: str, method: str, body: Optional[str] = None) -> tuple[int, str]:
        try:
            return send(self._url(key), method=method, body=body, timeout=self.timeout)
        except ConnectionError as exc:
            raise StorageError(key, method.lower(), details=str(exc)) from exc


class MemoryBackend(StorageBackend):
    def __init__(self):
        self._data: dict[str, str] = {}

    @property
    def location(self) -> str:
        return f"memory:{id(self)}"

    @property
    def name(self) -> str:
        return "memory"

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


def create_backend(
    kind: str = "file",
    data_dir: str = ".",
    url: Optional[str] = None,
) -> StorageBackend:
    """Build the backend named by *kind* (file, http or memory)."""
    if kind == "file":
        return FileBackend(data_dir)
    if kind == "http":
        if not url:
            raise ValueError("HTTP storage backend requires a base URL")
        return HttpBackend(url)
    if kind == "memory":
        return MemoryBackend()
    raise ValueError(f"Unsupported storage backend: {kind}")
