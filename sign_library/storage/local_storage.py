"""Directory-backed object store for dry runs and tests."""

import os
from typing import Any, Dict, List

from .base_storage import BaseStorage, StorageError


class LocalStorage(BaseStorage):
    """Store objects as files below a root directory."""

    def __init__(self, root_dir: str, public_base_url: str = ""):
        """
        Args:
            root_dir: Directory playing the role of the bucket
            public_base_url: Prefix for public URLs (default: file:// URLs)
        """
        self.root_dir = os.path.abspath(root_dir)
        self.public_base_url = public_base_url.rstrip("/")
        os.makedirs(self.root_dir, exist_ok=True)

    def _full_path(self, path: str) -> str:
        full_path = os.path.abspath(os.path.join(self.root_dir, path.lstrip("/")))
        if os.path.commonpath([full_path, self.root_dir]) != self.root_dir:
            raise StorageError(f"Path escapes storage root: {path}")
        return full_path

    def upload(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        upsert: bool = False
    ) -> str:
        full_path = self._full_path(path)

        if os.path.exists(full_path) and not upsert:
            raise StorageError(f"The resource already exists: {path}")

        try:
            os.makedirs(os.path.dirname(full_path), exist_ok=True)
            with open(full_path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise StorageError(f"Upload of {path} failed: {e}") from e

        return self.get_public_url(path)

    def list(self, prefix: str = "", limit: int = 1000) -> List[Dict[str, Any]]:
        directory = self._full_path(prefix)
        if not os.path.isdir(directory):
            return []

        entries = []
        for name in sorted(os.listdir(directory)):
            full_path = os.path.join(directory, name)
            if not os.path.isfile(full_path):
                continue
            entries.append({"name": name, "size": os.path.getsize(full_path)})

        return entries[:limit]

    def get_public_url(self, path: str) -> str:
        path = path.lstrip("/")
        if self.public_base_url:
            return f"{self.public_base_url}/{path}"
        return "file://" + self._full_path(path)

    def read(self, path: str) -> bytes:
        with open(self._full_path(path), 'rb') as f:
            return f.read()
