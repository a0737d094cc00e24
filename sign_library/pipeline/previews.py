"""Revocable in-memory previews for staged images."""

import threading
import uuid
from typing import Dict, Iterable, Optional


class PreviewHandle:
    """
    Reference to a previewable copy of a staged file.

    The handle keeps the content alive in its registry until release()
    is called. Releasing more than once is a no-op.
    """

    def __init__(self, registry: "PreviewRegistry", key: str, file_name: str):
        self._registry = registry
        self.key = key
        self.file_name = file_name
        self._released = False

    @property
    def url(self) -> str:
        return f"preview://{self.key}"

    @property
    def released(self) -> bool:
        return self._released

    def read(self) -> bytes:
        """Preview content; fails once the handle was released."""
        if self._released:
            raise ValueError(f"Preview for {self.file_name} was already released")
        return self._registry.get(self.key)

    def release(self):
        if self._released:
            return
        self._released = True
        self._registry.revoke(self.key)

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"<PreviewHandle {self.file_name} {state}>"


class PreviewRegistry:
    """Owns the content behind every live preview handle."""

    def __init__(self):
        self._entries: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def create(self, file_name: str, content: bytes) -> PreviewHandle:
        key = uuid.uuid4().hex
        with self._lock:
            self._entries[key] = content
        return PreviewHandle(self, key, file_name)

    def get(self, key: str) -> bytes:
        with self._lock:
            return self._entries[key]

    def revoke(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._entries.pop(key, None)

    @property
    def active_count(self) -> int:
        with self._lock:
            return len(self._entries)


def release_all(handles_or_assets: Iterable):
    """
    Release every preview in a batch.

    Accepts preview handles or anything with a ``preview`` attribute
    (staged assets). Safe to call any number of times.
    """
    for item in handles_or_assets:
        handle = getattr(item, "preview", item)
        handle.release()
