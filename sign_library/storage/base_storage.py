"""Base object storage interface.

The sign library keeps its icons in an object store bucket. Pipelines only
talk to this interface, so the same code runs against Supabase Storage or a
local directory.

Implementations:
    - SupabaseStorage: Supabase Storage bucket (production)
    - LocalStorage: Files on disk (dry runs, tests)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class StorageError(Exception):
    """Raised when the object store rejects or cannot complete a request."""


class BaseStorage(ABC):
    """Abstract base class for object stores."""

    @abstractmethod
    def upload(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        upsert: bool = False
    ) -> str:
        """
        Store bytes under a path.

        Args:
            path: Object path inside the bucket (e.g. "library/R001.png")
            data: File content
            content_type: MIME type stored with the object
            upsert: Overwrite an existing object instead of failing

        Returns:
            Public URL of the stored object

        Raises:
            StorageError: If the object could not be stored
        """
        pass

    @abstractmethod
    def list(self, prefix: str = "", limit: int = 1000) -> List[Dict[str, Any]]:
        """
        List objects directly under a prefix, sorted by name.

        Returns:
            List of dicts with at least a "name" key (name relative to prefix)
        """
        pass

    @abstractmethod
    def get_public_url(self, path: str) -> str:
        """Public URL for a path. Pure mapping, no network call."""
        pass
