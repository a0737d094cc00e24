"""Browse the sign image library and upload single icons."""

import re
import secrets
import time
from dataclasses import dataclass
from typing import Dict, List, Optional

from .analysis.color_classifier import COLOR_CODES
from .pipeline.models import SourceFile
from .pipeline.naming import file_extension
from .storage.base_storage import BaseStorage


IMAGE_NAME_PATTERN = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)
SORT_ORDERS = ("name-asc", "name-desc")


class InvalidUploadError(ValueError):
    """Raised when a single upload is rejected before reaching storage."""


@dataclass
class LibraryImage:
    """An image stored in the library folder."""
    name: str
    path: str
    url: str

    @property
    def color_code(self) -> Optional[str]:
        """Color code from the name prefix (None for non-library names)."""
        prefix = self.name[:1]
        return prefix if prefix in COLOR_CODES else None


class ImageLibrary:
    """
    Read side of the icon library plus the single-image upload.

    Bulk uploads land in ``<prefix>/`` with color-coded names; the picker
    filters on that first letter.
    """

    def __init__(
        self,
        storage: BaseStorage,
        library_prefix: str = "library",
        max_upload_bytes: int = 5 * 1024 * 1024
    ):
        self.storage = storage
        self.library_prefix = library_prefix.strip("/")
        self.max_upload_bytes = max_upload_bytes

    def list_images(
        self,
        color: Optional[str] = None,
        search: Optional[str] = None,
        sort: str = "name-asc",
        limit: int = 1000
    ) -> List[LibraryImage]:
        """
        List library images.

        Args:
            color: Color code to filter on ("ALL" or None = every color)
            search: Case-insensitive substring of the file name
            sort: "name-asc" or "name-desc"
            limit: Max objects requested from storage

        Returns:
            Matching images with public URLs
        """
        if sort not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {sort}")

        images = []
        for entry in self.storage.list(self.library_prefix, limit=limit):
            name = entry.get("name", "")
            if not IMAGE_NAME_PATTERN.search(name):
                continue

            if color and color != "ALL" and not name.startswith(color):
                continue

            if search and search.lower() not in name.lower():
                continue

            path = f"{self.library_prefix}/{name}" if self.library_prefix else name
            images.append(LibraryImage(
                name=name,
                path=path,
                url=self.storage.get_public_url(path)
            ))

        images.sort(key=lambda image: image.name, reverse=(sort == "name-desc"))
        return images

    def color_counts(self) -> Dict[str, int]:
        """Number of library images per color code."""
        counts = {code: 0 for code in COLOR_CODES}
        for image in self.list_images():
            if image.color_code:
                counts[image.color_code] += 1
        return counts

    def upload_single(self, file: SourceFile) -> str:
        """
        Upload one icon under a unique generated name.

        Args:
            file: Image to upload

        Returns:
            Public URL of the uploaded icon

        Raises:
            InvalidUploadError: Not an image, or larger than the size limit
            StorageError: Storage rejected the upload
        """
        if not file.is_image:
            raise InvalidUploadError("Please upload an image file")

        if file.size > self.max_upload_bytes:
            limit_mb = self.max_upload_bytes / (1024 * 1024)
            raise InvalidUploadError(f"Image size should be less than {limit_mb:g}MB")

        file_name = self.unique_name(file.name)
        return self.storage.upload(file_name, file.content, file.content_type)

    @staticmethod
    def unique_name(original_name: str) -> str:
        """``<epoch ms>-<random>.<ext>`` for single uploads."""
        millis = int(time.time() * 1000)
        return f"{millis}-{secrets.token_hex(3)}.{file_extension(original_name)}"
