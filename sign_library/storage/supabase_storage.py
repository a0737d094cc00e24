"""
Supabase Storage backend for the sign icon library.
Uploads, lists and resolves public URLs in one storage bucket.
"""

import os
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from .base_storage import BaseStorage, StorageError


class SupabaseStorage(BaseStorage):
    """
    Object store on a Supabase Storage bucket.

    - Credentials come from arguments or SUPABASE_URL / SUPABASE_ANON_KEY
    - Every failed request is raised as StorageError
    """

    def __init__(
        self,
        bucket: str = "sign-icons",
        url: Optional[str] = None,
        key: Optional[str] = None,
        client: Optional[Client] = None
    ):
        """
        Initialize Supabase storage client.

        Args:
            bucket: Storage bucket holding the sign icons
            url: Project URL (default: SUPABASE_URL)
            key: API key (default: SUPABASE_ANON_KEY)
            client: Ready-made client (skips credential lookup)
        """
        self.bucket = bucket

        if client is not None:
            self.client = client
            return

        supabase_url = url or os.getenv("SUPABASE_URL")
        supabase_key = key or os.getenv("SUPABASE_ANON_KEY")

        if not supabase_url or not supabase_key:
            raise ValueError("Supabase credentials not configured (SUPABASE_URL, SUPABASE_ANON_KEY)")

        self.client = create_client(supabase_url, supabase_key)
        print(f"✓ Supabase storage initialized (bucket: {bucket})")

    def _bucket(self):
        return self.client.storage.from_(self.bucket)

    def upload(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        upsert: bool = False
    ) -> str:
        try:
            self._bucket().upload(
                path=path,
                file=data,
                file_options={
                    "content-type": content_type,
                    "upsert": "true" if upsert else "false"
                }
            )
        except Exception as e:
            raise StorageError(f"Upload of {path} failed: {e}") from e

        return self.get_public_url(path)

    def list(self, prefix: str = "", limit: int = 1000) -> List[Dict[str, Any]]:
        try:
            entries = self._bucket().list(
                prefix,
                {
                    "limit": limit,
                    "offset": 0,
                    "sortBy": {"column": "name", "order": "asc"}
                }
            )
        except Exception as e:
            raise StorageError(f"Listing {prefix or '/'} failed: {e}") from e

        return list(entries or [])

    def get_public_url(self, path: str) -> str:
        return self._bucket().get_public_url(path)
