"""Persist a confirmed batch of staged assets to the image library."""

import asyncio
from typing import Callable, Optional, Sequence, Union

from ..storage.base_storage import BaseStorage
from .models import CommitResult, StagedAsset, UploadFailure, UploadRecord
from .previews import release_all


ProgressCallback = Callable[[int, int, Union[UploadRecord, UploadFailure]], None]


class CommitPipeline:
    """
    Upload staged assets one by one under ``<prefix>/<assigned name>``.

    - Uploads overwrite existing objects, so re-committing is safe
    - A failed item is recorded and the next item is still attempted
    - Earlier successes are never rolled back
    - No retries; callers retry from CommitResult.failed
    """

    def __init__(
        self,
        storage: BaseStorage,
        library_prefix: str = "library",
        enable_logging: bool = True
    ):
        self.storage = storage
        self.library_prefix = library_prefix.strip("/")
        self.enable_logging = enable_logging

    def storage_path(self, asset: StagedAsset) -> str:
        if not self.library_prefix:
            return asset.assigned_name
        return f"{self.library_prefix}/{asset.assigned_name}"

    async def commit(
        self,
        batch: Sequence[StagedAsset],
        on_progress: Optional[ProgressCallback] = None
    ) -> CommitResult:
        """
        Upload every staged asset in order.

        Args:
            batch: Staged assets, in staging order
            on_progress: Called with (index, total, record) after each item;
                errors it raises are reported and never stop the batch

        Returns:
            CommitResult listing successes and failures
        """
        result = CommitResult()
        total = len(batch)

        try:
            for index, asset in enumerate(batch, start=1):
                path = self.storage_path(asset)

                try:
                    public_url = await asyncio.to_thread(
                        self.storage.upload,
                        path,
                        asset.source.content,
                        asset.source.content_type,
                        True
                    )
                except Exception as e:
                    outcome = UploadFailure(
                        original_name=asset.original_name,
                        final_name=asset.assigned_name,
                        reason=str(e) or e.__class__.__name__
                    )
                    result.failed.append(outcome)
                    self._log(f"  ⚠ Error uploading {asset.original_name}: {outcome.reason}")
                else:
                    outcome = UploadRecord(
                        original_name=asset.original_name,
                        final_name=asset.assigned_name,
                        color_code=asset.color_code,
                        path=path,
                        public_url=public_url
                    )
                    result.succeeded.append(outcome)
                    self._log(f"  ✅ Uploaded {index}/{total}: {asset.assigned_name}")

                if on_progress:
                    try:
                        on_progress(index, total, outcome)
                    except Exception as e:
                        self._log(f"  ⚠ Progress callback failed: {e}")

        finally:
            release_all(batch)

        self._log(
            f"✓ Upload finished: {result.succeeded_count}/{result.attempted} succeeded, "
            f"{result.failed_count} failed"
        )
        return result

    def _log(self, message: str):
        if self.enable_logging:
            print(message)
