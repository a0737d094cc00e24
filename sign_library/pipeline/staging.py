"""Stage a batch of uploaded images: sample, classify, name, preview.

Workflow:
    1. Skip every file whose content type is not image/*
    2. Sample + classify the remaining files concurrently (worker threads)
    3. Name the results strictly in input order with a fresh counter table
    4. Attach a revocable preview to each staged asset

Usage:
    pipeline = StagingPipeline(DominantColorSampler(), PreviewRegistry())
    result = await pipeline.stage(files)
"""

import asyncio
from typing import List, Optional, Sequence

from ..analysis.color_classifier import categorize_color
from ..analysis.color_sampler import DominantColorSampler
from .models import ColorAnalysis, SamplingFailure, SourceFile, StagedAsset, StageResult
from .naming import ColorCounterTable, allocate_name, file_extension
from .previews import PreviewRegistry, release_all


class StagingPipeline:
    """Turn raw files into uniquely named, color-categorized staged assets."""

    def __init__(
        self,
        sampler: Optional[DominantColorSampler] = None,
        registry: Optional[PreviewRegistry] = None,
        concurrency: int = 4,
        enable_logging: bool = True
    ):
        """
        Initialize staging pipeline.

        Args:
            sampler: Color sampler (default settings if None)
            registry: Preview registry shared with the caller
            concurrency: Max files sampled at the same time
            enable_logging: Print per-file progress
        """
        self.sampler = sampler or DominantColorSampler()
        self.registry = registry or PreviewRegistry()
        self.concurrency = max(1, concurrency)
        self.enable_logging = enable_logging

    async def stage(self, files: Sequence[SourceFile]) -> StageResult:
        """
        Stage a batch.

        Args:
            files: Uploaded files in the order the user selected them

        Returns:
            StageResult with staged assets, skipped names and sampling failures
        """
        result = StageResult()
        images: List[SourceFile] = []

        for file in files:
            if not file.is_image:
                result.skipped.append(file.name)
                self._log(f"  ⚠ Skipped {file.name}: Not an image")
                continue
            images.append(file)

        semaphore = asyncio.Semaphore(self.concurrency)
        analyses = await asyncio.gather(
            *(self._analyze(file, semaphore) for file in images)
        )

        # Naming happens here only, in input order, on the event loop
        counters = ColorCounterTable()
        try:
            for index, analysis in enumerate(analyses, start=1):
                file = analysis.source
                if not analysis.ok:
                    result.failures.append(SamplingFailure(file.name, analysis.error))
                    self._log(f"  ⚠ Could not analyze {file.name}: {analysis.error}")
                    continue

                new_name = allocate_name(analysis.color_code, counters, file_extension(file.name))
                preview = self.registry.create(file.name, file.content)

                result.staged.append(StagedAsset(
                    source=file,
                    preview=preview,
                    color_code=analysis.color_code,
                    assigned_name=new_name,
                    rgb=analysis.rgb
                ))
                self._log(f"  ✅ Processed {index}/{len(analyses)}: {file.name} → {new_name}")

        except BaseException:
            release_all(result.staged)
            raise

        return result

    async def _analyze(self, file: SourceFile, semaphore: asyncio.Semaphore) -> ColorAnalysis:
        """Sample and classify one file; errors stay with that file."""
        async with semaphore:
            try:
                rgb = await asyncio.to_thread(self.sampler.sample_bytes, file.content)
            except Exception as e:
                return ColorAnalysis(file, error=str(e) or e.__class__.__name__)

        return ColorAnalysis(file, color_code=categorize_color(*rgb), rgb=rgb)

    def _log(self, message: str):
        if self.enable_logging:
            print(message)
