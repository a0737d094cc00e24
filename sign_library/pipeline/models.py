"""Data models for the bulk upload pipeline."""

import mimetypes
import os
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple

from .previews import PreviewHandle


@dataclass
class SourceFile:
    """Raw uploaded file: original name, content and declared content type."""
    name: str
    content: bytes
    content_type: str = ""

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str) -> "SourceFile":
        """Read a local file, guessing its content type from the name."""
        with open(path, 'rb') as f:
            content = f.read()

        content_type, _ = mimetypes.guess_type(path)
        return cls(
            name=os.path.basename(path),
            content=content,
            content_type=content_type or "application/octet-stream"
        )


@dataclass
class ColorAnalysis:
    """Sampling outcome for one file: a color, or the reason it has none."""
    source: SourceFile
    color_code: Optional[str] = None
    rgb: Optional[Tuple[int, int, int]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.color_code is not None


@dataclass
class StagedAsset:
    """A file that passed analysis and is waiting for confirmation."""
    source: SourceFile
    preview: PreviewHandle
    color_code: str
    assigned_name: str
    rgb: Tuple[int, int, int] = (0, 0, 0)

    @property
    def original_name(self) -> str:
        return self.source.name


@dataclass
class SamplingFailure:
    """A file that could not be decoded or sampled."""
    file_name: str
    reason: str


@dataclass
class StageResult:
    """Outcome of staging one batch."""
    staged: List[StagedAsset] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)  # Non-image file names
    failures: List[SamplingFailure] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def color_summary(self) -> Dict[str, int]:
        """Count staged assets per color code."""
        summary: Dict[str, int] = {}
        for asset in self.staged:
            summary[asset.color_code] = summary.get(asset.color_code, 0) + 1
        return summary


@dataclass
class UploadRecord:
    """A staged asset stored under its final name."""
    original_name: str
    final_name: str
    color_code: str
    path: str
    public_url: Optional[str] = None


@dataclass
class UploadFailure:
    """A staged asset whose upload failed."""
    original_name: str
    final_name: str
    reason: str


@dataclass
class CommitResult:
    """Outcome of committing a staged batch. Partial success is valid."""
    succeeded: List[UploadRecord] = field(default_factory=list)
    failed: List[UploadFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def succeeded_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "attempted": self.attempted,
            "succeeded_count": self.succeeded_count,
            "failed_count": self.failed_count,
            "succeeded": [asdict(record) for record in self.succeeded],
            "failed": [asdict(failure) for failure in self.failed],
        }
