"""Bulk image upload pipeline."""

from .models import (
    SourceFile,
    ColorAnalysis,
    StagedAsset,
    StageResult,
    SamplingFailure,
    UploadRecord,
    UploadFailure,
    CommitResult
)
from .previews import PreviewHandle, PreviewRegistry, release_all
from .naming import ColorCounterTable, allocate_name, file_extension
from .staging import StagingPipeline
from .commit import CommitPipeline
from .session import BulkUploadSession, SessionState, SessionStateError

__all__ = [
    'SourceFile',
    'ColorAnalysis',
    'StagedAsset',
    'StageResult',
    'SamplingFailure',
    'UploadRecord',
    'UploadFailure',
    'CommitResult',
    'PreviewHandle',
    'PreviewRegistry',
    'release_all',
    'ColorCounterTable',
    'allocate_name',
    'file_extension',
    'StagingPipeline',
    'CommitPipeline',
    'BulkUploadSession',
    'SessionState',
    'SessionStateError'
]
