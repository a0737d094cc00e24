"""Two-phase bulk upload session: stage, then confirm or cancel."""

from enum import Enum
from typing import Optional, Sequence

from .commit import CommitPipeline, ProgressCallback
from .models import CommitResult, SourceFile, StageResult
from .previews import release_all
from .staging import StagingPipeline


class SessionState(Enum):
    """Lifecycle of one bulk upload."""
    EMPTY = "empty"
    STAGED = "staged"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class SessionStateError(Exception):
    """Raised on an operation that the session's state does not allow."""


class BulkUploadSession:
    """
    One user-initiated bulk upload.

    EMPTY --stage()--> STAGED --confirm()--> COMMITTED
                       STAGED --cancel()---> CANCELLED

    Each session stages exactly one batch, so each gets its own counters.
    Start a new session for the next batch.
    """

    def __init__(self, stager: StagingPipeline, committer: CommitPipeline):
        self.stager = stager
        self.committer = committer
        self.state = SessionState.EMPTY
        self.stage_result: Optional[StageResult] = None
        self.commit_result: Optional[CommitResult] = None

    @property
    def staged(self):
        return self.stage_result.staged if self.stage_result else []

    async def stage(self, files: Sequence[SourceFile]) -> StageResult:
        self._require(SessionState.EMPTY, "stage")

        self.stage_result = await self.stager.stage(files)
        self.state = SessionState.STAGED
        return self.stage_result

    async def confirm(self, on_progress: Optional[ProgressCallback] = None) -> CommitResult:
        self._require(SessionState.STAGED, "confirm")

        # Committed even if the upload is interrupted: the batch cannot be re-staged
        self.state = SessionState.COMMITTED
        self.commit_result = await self.committer.commit(self.staged, on_progress=on_progress)
        return self.commit_result

    def cancel(self):
        """Abandon the batch before commit and release its previews."""
        if self.state in (SessionState.CANCELLED, SessionState.EMPTY):
            self.state = SessionState.CANCELLED
            return
        self._require(SessionState.STAGED, "cancel")

        release_all(self.staged)
        self.state = SessionState.CANCELLED

    def _require(self, expected: SessionState, action: str):
        if self.state is not expected:
            raise SessionStateError(
                f"Cannot {action} a session in state '{self.state.value}'"
            )
