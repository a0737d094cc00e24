"""Configuration management for the sign library tools."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class LibraryConfig:
    """Configuration for image ingestion and storage."""

    # Supabase settings (filled from the environment when not given)
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None

    # Storage layout
    bucket: str = "sign-icons"
    library_prefix: str = "library"
    max_upload_bytes: int = 5 * 1024 * 1024  # single-image uploads

    # Color sampling
    sample_algorithm: str = "sqrt"
    sample_step: int = 1
    max_dimension: int = 400  # downscale before sampling
    staging_concurrency: int = 4

    # Reports
    output_dir: str = "data/reports"
    report_filename: str = "upload_report.json"

    def __post_init__(self):
        """Fill credentials from environment variables."""
        self.supabase_url = self.supabase_url or os.getenv("SUPABASE_URL")
        self.supabase_key = (
            self.supabase_key or
            os.getenv("SUPABASE_ANON_KEY") or
            os.getenv("SUPABASE_SERVICE_ROLE_KEY")
        )

        bucket = os.getenv("SIGN_LIBRARY_BUCKET")
        if bucket:
            self.bucket = bucket

    @property
    def full_report_path(self) -> str:
        """Get the full path for the report file."""
        return os.path.join(self.output_dir, self.report_filename)

    @property
    def has_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    def validate(self, require_credentials: bool = True) -> bool:
        """Validate configuration."""
        valid = True

        if require_credentials and not self.has_credentials:
            print("⚠ Warning: Supabase credentials missing (SUPABASE_URL, SUPABASE_ANON_KEY)")
            valid = False

        if self.sample_algorithm not in ("sqrt", "simple", "dominant"):
            print(f"⚠ Warning: unknown sample algorithm '{self.sample_algorithm}'")
            valid = False

        if self.sample_step < 1 or self.staging_concurrency < 1:
            print("⚠ Warning: sample_step and staging_concurrency must be >= 1")
            valid = False

        return valid
