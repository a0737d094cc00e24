"""
Pytest fixtures for the sign library test suite.

Images are generated with Pillow on the fly; storage is a LocalStorage
rooted in tmp_path so nothing touches Supabase.
"""

import pytest

from sign_library.pipeline.previews import PreviewRegistry
from tests.helpers import RED, FailingStorage, image_file


@pytest.fixture
def registry():
    return PreviewRegistry()


@pytest.fixture
def storage(tmp_path):
    return FailingStorage(tmp_path / "bucket")


@pytest.fixture
def red_files():
    return [image_file(f"red_{i}.png", RED) for i in range(1, 4)]
