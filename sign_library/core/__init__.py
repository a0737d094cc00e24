# sign_library/core/__init__.py
"""Core components."""

from .config import LibraryConfig

__all__ = [
    'LibraryConfig'
]
