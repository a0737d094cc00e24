"""Object storage backends."""

from .base_storage import BaseStorage, StorageError
from .local_storage import LocalStorage
from .supabase_storage import SupabaseStorage
from .json_storage import JSONStorage

__all__ = ['BaseStorage', 'StorageError', 'LocalStorage', 'SupabaseStorage', 'JSONStorage']
