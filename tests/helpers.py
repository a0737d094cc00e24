"""Shared test helpers: generated images and a storage that can fail."""

from io import BytesIO

from PIL import Image

from sign_library.pipeline.models import SourceFile
from sign_library.storage.base_storage import StorageError
from sign_library.storage.local_storage import LocalStorage


RED = (220, 30, 30)
GREEN = (30, 160, 40)
BLUE = (30, 60, 200)
YELLOW = (250, 210, 0)
WHITE = (240, 240, 240)


def make_png(color, size=(8, 8), mode="RGB") -> bytes:
    """Encode a solid-color PNG."""
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def image_file(name: str, color, content_type: str = "image/png") -> SourceFile:
    return SourceFile(name=name, content=make_png(color), content_type=content_type)


class FailingStorage(LocalStorage):
    """LocalStorage that rejects uploads to selected paths."""

    def __init__(self, root_dir, fail_paths=()):
        super().__init__(str(root_dir), public_base_url="https://cdn.test/sign-icons")
        self.fail_paths = set(fail_paths)
        self.upload_calls = []

    def upload(self, path, data, content_type="application/octet-stream", upsert=False):
        self.upload_calls.append(path)
        if path in self.fail_paths:
            raise StorageError(f"Upload of {path} failed: quota exceeded")
        return super().upload(path, data, content_type, upsert)
