"""Upload services for external storage."""

from .pinata import PinataUploader, upload, upload_async

__all__ = [
    "PinataUploader",
    "upload",
    "upload_async",
]
