"""Data models and configuration for the Pinata uploader."""

from .config import PINATA_API_URL, PinataConfig, resolve_jwt
from .upload import UploadRequest, UploadResult

__all__ = [
    "PINATA_API_URL",
    "PinataConfig",
    "resolve_jwt",
    "UploadRequest",
    "UploadResult",
]
