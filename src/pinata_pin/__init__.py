"""
pinata-pin

Upload a local file to Pinata and print its IPFS content identifier.
"""

from .errors import (
    EnvFileError,
    FileReadError,
    MalformedResponseError,
    MissingArgumentError,
    MissingCredentialError,
    PinError,
    UploadHttpError,
)
from .models import PinataConfig, resolve_jwt
from .upload import PinataUploader, upload

__version__ = "0.1.0"
__all__ = [
    "PinataConfig",
    "PinataUploader",
    "resolve_jwt",
    "upload",
    "PinError",
    "MissingArgumentError",
    "MissingCredentialError",
    "EnvFileError",
    "FileReadError",
    "UploadHttpError",
    "MalformedResponseError",
]
