"""Errors raised while pinning a file."""

from pathlib import Path
from typing import Optional


class PinError(Exception):
    """Base class for every failure the CLI reports."""


class MissingArgumentError(PinError):
    """No file path was given on the command line."""

    def __init__(self) -> None:
        super().__init__("Please provide a file path as a command-line argument.")


class MissingCredentialError(PinError):
    """PINATA_JWT is unset or empty."""

    def __init__(self) -> None:
        super().__init__("PINATA_JWT environment variable is not set.")


class FileReadError(PinError):
    """The file to upload could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read file {path}: {reason}")
        self.path = path
        self.reason = reason


class UploadHttpError(PinError):
    """Pinata answered with a non-2xx status, or the request never completed."""

    def __init__(self, status_code: Optional[int], body: str) -> None:
        if status_code is None:
            message = f"Request to Pinata failed: {body}"
        else:
            message = f"HTTP error {status_code}: Failed to upload file. Response: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class MalformedResponseError(PinError):
    """Pinata answered 2xx but without a usable IpfsHash."""

    def __init__(self, detail: str = "API response did not include an IpfsHash.") -> None:
        super().__init__(detail)
        self.detail = detail


class EnvFileError(PinError):
    """The env file exists but could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not read env file {path}: {reason}")
        self.path = path
        self.reason = reason
