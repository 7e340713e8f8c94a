"""Upload request and result models."""

from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from ..errors import FileReadError


class UploadRequest(BaseModel):
    """A single file staged for upload."""
    file_path: Path
    file_name: str
    content: bytes = Field(repr=False)
    jwt: str = Field(repr=False)

    @classmethod
    def from_path(cls, file_path: Path, jwt: str) -> "UploadRequest":
        """Read the whole file into memory.

        Raises:
            FileReadError: if the path is missing, not a regular file or unreadable
        """
        file_path = Path(file_path)
        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise FileReadError(file_path, e.strerror or str(e)) from e

        return cls(
            file_path=file_path,
            file_name=file_path.name,
            content=content,
            jwt=jwt
        )


class UploadResult(BaseModel):
    """Result of a Pinata upload operation."""
    cid: str
    response_data: Optional[Dict[str, Any]] = None
