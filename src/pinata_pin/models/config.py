"""Configuration models for the Pinata uploader."""

import os
from pathlib import Path
from typing import Dict, Optional
import structlog
from dotenv import dotenv_values
from pydantic import BaseModel, Field

from ..errors import EnvFileError, MissingCredentialError
from ..log import configure_structlog

logger = structlog.get_logger()

PINATA_API_URL = "https://api.pinata.cloud/pinning/pinFileToIPFS"
JWT_ENV_VAR = "PINATA_JWT"


def _find_env_file() -> Optional[Path]:
    """Return the first .env file found in the common locations."""
    env_paths = [
        Path.cwd() / ".env",  # Current directory
        Path.cwd() / "config" / ".env",  # ./config/.env
    ]

    for env_path in env_paths:
        if env_path.is_file():
            return env_path
    return None


def _read_env_file(env_file: Optional[Path]) -> Dict[str, Optional[str]]:
    """Parse a key=value file without touching os.environ."""
    path = env_file if env_file is not None else _find_env_file()
    if path is None or not path.is_file():
        return {}

    logger.debug("Reading env file", env_file=str(path))
    try:
        return dotenv_values(path)
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(path, str(e)) from e


def resolve_jwt(env_file: Optional[Path] = None) -> str:
    """Resolve the Pinata JWT.

    A non-empty value in the env file wins; otherwise the process
    environment is consulted. Empty values count as unset.

    Raises:
        EnvFileError: if the env file exists but cannot be read or decoded
        MissingCredentialError: if neither source yields a value
    """
    configure_structlog()
    values = _read_env_file(env_file)
    jwt = values.get(JWT_ENV_VAR) or os.getenv(JWT_ENV_VAR)

    if not jwt:
        logger.error(
            "Pinata JWT not found. Please create a .env file and add your PINATA_JWT.",
            env_var=JWT_ENV_VAR,
        )
        raise MissingCredentialError()
    return jwt


class PinataConfig(BaseModel):
    """Pinata IPFS configuration."""
    jwt: str = Field(description="Pinata JWT token", repr=False)
    base_url: str = Field(default=PINATA_API_URL)

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "PinataConfig":
        """Create from the env file and environment variables."""
        return cls(jwt=resolve_jwt(env_file))
