"""Pinata IPFS uploader service."""

import asyncio
from pathlib import Path
import structlog
import httpx

from ..errors import MalformedResponseError, PinError, UploadHttpError
from ..log import configure_structlog
from ..models.config import PinataConfig
from ..models.upload import UploadRequest, UploadResult

logger = structlog.get_logger()


class PinataUploader:
    """Client for uploading files to Pinata IPFS."""

    def __init__(self, config: PinataConfig):
        """Initialize the Pinata client."""
        configure_structlog()
        self.config = config
        self.client = httpx.AsyncClient()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def upload_file(self, file_path: Path) -> UploadResult:
        """Upload a file to Pinata IPFS.

        Args:
            file_path: Path to the file to upload

        Returns:
            UploadResult carrying the CID exactly as Pinata returned it

        Raises:
            FileReadError: if the file cannot be read
            UploadHttpError: on a non-2xx response or a transport failure
            MalformedResponseError: if the response has no usable IpfsHash
        """
        request = UploadRequest.from_path(file_path, self.config.jwt)

        logger.debug(
            "Uploading file to Pinata",
            file_path=str(request.file_path),
            filename=request.file_name,
            file_size=len(request.content)
        )

        try:
            return await self._send(request)
        except PinError as e:
            logger.error(
                "An error occurred during the upload process",
                filename=request.file_name,
                error=str(e)
            )
            raise

    async def _send(self, request: UploadRequest) -> UploadResult:
        files = {
            'file': (request.file_name, request.content, 'application/octet-stream')
        }
        headers = {
            'Authorization': f'Bearer {request.jwt}'
        }

        try:
            response = await self.client.post(
                self.config.base_url,
                headers=headers,
                files=files
            )
        except httpx.HTTPError as e:
            raise UploadHttpError(None, str(e) or type(e).__name__) from e
        except UnicodeEncodeError as e:
            raise UploadHttpError(
                None,
                "Request headers must be ASCII; check PINATA_JWT for non-ASCII characters."
            ) from e

        if not response.is_success:
            raise UploadHttpError(response.status_code, response.text)

        try:
            response_json = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"API response is not valid JSON: {e}") from e

        if not isinstance(response_json, dict):
            raise MalformedResponseError("API response is not a JSON object.")

        # Extract CID from response
        cid = response_json.get('IpfsHash')
        if not isinstance(cid, str) or not cid:
            raise MalformedResponseError()

        logger.info(
            "File uploaded to Pinata successfully",
            filename=request.file_name,
            cid=cid
        )

        return UploadResult(cid=cid, response_data=response_json)


async def upload_async(file_path: Path, config: PinataConfig) -> str:
    """Upload one file and return its CID."""
    async with PinataUploader(config) as uploader:
        result = await uploader.upload_file(Path(file_path))
    return result.cid


def upload(file_path: Path, jwt: str) -> str:
    """Blocking wrapper around upload_async."""
    return asyncio.run(upload_async(file_path, PinataConfig(jwt=jwt)))
