"""Cloudinary upload client."""

import hashlib
import io
import logging
import time
from dataclasses import dataclass

import httpx

from shop_catalog.domain.catalog import UploadResult
from shop_catalog.errors import AssetUploadError
from shop_catalog.services.uploads import AssetStore

_logger = logging.getLogger(__name__)


@dataclass
class CloudinaryAssetStore(AssetStore):
    """Signed Cloudinary image uploads using httpx."""

    cloud_name: str
    api_key: str
    api_secret: str
    http_client: httpx.AsyncClient
    secure: bool = True
    base_url: str = "https://api.cloudinary.com/v1_1"

    @classmethod
    def create(
        cls, cloud_name: str, api_key: str, api_secret: str, secure: bool = True
    ) -> "CloudinaryAssetStore":
        """Create an asset store with a managed httpx session."""
        return cls(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=secure,
            http_client=httpx.AsyncClient(),
        )

    async def upload(self, content: bytes, filename: str | None = None) -> UploadResult:
        """Stream the buffered bytes to the upload endpoint."""
        timestamp = str(int(time.time()))
        url = f"{self.base_url}/{self.cloud_name}/image/upload"
        try:
            response = await self.http_client.post(
                url,
                data={
                    "api_key": self.api_key,
                    "timestamp": timestamp,
                    "signature": self._sign({"timestamp": timestamp}),
                },
                files={"file": (filename or "upload", io.BytesIO(content))},
                timeout=30,
            )
        except httpx.HTTPError as exc:
            _logger.error("Asset upload transport failure: %s", exc)
            raise AssetUploadError(str(exc) or exc.__class__.__name__) from exc

        payload = _json_or_none(response)
        if response.is_error or payload is None or "error" in payload:
            raise AssetUploadError(_error_message(response, payload), payload)

        url_key = "secure_url" if self.secure and payload.get("secure_url") else "url"
        if not payload.get(url_key):
            raise AssetUploadError("Upload response did not include a URL", payload)
        return UploadResult(
            url=str(payload[url_key]), public_id=str(payload.get("public_id", ""))
        )

    def _sign(self, params: dict[str, str]) -> str:
        """Compute the Cloudinary request signature."""
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
        digest = hashlib.sha1(f"{to_sign}{self.api_secret}".encode())  # noqa: S324
        return digest.hexdigest()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _json_or_none(response: httpx.Response) -> dict[str, object] | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


def _error_message(response: httpx.Response, payload: dict[str, object] | None) -> str:
    if payload and isinstance(payload.get("error"), dict):
        return str(payload["error"].get("message", "Upload failed"))
    return f"Upload failed with status {response.status_code}"
