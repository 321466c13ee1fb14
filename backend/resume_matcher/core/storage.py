"""
File Storage Utilities (local filesystem for uploads, HTTP for remote URLs)
"""
import uuid
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import httpx

from resume_matcher.core.config import settings
from resume_matcher.core.exceptions import StorageError, ValidationError


UPLOADS_PREFIX = "/uploads/"


class StorageService:
    """File storage service"""

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None
    ):
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self.timeout = timeout or settings.FETCH_TIMEOUT
        self.client = client or httpx.Client(timeout=self.timeout, follow_redirects=True)

    def save_bytes(self, content: bytes, file_name: str, subfolder: str = "") -> dict:
        """
        Save file bytes to local storage

        Returns:
            dict with file_name, stored_name, file_path, file_url, file_size
        """
        if len(content) > settings.MAX_UPLOAD_SIZE:
            raise ValidationError(
                f"File exceeds {settings.MAX_UPLOAD_SIZE} bytes", field="file"
            )

        # Generate unique filename
        file_ext = Path(file_name).suffix
        unique_filename = f"{uuid.uuid4()}{file_ext}"

        save_dir = self.upload_dir / subfolder
        save_dir.mkdir(parents=True, exist_ok=True)

        file_path = save_dir / unique_filename
        file_path.write_bytes(content)

        return {
            "file_name": file_name,
            "stored_name": unique_filename,
            "file_path": str(file_path),
            "file_url": f"{UPLOADS_PREFIX}{subfolder}/{unique_filename}" if subfolder else f"{UPLOADS_PREFIX}{unique_filename}",
            "file_size": len(content),
        }

    def read_bytes(self, file_url: str) -> bytes:
        """
        Fetch file bytes from a URL

        http(s) URLs are downloaded; ``/uploads/...`` URLs produced by
        ``save_bytes`` are read from the upload directory.

        Raises:
            StorageError: the file cannot be fetched
        """
        try:
            scheme = urlparse(file_url).scheme
        except ValueError as e:
            raise StorageError(f"Invalid file URL: {e}", location=file_url, cause=e)

        if scheme in ("http", "https"):
            return self._download(file_url)
        if file_url.startswith(UPLOADS_PREFIX):
            return self._read_upload(file_url[len(UPLOADS_PREFIX):])
        raise StorageError(f"Unsupported file URL: {file_url}", location=file_url)

    def _download(self, file_url: str) -> bytes:
        try:
            response = self.client.get(file_url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise StorageError(f"Failed to fetch file: {e}", location=file_url, cause=e)
        return response.content

    def _read_upload(self, relative_path: str) -> bytes:
        root = self.upload_dir.resolve()
        path = (root / relative_path).resolve()
        if root not in path.parents or not path.is_file():
            raise StorageError("File not found", location=relative_path)
        return path.read_bytes()


# Global storage instance
_storage = None


def get_storage() -> StorageService:
    """Get storage service instance (singleton)"""
    global _storage
    if _storage is None:
        _storage = StorageService()
    return _storage
