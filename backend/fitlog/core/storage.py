"""Local object store for progress photos.

Objects live under `<uploads_dir>/<bucket>/<path>`. Display links are
short-lived signed tokens (JWT, `exp` claim) resolved by `GET /files/{token}`.
"""
import logging
import os
from datetime import datetime, timedelta, timezone
from urllib.parse import urlparse

import jwt

from fitlog.core.config import settings
from fitlog.core.exceptions import InvalidSignedUrl, StorageError

logger = logging.getLogger(__name__)

_SIGNED_URL_PURPOSE = "file"


class LocalStorage:
    def __init__(self, root: str, bucket: str):
        self.root = root
        self.bucket = bucket

    def _full_path(self, path: str) -> str:
        base = os.path.abspath(os.path.join(self.root, self.bucket))
        full = os.path.abspath(os.path.join(base, path))
        if not full.startswith(base + os.sep):
            raise StorageError(f"Path escapes bucket: {path}")
        return full

    def upload(self, path: str, data: bytes) -> str:
        full = self._full_path(path)
        try:
            os.makedirs(os.path.dirname(full), exist_ok=True)
            with open(full, "wb") as out:
                out.write(data)
        except OSError as e:
            raise StorageError(f"Could not store {path}: {e}") from e
        logger.info("Stored %s (%d bytes)", path, len(data))
        return path

    def open_path(self, path: str) -> str:
        full = self._full_path(path)
        if not os.path.exists(full):
            raise StorageError(f"Stored file missing: {path}")
        return full

    def remove(self, path: str) -> None:
        full = self._full_path(path)
        try:
            os.remove(full)
        except FileNotFoundError:
            logger.warning("Remove skipped, %s already gone", path)
        except OSError as e:
            raise StorageError(f"Could not remove {path}: {e}") from e

    def create_signed_url(self, path: str, ttl_seconds: int | None = None) -> str:
        ttl = ttl_seconds if ttl_seconds is not None else settings.signed_url_ttl_seconds
        payload = {
            "p": path,
            "b": self.bucket,
            "use": _SIGNED_URL_PURPOSE,
            "exp": datetime.now(timezone.utc) + timedelta(seconds=ttl),
        }
        token = jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)
        return f"/files/{token}"

    def resolve_signed_token(self, token: str) -> str:
        """Return the stored path a signed token points at."""
        try:
            payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
        except jwt.ExpiredSignatureError as e:
            raise InvalidSignedUrl("Link expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidSignedUrl("Invalid link") from e
        if payload.get("use") != _SIGNED_URL_PURPOSE or payload.get("b") != self.bucket:
            raise InvalidSignedUrl("Invalid link")
        return payload["p"]


def storage_path_from_reference(reference: str, bucket: str | None = None) -> str:
    """Turn a stored photo reference into a bucket-relative path.

    Older rows hold full public URLs such as
    https://host/storage/v1/object/public/progress-photos/<user>/<file>;
    newer rows hold the path itself.
    """
    bucket = bucket or settings.photos_bucket
    if not reference.startswith(("http://", "https://")):
        return reference
    parts = urlparse(reference).path.split("/")
    if bucket in parts:
        idx = parts.index(bucket)
        if idx < len(parts) - 1:
            return "/".join(parts[idx + 1:])
    logger.warning("Could not extract storage path from %s", reference)
    return reference


def get_storage() -> LocalStorage:
    return LocalStorage(settings.uploads_dir, settings.photos_bucket)
