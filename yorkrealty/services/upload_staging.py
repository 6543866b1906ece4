# yorkrealty/services/upload_staging.py
"""
Upload staging: validate an incoming image and write it to the upload directory.

Validation (type, extension, size, decodable image) happens before any byte
is written, so a rejected upload never touches the disk. A staged file is
owned by the request that staged it; only that request may unstage it.
"""

import io
import logging
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, UnidentifiedImageError

from yorkrealty.core.errors import InvalidUpload

logger = logging.getLogger(__name__)

# Pillow format name -> extensions it may be uploaded under
PIL_FORMAT_EXTENSIONS = {
    "JPEG": {"jpeg", "jpg"},
    "PNG": {"png"},
    "GIF": {"gif"},
}


@dataclass(frozen=True)
class StagedUpload:
    original_name: str
    filename: str
    path: Path
    size: int
    content_type: str


class UploadStaging:
    def __init__(
        self,
        directory: Path,
        url_prefix: str,
        max_bytes: int,
        allowed_extensions: Iterable[str],
    ):
        self.directory = Path(directory)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.max_bytes = max_bytes
        self.allowed_extensions = {ext.lower().lstrip(".") for ext in allowed_extensions}

    def provision(self) -> None:
        """Create the upload directory. Called once at startup."""
        self.directory.mkdir(parents=True, exist_ok=True)
        logger.info("Upload directory ready", extra={"upload_dir": str(self.directory)})

    # -----------------------------
    # Validation
    # -----------------------------
    def _extension_of(self, original_name: str) -> str:
        return Path(original_name).suffix.lower().lstrip(".")

    def _mime_allowed(self, declared_mime: Optional[str]) -> bool:
        if not declared_mime:
            return False
        major, _, subtype = declared_mime.lower().partition(";")[0].strip().partition("/")
        return major == "image" and subtype in self.allowed_extensions

    def _sniff_format(self, content: bytes) -> Optional[str]:
        try:
            with Image.open(io.BytesIO(content)) as img:
                fmt = img.format
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
            return None
        return fmt

    def validate(self, content: bytes, declared_mime: Optional[str], original_name: str) -> str:
        """Return the lowercase extension of an acceptable upload, else raise InvalidUpload."""
        if len(content) > self.max_bytes:
            limit_mb = self.max_bytes / 1024 / 1024
            raise InvalidUpload(f"File size too large. Max {limit_mb:g}MB allowed.")
        if not content:
            raise InvalidUpload("Uploaded image file is empty.")

        ext = self._extension_of(original_name or "")
        if ext not in self.allowed_extensions or not self._mime_allowed(declared_mime):
            raise InvalidUpload()

        fmt = self._sniff_format(content)
        allowed_for_format = PIL_FORMAT_EXTENSIONS.get(fmt or "", set())
        if not allowed_for_format & self.allowed_extensions:
            raise InvalidUpload("Uploaded file is not a valid JPEG, PNG, or GIF image.")
        return ext

    # -----------------------------
    # Stage / unstage
    # -----------------------------
    def _unique_filename(self, ext: str) -> str:
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:7]}.{ext}"

    def stage(self, content: bytes, declared_mime: Optional[str], original_name: str) -> StagedUpload:
        ext = self.validate(content, declared_mime, original_name)

        filename = self._unique_filename(ext)
        path = self.directory / filename
        with open(path, "xb") as f:
            f.write(content)

        staged = StagedUpload(
            original_name=original_name,
            filename=filename,
            path=path,
            size=len(content),
            content_type=declared_mime or "",
        )
        logger.info(
            "Upload staged",
            extra={"upload_filename": filename, "size": staged.size, "content_type": staged.content_type},
        )
        return staged

    def unstage(self, path: Path) -> None:
        """Delete a staged file. A file that is already gone is not an error."""
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return
        except OSError:
            # Orphaned files are swept out-of-band; the caller's error wins
            logger.exception("Failed to delete staged upload", extra={"path": str(path)})
            return
        logger.info("Staged upload removed", extra={"path": str(path)})

    def public_path(self, filename: str) -> str:
        return f"{self.url_prefix.rstrip('/')}/{filename}"
