"""
Customer Service — Photo Storage Service
==========================================

What:  Generates collision-resistant photo filenames and writes uploaded bytes
       into the configured uploads directory.
Why:   Centralizes all file system operations for customer photos.
How:   `<uuid4>-<sanitized original name>` filenames, async writes via aiofiles.
Who:   Called by the photo upload routes before the customer is saved.

Filename sanitization:
    The original client filename is kept for readability, with spaces, colons
    and doubled slashes removed. Any directory part left after that is dropped
    so every photo lands directly in the uploads root:
        "my photo:1.jpg"   → "3f2b...-myphoto1.jpg"
        "sub/dir/face.png" → "3f2b...-face.png"
    The uuid4 prefix keeps two uploads of the same file from colliding.

    Whatever survives sanitization, the resolved target must stay inside the
    uploads root; anything else (e.g. "../x.jpg") is rejected as a
    FileStorageError before a single byte is written.
"""

import logging
import os
import uuid
from pathlib import Path, PureWindowsPath
from typing import Optional

import aiofiles

from customer_service.config import settings
from customer_service.exceptions import FileStorageError

logger = logging.getLogger(__name__)

# Removed from client filenames, in this order
_STRIPPED_SEQUENCES = (" ", ":", "//")


def sanitize_filename(filename: str) -> str:
    for sequence in _STRIPPED_SEQUENCES:
        filename = filename.replace(sequence, "")
    # PureWindowsPath splits on both "/" and "\\"
    return PureWindowsPath(filename).name


def generate_photo_filename(original_filename: str) -> str:
    """Return `<uuid4>-<sanitized original filename>`."""
    return f"{uuid.uuid4()}-{sanitize_filename(original_filename)}"


class PhotoStorage:
    """
    Writes customer photos to a flat directory.

    Directory Structure:
        uploads/
        ├── 0b6f1c2e-...-portrait.jpg
        └── 9d41a7f0-...-portrait.jpg
    """

    def __init__(self, uploads_path: Optional[str] = None):
        """
        Args:
            uploads_path: Override the default directory (used in tests).
                          If None, uses settings.uploads_path.
        """
        self.uploads_root = Path(uploads_path or settings.uploads_path).resolve()

    def _target_path(self, filename: str) -> Path:
        target = (self.uploads_root / filename).resolve()
        if target.parent != self.uploads_root:
            raise FileStorageError(
                message="Invalid photo filename.",
                context={"filename": filename},
            )
        return target

    async def store(self, original_filename: str, content: bytes) -> str:
        """
        Write an uploaded photo under a freshly generated name.

        Returns:
            The generated filename (relative to the uploads root), which is
            what the customer's photo_path records.

        Raises:
            FileStorageError if the name escapes the uploads root or the write fails.
        """
        filename = generate_photo_filename(original_filename)
        target = self._target_path(filename)

        try:
            self.uploads_root.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store photo at %s: %s", target, str(e))
            raise FileStorageError(
                message="Failed to save uploaded photo. Please try again.",
                context={"path": str(target), "os_error": str(e)},
            )

        logger.info("Photo stored: %s (%d bytes)", filename, len(content))
        return filename

    async def remove(self, filename: str) -> None:
        """
        Best-effort removal of a stored photo.

        When:  A photo was written but saving the customer then failed, so the
               file would otherwise be orphaned.
        Failures are logged, never raised: the caller is already propagating
        the original error.
        """
        try:
            path = self._target_path(filename)
            if path.exists():
                os.remove(path)
                logger.info("Cleaned up photo: %s", filename)
        except (OSError, FileStorageError) as e:
            logger.warning("Failed to clean up photo %s: %s", filename, str(e))


photo_storage = PhotoStorage()


def get_photo_storage() -> PhotoStorage:
    return photo_storage
