"""
File Upload Utility - disk-backed blob store for uploaded files.

Everything lives in one flat directory. Stored metadata keeps a relative
reference ("uploads/<name>" or "/uploads/<name>"), never the bytes.

Max file size: 5MB (configurable)
"""

import logging
import os
import time
import uuid
from fastapi import UploadFile

from app.core.errors import FileTooLargeError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def generate_blob_name(filename: str) -> str:
    """Collision-resistant name that keeps only the original extension."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}{get_file_extension(filename)}"


def suffixed_blob_name(filename: str) -> str:
    """Keep the original name readable but prefix it so equal names never overwrite."""
    return f"{uuid.uuid4().hex[:12]}-{os.path.basename(filename)}"


class BlobStore:
    """
    Saves uploads under `root` and resolves stored references back to paths.
    """

    def __init__(self, root: str, max_bytes: int):
        self.root = os.path.abspath(root)
        self.max_bytes = max_bytes

    @property
    def max_mb(self) -> int:
        return max(self.max_bytes // (1024 * 1024), 1)

    async def save(self, file: UploadFile, keep_original_name: bool = False) -> str:
        """
        Write an uploaded file into the store.

        Args:
            file: FastAPI UploadFile
            keep_original_name: store as "<suffix>-<original name>" instead of a generated name

        Returns:
            The stored file name (not a path)

        Raises:
            ValidationError if the upload has no filename
            FileTooLargeError if the content exceeds the cap
            StorageError if the file cannot be written
        """
        if not file.filename:
            raise ValidationError("No filename provided")

        content = await file.read()
        if len(content) > self.max_bytes:
            raise FileTooLargeError(self.max_mb)

        name = suffixed_blob_name(file.filename) if keep_original_name else generate_blob_name(file.filename)
        try:
            os.makedirs(self.root, exist_ok=True)
            with open(os.path.join(self.root, name), "wb") as out:
                out.write(content)
        except OSError as e:
            logger.exception("Could not write upload %s", name)
            raise StorageError("Failed to store uploaded file") from e

        logger.info("Stored upload %s (%d bytes)", name, len(content))
        return name

    def _path_for(self, reference: str) -> str:
        name = reference.replace("\\", "/").rsplit("/", 1)[-1]
        if reference.strip("/").count("/") > 1 or name in ("", ".", ".."):
            raise ValidationError("Invalid file reference")
        return os.path.join(self.root, name)

    def exists(self, reference: str) -> bool:
        try:
            return os.path.isfile(self._path_for(reference))
        except ValidationError:
            return False

    def resolve(self, reference: str) -> str:
        """Absolute path of a stored file. NotFoundError when it is gone."""
        path = self._path_for(reference)
        if not os.path.isfile(path):
            raise NotFoundError("File not found")
        return path
