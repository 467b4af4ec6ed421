import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, List, Tuple

from fastapi import UploadFile

from mdblog.errors import BadRequestError, StorageError

logger = logging.getLogger(__name__)


def collect_images(uploads: Iterable[UploadFile]) -> List[Tuple[str, UploadFile]]:
    """Pair each non-empty upload with its sanitized filename, rejecting non-images."""
    images = []
    for upload in uploads:
        if not upload.filename:
            # browsers send an empty part when no file was chosen
            continue
        filename = safe_filename(upload.filename)
        if get_content_type_from_filename(filename) == "application/octet-stream":
            raise BadRequestError(f"Unsupported attachment type: {filename}")
        images.append((filename, upload))
    return images


def save_images(images: List[Tuple[str, UploadFile]], dest_dir: Path) -> List[str]:
    """
    Store each image under dest_dir keyed by its filename.
    An existing file with the same name is overwritten.
    """
    if not images:
        return []

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"creating {dest_dir}: {e}") from e

    saved = []
    for filename, upload in images:
        dest_path = dest_dir / filename
        try:
            upload.file.seek(0)
            with open(dest_path, "wb") as dst:
                shutil.copyfileobj(upload.file, dst)
        except OSError as e:
            raise StorageError(f"saving upload {dest_path}: {e}") from e
        logger.info(f"Saved uploaded image {dest_path}")
        saved.append(filename)
    return saved


def safe_filename(filename: str) -> str:
    """Drop any directory components a client put in the filename."""
    name = os.path.basename(filename.replace("\\", "/"))
    if not name or name.startswith("."):
        raise BadRequestError(f"Invalid attachment filename: {filename!r}")
    return name


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"
