from fastapi import UploadFile
import logging
import time
import os
import uuid

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif"}
MAX_IMAGE_SIZE = 5 * 1024 * 1024  # 5MB
PUBLIC_PREFIX = "/uploads/"


class UploadRejected(Exception):
    pass


def secure_filename(filename: str):
    ext = os.path.splitext(filename or "")[1]
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"


async def save_upload(file: UploadFile, upload_dir: str):
    """Validate an uploaded image and write it under ``upload_dir``.

    Returns the public path the static mount serves it from. Raises
    ``UploadRejected`` for a disallowed content type or a file over
    ``MAX_IMAGE_SIZE``; nothing is left on disk in either case.
    """
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        logger.warning(f"Rejected upload {file.filename}: content type {file.content_type}")
        raise UploadRejected("Invalid file type")

    os.makedirs(upload_dir, exist_ok=True)
    filename = secure_filename(file.filename)
    file_path = os.path.join(upload_dir, filename)
    written = 0
    with open(file_path, "wb") as buffer:
        chunk_size = 1024 * 1024  # 1MB chunks
        while content := await file.read(chunk_size):
            written += len(content)
            if written > MAX_IMAGE_SIZE:
                break
            buffer.write(content)

    if written > MAX_IMAGE_SIZE:
        os.remove(file_path)
        logger.warning(f"Rejected upload {file.filename}: exceeds {MAX_IMAGE_SIZE} bytes")
        raise UploadRejected("File too large")

    logger.info(f"Successfully saved file: {file_path}")
    return f"{PUBLIC_PREFIX}{filename}"


def remove_upload(image_path: str, upload_dir: str):
    if not image_path:
        return False
    file_path = os.path.join(upload_dir, os.path.basename(image_path))
    try:
        os.remove(file_path)
        logger.info(f"Removed file: {file_path}")
        return True
    except OSError as e:
        logger.error(f"Error deleting image file {file_path}: {str(e)}")
        return False
