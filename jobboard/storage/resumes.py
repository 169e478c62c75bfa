# jobboard/storage/resumes.py

import logging
import os
import uuid
from dataclasses import dataclass
from typing import Iterable

import aiofiles
import aiofiles.os
from fastapi import UploadFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
PUBLIC_PREFIX = "/uploads"


class ResumeRejectedError(ValueError):
    """Base class for uploads that are refused before anything is kept on disk."""


class UnsupportedFileTypeError(ResumeRejectedError):
    pass


class FileTooLargeError(ResumeRejectedError):
    pass


class EmptyFileError(ResumeRejectedError):
    pass


@dataclass
class StoredResume:
    url: str # public path, served as static content
    filename: str # original client filename
    stored_name: str
    size: int


def file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def is_allowed_extension(filename: str, allowed: Iterable[str]) -> bool:
    return file_extension(filename) in {ext.lower() for ext in allowed}


def ensure_upload_dir(upload_dir: str) -> str:
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


async def store_resume(
    file: UploadFile,
    upload_dir: str,
    max_size: int,
    allowed_extensions: Iterable[str],
) -> StoredResume:
    """
    Streams an uploaded resume to disk under a random name.

    The extension is checked before any byte is written. The body is written
    to a temporary ".part" file that is removed if the size limit is crossed,
    so a rejected upload never leaves a file behind.

    Raises:
        UnsupportedFileTypeError: extension not in the allow-list.
        FileTooLargeError: body larger than max_size.
        EmptyFileError: zero-byte upload.
    """
    original_name = file.filename or ""
    if not is_allowed_extension(original_name, allowed_extensions):
        logger.warning(f"UPLOADS: Rejected '{original_name}': unsupported file type.")
        raise UnsupportedFileTypeError(
            "Invalid file type. Only PDF, DOC, and DOCX files are allowed."
        )

    ensure_upload_dir(upload_dir)
    stored_name = f"{uuid.uuid4().hex}{file_extension(original_name)}"
    final_path = os.path.join(upload_dir, stored_name)
    partial_path = final_path + ".part"

    size = 0
    try:
        async with aiofiles.open(partial_path, "wb") as out:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_size:
                    raise FileTooLargeError(
                        f"File too large. Maximum size is {max_size // (1024 * 1024)} MB."
                    )
                await out.write(chunk)
        if size == 0:
            raise EmptyFileError("Cannot upload an empty file.")
    except BaseException:
        if os.path.exists(partial_path):
            await aiofiles.os.remove(partial_path)
        raise

    await aiofiles.os.rename(partial_path, final_path)
    logger.info(f"UPLOADS: Stored '{original_name}' as {stored_name} ({size} bytes).")
    return StoredResume(
        url=f"{PUBLIC_PREFIX}/{stored_name}",
        filename=original_name,
        stored_name=stored_name,
        size=size,
    )
