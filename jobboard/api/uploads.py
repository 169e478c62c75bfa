# jobboard/api/uploads.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from jobboard.core.config import Settings
from jobboard.schemas.upload import UploadResponse
from jobboard.security.dependencies import get_settings
from jobboard.storage.resumes import (
    store_resume, UnsupportedFileTypeError, EmptyFileError, FileTooLargeError,
)

logger = logging.getLogger(__name__)

# Room for multipart boundaries and part headers around the file itself
MULTIPART_OVERHEAD = 64 * 1024

router = APIRouter(tags=["uploads"])


def reject_oversized_body(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """Refuses a request whose declared length already exceeds the upload cap."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > settings.MAX_FILE_SIZE + MULTIPART_OVERHEAD:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="File too large",
        )


@router.post(
    "/upload",
    response_model=UploadResponse,
    dependencies=[Depends(reject_oversized_body)],
)
async def upload_resume_endpoint(
    resume: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
):
    """
    Stores a resume sent as multipart field `resume`.
    Returns the public URL it is served from and the original filename.
    """
    if resume is None or not resume.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    try:
        stored = await store_resume(
            resume,
            upload_dir=settings.UPLOAD_DIR,
            max_size=settings.MAX_FILE_SIZE,
            allowed_extensions=settings.ALLOWED_RESUME_EXTENSIONS,
        )
    except (UnsupportedFileTypeError, EmptyFileError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except FileTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except OSError:
        logger.exception("UPLOADS: Failed to write resume to disk.")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="File upload failed")
    finally:
        await resume.close()

    return {"url": stored.url, "filename": stored.filename}
