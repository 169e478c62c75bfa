# jobboard/api/jobs.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.db.database import get_db
from jobboard.schemas.common import MessageResponse
from jobboard.schemas.job import JobCreate, JobUpdate, JobResponse
from jobboard.security.dependencies import get_current_admin
from jobboard.services import crud_jobs

logger = logging.getLogger(__name__)

JOB_NOT_FOUND = "Job not found"

# Public listing: only active jobs are visible
public_router = APIRouter(prefix="/jobs", tags=["jobs"])

# Admin management: every route requires a session
admin_router = APIRouter(
    prefix="/admin/jobs",
    tags=["admin jobs"],
    dependencies=[Depends(get_current_admin)],
)


def _storage_failure(db: Session, detail: str) -> HTTPException:
    db.rollback()
    logger.exception(f"JOBS: {detail}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


# --- Public Endpoints ---

@public_router.get("", response_model=List[JobResponse])
def list_active_jobs_endpoint(db: Session = Depends(get_db)):
    """Lists active jobs."""
    try:
        return crud_jobs.list_active_jobs(db)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to fetch jobs")

@public_router.get("/{job_id}", response_model=JobResponse)
def get_active_job_endpoint(job_id: str, db: Session = Depends(get_db)):
    """Fetches one job; inactive and missing jobs are both 404."""
    try:
        job = crud_jobs.get_active_job(db, job_id)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to fetch job")
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return job


# --- Admin Endpoints ---

@admin_router.get("", response_model=List[JobResponse])
def list_all_jobs_endpoint(db: Session = Depends(get_db)):
    """Lists every job, active or not."""
    try:
        return crud_jobs.list_jobs(db)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to fetch jobs")

@admin_router.post("", response_model=JobResponse)
def create_job_endpoint(job: JobCreate, db: Session = Depends(get_db)):
    """Creates a job posting."""
    try:
        return crud_jobs.create_job(db, job)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to create job")

@admin_router.put("/{job_id}", response_model=JobResponse)
def update_job_endpoint(job_id: str, job: JobUpdate, db: Session = Depends(get_db)):
    """Applies a partial update to a job."""
    try:
        updated = crud_jobs.update_job(db, job_id, job)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to update job")
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return updated

@admin_router.post("/{job_id}/toggle", response_model=JobResponse)
def toggle_job_endpoint(job_id: str, db: Session = Depends(get_db)):
    """Flips a job between active and inactive."""
    try:
        job = crud_jobs.toggle_job_active(db, job_id)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to toggle job status")
    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return job

@admin_router.delete("/{job_id}", response_model=MessageResponse)
def delete_job_endpoint(job_id: str, db: Session = Depends(get_db)):
    """Deletes a job permanently."""
    try:
        deleted = crud_jobs.delete_job(db, job_id)
    except SQLAlchemyError:
        raise _storage_failure(db, "Failed to delete job")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=JOB_NOT_FOUND)
    return {"message": "Job deleted successfully"}
