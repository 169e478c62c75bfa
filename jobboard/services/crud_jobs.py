# jobboard/services/crud_jobs.py

import logging
from typing import List, Optional

from sqlalchemy import not_, update
from sqlalchemy.orm import Session

from jobboard.db.models import Job
from jobboard.schemas.job import JobCreate, JobUpdate

logger = logging.getLogger(__name__)

# --- Getters ---

def get_job(db: Session, job_id: str) -> Optional[Job]:
    """Fetches a job by ID regardless of its active flag."""
    return db.query(Job).filter(Job.id == job_id).first()

def get_active_job(db: Session, job_id: str) -> Optional[Job]:
    """Fetches a job only if it is publicly visible."""
    return db.query(Job).filter(Job.id == job_id, Job.is_active.is_(True)).first()

# --- List Functions ---

def list_jobs(db: Session) -> List[Job]:
    """All jobs, newest first."""
    return db.query(Job).order_by(Job.created_at.desc()).all()

def list_active_jobs(db: Session) -> List[Job]:
    """Active jobs only, newest first."""
    return db.query(Job).filter(Job.is_active.is_(True)).order_by(Job.created_at.desc()).all()

# --- Mutations ---

def create_job(db: Session, job_in: JobCreate) -> Job:
    """Creates a job; id and created_at are assigned server-side."""
    db_job = Job(**job_in.model_dump(mode="json"))
    db.add(db_job)
    db.commit()
    db.refresh(db_job)
    logger.info(f"JOBS: Created job '{db_job.title}' ({db_job.id}).")
    return db_job

def update_job(db: Session, job_id: str, job_in: JobUpdate) -> Optional[Job]:
    """Applies only the fields present in the request. None if the job is absent."""
    db_job = get_job(db, job_id)
    if db_job is None:
        return None

    changes = job_in.model_dump(mode="json", exclude_unset=True)
    for field, value in changes.items():
        setattr(db_job, field, value)
    db.commit()
    db.refresh(db_job)
    logger.info(f"JOBS: Updated job {job_id} fields={sorted(changes)}.")
    return db_job

def toggle_job_active(db: Session, job_id: str) -> Optional[Job]:
    """
    Flips is_active with a single UPDATE ... SET is_active = NOT is_active,
    so two concurrent toggles always cancel out.
    """
    result = db.execute(
        update(Job)
        .where(Job.id == job_id)
        .values(is_active=not_(Job.is_active))
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        db.rollback()
        return None
    db.commit()

    db_job = get_job(db, job_id)
    if db_job is not None:
        logger.info(f"JOBS: Toggled job {job_id} -> is_active={db_job.is_active}.")
    return db_job

def delete_job(db: Session, job_id: str) -> bool:
    """Hard delete. Applications pointing at the job are left in place."""
    deleted = db.query(Job).filter(Job.id == job_id).delete(synchronize_session=False)
    db.commit()
    if deleted:
        logger.info(f"JOBS: Deleted job {job_id}.")
    return deleted > 0
