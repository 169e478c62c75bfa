# jobboard/services/crud_applications.py

import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from jobboard.db.models import Application, Job
from jobboard.schemas.application import (
    ApplicationCreate, ApplicationStatus, UNKNOWN_POSITION
)

logger = logging.getLogger(__name__)


def _with_job_title(db: Session):
    # LEFT OUTER JOIN: jobs can be deleted while their applications remain
    return (
        db.query(Application, Job.title)
        .outerjoin(Job, Job.id == Application.job_id)
    )


def _resolve_title(title: Optional[str]) -> str:
    return title if title is not None else UNKNOWN_POSITION


def create_application(db: Session, application_in: ApplicationCreate) -> Application:
    """
    Stores a submission with status 'pending'.
    job_id is not checked against the jobs table.
    """
    db_application = Application(
        **application_in.model_dump(mode="json"),
        status=ApplicationStatus.PENDING.value,
    )
    db.add(db_application)
    db.commit()
    db.refresh(db_application)
    logger.info(
        f"APPLICATIONS: Received application {db_application.id} for job {db_application.job_id}."
    )
    return db_application


def get_application(db: Session, application_id: str) -> Optional[Application]:
    return db.query(Application).filter(Application.id == application_id).first()


def list_applications_with_job_titles(db: Session) -> List[Tuple[Application, str]]:
    """All applications paired with their job's title, newest first."""
    rows = _with_job_title(db).order_by(Application.created_at.desc()).all()
    return [(application, _resolve_title(title)) for application, title in rows]


def get_application_with_job_title(db: Session, application_id: str) -> Optional[Tuple[Application, str]]:
    row = _with_job_title(db).filter(Application.id == application_id).first()
    if row is None:
        return None
    application, title = row
    return application, _resolve_title(title)


def update_application_status(
    db: Session, application_id: str, status: ApplicationStatus
) -> Optional[Application]:
    """
    Sets the review status. Every status is reachable from every other one,
    so there is no transition check here.
    """
    db_application = get_application(db, application_id)
    if db_application is None:
        return None
    previous = db_application.status
    db_application.status = ApplicationStatus(status).value
    db.commit()
    db.refresh(db_application)
    logger.info(
        f"APPLICATIONS: Application {application_id} status {previous} -> {db_application.status}."
    )
    return db_application
