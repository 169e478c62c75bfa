# jobboard/api/applications.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.db.database import get_db
from jobboard.db.models import Application
from jobboard.schemas.application import (
    ApplicationCreate, ApplicationStatusUpdate,
    ApplicationResponse, AdminApplicationResponse,
)
from jobboard.security.dependencies import get_current_admin
from jobboard.services import crud_applications

logger = logging.getLogger(__name__)

APPLICATION_NOT_FOUND = "Application not found"

public_router = APIRouter(prefix="/applications", tags=["applications"])

admin_router = APIRouter(
    prefix="/admin/applications",
    tags=["admin applications"],
    dependencies=[Depends(get_current_admin)],
)


def _admin_view(application: Application, job_title: str) -> AdminApplicationResponse:
    response = AdminApplicationResponse.model_validate(application)
    response.job_title = job_title
    return response


@public_router.post("", response_model=ApplicationResponse)
def submit_application_endpoint(application: ApplicationCreate, db: Session = Depends(get_db)):
    """Submits an application for a job. No login required."""
    try:
        return crud_applications.create_application(db, application)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("APPLICATIONS: Failed to submit application.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit application",
        )


@admin_router.get("", response_model=List[AdminApplicationResponse])
def list_applications_endpoint(db: Session = Depends(get_db)):
    """Lists every application with the title of the job it targets."""
    try:
        rows = crud_applications.list_applications_with_job_titles(db)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("APPLICATIONS: Failed to fetch applications.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch applications",
        )
    return [_admin_view(application, title) for application, title in rows]


@admin_router.get("/{application_id}", response_model=AdminApplicationResponse)
def get_application_endpoint(application_id: str, db: Session = Depends(get_db)):
    try:
        row = crud_applications.get_application_with_job_title(db, application_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("APPLICATIONS: Failed to fetch application.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch application",
        )
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=APPLICATION_NOT_FOUND)
    return _admin_view(*row)


@admin_router.put("/{application_id}/status", response_model=ApplicationResponse)
def update_application_status_endpoint(
    application_id: str,
    update: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
):
    """Sets an application's status to pending, approved or rejected."""
    try:
        application = crud_applications.update_application_status(db, application_id, update.status)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("APPLICATIONS: Failed to update application status.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update application status",
        )
    if application is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=APPLICATION_NOT_FOUND)
    return application
