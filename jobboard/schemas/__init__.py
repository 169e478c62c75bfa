# jobboard/schemas/__init__.py

from .common import CamelModel, MessageResponse
from .user import SignupRequest, LoginRequest, AdminResponse, AuthResponse
from .job import JobType, JobCreate, JobUpdate, JobResponse
from .application import (
    ApplicationStatus, ApplicationCreate, ApplicationStatusUpdate,
    ApplicationResponse, AdminApplicationResponse, UNKNOWN_POSITION,
)
from .upload import UploadResponse
