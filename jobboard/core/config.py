# jobboard/core/config.py

import os
from typing import List
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load_dotenv() makes sure .env values are in the environment before
# Pydantic initializes the Settings.
load_dotenv()

class Settings(BaseSettings):
    """
    Application configuration settings.
    Pydantic reads every field from environment variables or a .env file.
    The defaults below are used when the variable is not set.
    """
    # --- Database Settings ---
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./jobboard.db")

    # --- Session Settings ---
    SESSION_SECRET: str = os.getenv("SESSION_SECRET", "change-me-in-production")
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "jobboard_session"
    SESSION_TTL_SECONDS: int = 7 * 24 * 60 * 60  # one week, absolute
    SESSION_COOKIE_SECURE: bool = False

    # --- Password Hashing ---
    BCRYPT_ROUNDS: int = 10

    # --- File Upload Constraints ---
    UPLOAD_DIR: str = "uploads"
    MAX_FILE_SIZE: int = 10 * 1024 * 1024
    ALLOWED_RESUME_EXTENSIONS: List[str] = [".pdf", ".doc", ".docx"]

    # --- HTTP ---
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore" # Ignore extra env vars not defined in the model

# Default instance used by the module-level app and the CLI helpers.
# Tests build their own Settings and pass them to create_app().
settings = Settings()
