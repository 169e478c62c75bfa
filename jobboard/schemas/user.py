# jobboard/schemas/user.py

from pydantic import BaseModel, EmailStr, ConfigDict, field_validator

from jobboard.schemas.common import require_text

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


# Schema for creating an admin (POST /api/auth/signup)
class SignupRequest(BaseModel):
    username: str
    email: EmailStr
    password: str

    @field_validator("username")
    @classmethod
    def _username_length(cls, value: str) -> str:
        # Stripped the same way login strips it
        value = value.strip()
        if len(value) < 3:
            raise ValueError("Username must be at least 3 characters")
        return value

    @field_validator("password")
    @classmethod
    def _password_length(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("Password must be at least 6 characters")
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username")
    @classmethod
    def _username_required(cls, value: str) -> str:
        return require_text(value, "Username is required")

    @field_validator("password")
    @classmethod
    def _password_required(cls, value: str) -> str:
        # Not stripped: whitespace is part of the password
        if not value:
            raise ValueError("Password is required")
        return value


# Schema for returning admin data (never includes the password hash)
class AdminResponse(BaseModel):
    id: str
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    message: str
    admin: AdminResponse
