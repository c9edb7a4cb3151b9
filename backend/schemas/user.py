from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, StringConstraints, field_validator

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Schema for user registration requests
class SignupRequest(BaseModel):
    name: NonEmptyStr
    email: EmailStr
    password: Annotated[str, StringConstraints(min_length=1)]

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


# Schema for user authentication credentials
class LoginRequest(BaseModel):
    email: NonEmptyStr
    password: Annotated[str, StringConstraints(min_length=1)]

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


# Public view of an account, never includes the password hash
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str


# Body returned by signup and login
class AuthResponse(BaseModel):
    success: bool = True
    message: str
    user: UserResponse
    token: Optional[str] = None


class MeResponse(BaseModel):
    success: bool = True
    user: UserResponse
