"""
Course Catalog — Auth schemas

Request fields are optional at the schema level so that presence checks
happen in the service and come back as the tagged validation error.
"""
from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str | None = Field(None, max_length=255, examples=["Ann"])
    email: str | None = Field(None, max_length=255, examples=["a@x.com"])
    password: str | None = Field(None, max_length=128)


class LoginRequest(BaseModel):
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)


class StudentResponse(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    token: str
    student: StudentResponse


class ErrorResponse(BaseModel):
    message: str
    error: str | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    dependencies: dict[str, str]
