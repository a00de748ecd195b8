"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class SignInRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "umar@pocketlaw.com", "password": "password"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=200)


class SignUpRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "new.associate@pocketlaw.com",
                    "password": "s3cret",
                    "name": "New Associate",
                    "department": "Legal",
                }
            ]
        }
    }

    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=1, max_length=200)
    name: str | None = Field(None, max_length=100)
    department: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)
    bio: str | None = None


class UpdateProfileRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"department": "Corporate", "phone": "+1 (555) 000-1111"}]}}

    name: str | None = Field(None, max_length=100)
    department: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)
    bio: str | None = None


class InviteUserRequest(BaseModel):
    email: str = Field(..., max_length=254)
    role: str = Field(..., max_length=10)


class ChangeRoleRequest(BaseModel):
    role: str = Field(..., max_length=10)


# --- Response Schemas ---


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str


class UserIdResponse(BaseModel):
    user_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
