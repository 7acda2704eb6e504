from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class RegisterUserRequest(BaseModel):
    email: EmailStr
    name: str = Field(min_length=2, max_length=50)
    password: str = Field(min_length=6, max_length=128)


class UserResponse(BaseModel):
    id: UUID
    email: EmailStr
    name: str
    created_at: datetime


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserStatsResponse(BaseModel):
    total_files: int
    total_size: int
    total_compressed: int
    space_saved: int
    total_downloads: int


class MeResponse(BaseModel):
    id: UUID
    email: str
    name: str
    is_active: bool
    stats: UserStatsResponse
