"""Authentication schemas."""
from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    is_admin: bool
