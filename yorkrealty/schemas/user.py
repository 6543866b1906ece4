# File: yorkrealty/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Request bodies accept missing fields so the service can answer 400
# with a readable message instead of a schema error.
class UserCreate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    created_at: datetime


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "Registration successful"
    user_id: int = Field(serialization_alias="userId")


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    user: UserSummary
