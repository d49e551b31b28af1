"""
Gestao de Template API - Auth Schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: dict


class UserResponse(BaseModel):
    id: int
    name: Optional[str] = None
    email: str
    loja_id: Optional[int] = None
    is_active: bool = True
    created_at: Optional[str] = None
