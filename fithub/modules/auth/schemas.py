from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import date


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
    role: str
    redirect_to: str


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    full_name: str = Field(..., min_length=2)
    phone: Optional[str] = None
    height: Optional[float] = Field(None, gt=0)  # cm
    weight: Optional[float] = Field(None, gt=0)  # kg
    date_of_birth: Optional[date] = None
    emergency_contact: Optional[str] = None
    medical_conditions: Optional[str] = None


class RegisterResponse(BaseModel):
    user_id: str
    email: str
    message: str


class CurrentUserResponse(BaseModel):
    id: str
    email: Optional[str] = None
    role: str
    permissions: List[str]
    redirect_to: str
