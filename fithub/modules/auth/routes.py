from fastapi import APIRouter, Depends, HTTPException
from fithub.modules.auth.schemas import (
    LoginRequest, RegisterRequest, TokenResponse, RegisterResponse,
    CurrentUserResponse
)
from fithub.modules.auth.service import AuthService, dashboard_path_for_role
from fithub.core.dependencies import (
    get_auth_service, get_session_auth_service, get_current_token, get_current_member
)
from fithub.config.permissions_config import get_role_permissions
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_session_auth_service)
):
    """Register a new member"""
    return service.register(register_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_session_auth_service)
):
    """Login and get access token plus the dashboard to navigate to"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and invalidate token"""
    if not service.logout(token):
        raise HTTPException(status_code=500, detail="Failed to log out. Please try again.")
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    current_user: Dict = Depends(get_current_member),
):
    """Get current authenticated user, role and permissions (for frontend routing)."""
    role = current_user["role"]
    return CurrentUserResponse(
        id=current_user["id"],
        email=current_user.get("email"),
        role=role,
        permissions=get_role_permissions(role),
        redirect_to=dashboard_path_for_role(role),
    )
