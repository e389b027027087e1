"""
Core dependencies for route protection and role checking
"""

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fithub.database.supabase_client import SupabaseClient, get_service_supabase, get_session_supabase
from fithub.modules.auth.service import AuthService
from fithub.config.permissions_config import get_role_permissions
from supabase import Client
from typing import Dict, Any
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer()


def _get_request_cache(request: Request) -> Dict[str, Any]:
    """Return request-scoped cache for access data (role, permission names)."""
    if not hasattr(request.state, "access_cache"):
        request.state.access_cache = {}
    return request.state.access_cache


def get_auth_service(supabase: Client = Depends(get_service_supabase)) -> AuthService:
    return AuthService(supabase)


def get_session_auth_service(
    supabase: Client = Depends(get_service_supabase),
    session_client: Client = Depends(get_session_supabase)
) -> AuthService:
    """Auth service for sign-up/sign-in, which store a session on session_client"""
    return AuthService(supabase, session_client)


def get_current_token(
    credentials: HTTPAuthorizationCredentials = Security(security)
) -> str:
    """Extract JWT token from Authorization header"""
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_current_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Extract current user info from JWT token"""
    return auth_service.get_current_user(token)


def get_user_role(
    request: Request,
    user_data: dict = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
) -> str:
    """Role of the current user from the users table. Cached per request."""
    cache = _get_request_cache(request)
    if "role" not in cache:
        cache["role"] = auth_service.get_role(user_data["id"])
    return cache["role"]


def get_current_member(
    user_data: dict = Depends(get_current_user),
    role: str = Depends(get_user_role)
) -> dict:
    """Current user with the resolved role attached"""
    return {**user_data, "role": role}


def require_role(*roles: str):
    """Factory function to create a role check dependency"""
    def check_role(member: dict = Depends(get_current_member)) -> dict:
        if member["role"] not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient role. Required one of: {', '.join(roles)}"
            )
        return member
    return check_role


def require_permission(required_permission: str):
    """Factory function to create permission check dependency"""
    def check_permission(
        request: Request,
        member: dict = Depends(get_current_member)
    ) -> dict:
        cache = _get_request_cache(request)
        if "permission_names" not in cache:
            cache["permission_names"] = get_role_permissions(member["role"])
        if required_permission not in cache["permission_names"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient permissions. Required: {required_permission}"
            )
        return member
    return check_permission


def is_admin(member: dict) -> bool:
    return member.get("role") == "admin"


def is_staff(member: dict) -> bool:
    """Admins and trainers manage workouts and can see other members' records"""
    return member.get("role") in ("admin", "trainer")


def get_user_supabase(token: str = Depends(get_current_token)) -> Client:
    """Supabase client scoped to the caller's JWT so RLS policies apply to them"""
    return SupabaseClient.create_user_client(token)
