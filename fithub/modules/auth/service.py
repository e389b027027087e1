import hashlib
import time
from supabase import Client
from fithub.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from fithub.config.permissions_config import ROLES, DEFAULT_ROLE
from fastapi import HTTPException
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. dashboard firing several requests with the same token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500

ADMIN_DASHBOARD_PATH = "/admin"
CLIENT_DASHBOARD_PATH = "/dashboard"


def dashboard_path_for_role(role: str) -> str:
    """Where the frontend should navigate after login"""
    return ADMIN_DASHBOARD_PATH if role == "admin" else CLIENT_DASHBOARD_PATH


def clear_auth_cache():
    _AUTH_USER_CACHE.clear()


class AuthService:
    def __init__(self, supabase: Client, session_client: Optional[Client] = None):
        # supabase: service client for users/profiles rows and token checks.
        # session_client: per-request client that sign-up/sign-in store their session on.
        self.supabase = supabase
        self.session_client = session_client

    def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Register a new member: auth user, users row (role client) and profile"""
        try:
            auth_response = self.session_client.auth.sign_up({
                "email": register_data.email,
                "password": register_data.password,
                "options": {
                    "data": {"full_name": register_data.full_name}
                }
            })

            if not auth_response.user:
                raise HTTPException(status_code=400, detail="Failed to register user")
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise HTTPException(status_code=400, detail="User already exists")
            raise HTTPException(status_code=500, detail=f"Registration failed: {error_message}")

        user_id = auth_response.user.id
        try:
            self.supabase.table("users").insert({
                "id": user_id,
                "role": DEFAULT_ROLE,
            }).execute()
        except Exception as e:
            logger.error(f"Users row creation failed for user {user_id}: {e}")
            self._discard_auth_user(user_id)
            raise HTTPException(status_code=500, detail="Registration failed: could not create profile")

        try:
            profile = register_data.model_dump(mode="json", exclude={"password"})
            profile["id"] = user_id
            self.supabase.table("profiles").insert(profile).execute()
        except Exception as e:
            logger.error(f"Profile creation failed for user {user_id}: {e}")
            self._discard_users_row(user_id)
            self._discard_auth_user(user_id)
            raise HTTPException(status_code=500, detail="Registration failed: could not create profile")

        logger.info(f"Registered member {user_id}")
        return RegisterResponse(
            user_id=user_id,
            email=auth_response.user.email or register_data.email,
            message="Welcome to FitHub! You can now log in."
        )

    def _discard_users_row(self, user_id: str):
        try:
            self.supabase.table("users").delete().eq("id", user_id).execute()
        except Exception as e:
            logger.error(f"Failed to remove users row for {user_id}: {e}")

    def _discard_auth_user(self, user_id: str):
        """Remove a half-registered auth user so the email can register again"""
        try:
            self.supabase.auth.admin.delete_user(user_id)
        except Exception as e:
            logger.error(f"Failed to remove auth user {user_id}: {e}")

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate user using Supabase Auth and resolve where to send them"""
        try:
            auth_response = self.session_client.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })

            if not auth_response.user or not auth_response.session:
                raise HTTPException(status_code=401, detail="Invalid credentials")
        except HTTPException:
            raise
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise HTTPException(status_code=401, detail="Invalid email or password")
            raise HTTPException(status_code=500, detail=f"Login failed: {error_message}")

        role = self.get_role(auth_response.user.id)
        return TokenResponse(
            access_token=auth_response.session.access_token,
            token_type="bearer",
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email,
            role=role,
            redirect_to=dashboard_path_for_role(role),
        )

    def get_role(self, user_id: str) -> str:
        """Role from the users table; members without a row are treated as clients"""
        try:
            result = self.supabase.table("users")\
                .select("role")\
                .eq("id", user_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            logger.error(f"Error getting role for user {user_id}: {e}")
            return DEFAULT_ROLE
        if not result or not result.data:
            return DEFAULT_ROLE
        role = result.data.get("role")
        return role if role in ROLES else DEFAULT_ROLE

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from Supabase Auth token. Uses short TTL cache to reduce auth API calls."""
        try:
            cache_key = hashlib.sha256(token.encode()).hexdigest()
            now = time.monotonic()
            if cache_key in _AUTH_USER_CACHE:
                user_data, expiry = _AUTH_USER_CACHE[cache_key]
                if now < expiry:
                    return user_data
                del _AUTH_USER_CACHE[cache_key]
            user_response = self.supabase.auth.get_user(jwt=token)
            if not user_response or not user_response.user:
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            user = user_response.user
            user_data = {
                "id": user.id,
                "email": user.email,
                "user_metadata": user.user_metadata or {},
            }
            if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
                _AUTH_USER_CACHE[cache_key] = (user_data, now + _AUTH_CACHE_TTL_SEC)
            return user_data
        except HTTPException:
            raise
        except Exception as e:
            error_msg = str(e)
            if "JWT" in error_msg or "expired" in error_msg.lower() or "invalid" in error_msg.lower():
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            raise HTTPException(status_code=401, detail="Authentication failed")

    def logout(self, token: str) -> bool:
        """Logout user using Supabase Auth"""
        try:
            # Drop our cached lookup and revoke the refresh tokens behind this JWT
            _AUTH_USER_CACHE.pop(hashlib.sha256(token.encode()).hexdigest(), None)
            self.supabase.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.warning(f"Sign out failed: {e}")
            return False
