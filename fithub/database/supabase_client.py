from supabase import create_client, Client
from fithub.config.settings import settings


class SupabaseClient:
    """
    Supabase clients used by the API.

    The shared anon client is only used for public reads (plan catalogue,
    readiness check). Signing in stores a session on the client it runs on,
    so sign-up/sign-in happen on a throwaway client, and member requests get
    a client carrying the caller's JWT so row level security sees auth.uid().
    """
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Used for role lookups, registration rows, the expiry sweep and seeding."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def create_session_client(cls) -> Client:
        """Fresh anon client for sign-up/sign-in; never cached"""
        return create_client(settings.supabase_url, settings.supabase_key)

    @classmethod
    def create_user_client(cls, access_token: str) -> Client:
        """Fresh anon client whose table queries run as the member owning access_token"""
        client = cls.create_session_client()
        client.postgrest.auth(access_token)
        return client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_supabase() -> Client:
    return SupabaseClient.get_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()


def get_session_supabase() -> Client:
    return SupabaseClient.create_session_client()
