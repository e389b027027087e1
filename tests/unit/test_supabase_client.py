from unittest.mock import MagicMock

import pytest

from fithub.database import supabase_client
from fithub.database.supabase_client import SupabaseClient


@pytest.fixture
def created_clients(monkeypatch):
    clients = []

    def fake_create_client(url, key):
        client = MagicMock(name=f"client-{len(clients)}")
        clients.append(client)
        return client

    monkeypatch.setattr(supabase_client, "create_client", fake_create_client)
    SupabaseClient.reset_client()
    yield clients
    SupabaseClient.reset_client()


def test_user_client_carries_caller_token(created_clients):
    client = SupabaseClient.create_user_client("member-jwt")

    client.postgrest.auth.assert_called_once_with("member-jwt")
    assert created_clients == [client]


def test_each_caller_gets_own_client(created_clients):
    first = SupabaseClient.create_user_client("jwt-a")
    second = SupabaseClient.create_user_client("jwt-b")
    shared = SupabaseClient.get_client()

    assert len({id(first), id(second), id(shared)}) == 3
    shared.postgrest.auth.assert_not_called()


def test_session_clients_are_not_cached(created_clients):
    assert SupabaseClient.create_session_client() is not SupabaseClient.create_session_client()
    assert SupabaseClient.get_client() is SupabaseClient.get_client()
