"""
Shared test fixtures.

Provides: a fake Supabase client (chainable query builder with queued
responses per table), a TestClient bound to the app, and a helper to act as
a member with a given role.
"""

from collections import defaultdict
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from fithub.main import app
from fithub.database.supabase_client import get_supabase, get_service_supabase, get_session_supabase
from fithub.core.dependencies import get_current_member, get_user_supabase
from fithub.modules.auth.service import clear_auth_cache


class FakeResponse:
    def __init__(self, data=None, count=None):
        self.data = data
        self.count = count


class DatabaseError(Exception):
    """Shape of the errors PostgREST raises (code + message)"""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.message = message
        self.code = code


class FakeQuery:
    def __init__(self, client, table_name):
        self.client = client
        self.table_name = table_name
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    def called(self, name):
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]

    def payload(self, name):
        """First positional argument of the first call to `name` (e.g. insert/update body)"""
        return self.called(name)[0][0][0]

    def execute(self):
        return self.client.next_response(self.table_name)


class FakeSupabase:
    def __init__(self):
        self.responses = defaultdict(list)
        self.queries = []
        self.auth = MagicMock()

    def queue(self, table_name, data=None, count=None, error=None):
        self.responses[table_name].append(error if error is not None else FakeResponse(data, count))
        return self

    def table(self, table_name):
        query = FakeQuery(self, table_name)
        self.queries.append(query)
        return query

    def next_response(self, table_name):
        if self.responses[table_name]:
            response = self.responses[table_name].pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return FakeResponse([])

    def queries_for(self, table_name):
        return [q for q in self.queries if q.table_name == table_name]


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def another_supabase():
    """Second fake client, for checks that two clients are kept apart"""
    return FakeSupabase()


@pytest.fixture
def client(fake_supabase):
    clear_auth_cache()
    for dependency in (get_supabase, get_service_supabase, get_session_supabase, get_user_supabase):
        app.dependency_overrides[dependency] = lambda: fake_supabase
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def act_as(client):
    """Authenticate requests as a member with the given role"""
    def _act_as(role, user_id="user-1", email="member@fithubgym.com"):
        member = {"id": user_id, "email": email, "user_metadata": {}, "role": role}
        app.dependency_overrides[get_current_member] = lambda: member
        return member
    return _act_as


@pytest.fixture
def db_error():
    """Factory for PostgREST-style errors"""
    return DatabaseError
