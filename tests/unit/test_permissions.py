from fithub.config.permissions_config import get_role_permissions, all_permissions, ROLE_PERMISSIONS
from fithub.modules.auth.service import dashboard_path_for_role


def test_admin_has_every_permission():
    assert set(get_role_permissions("admin")) == set(all_permissions())
    assert "dashboard:admin" in get_role_permissions("admin")


def test_role_permissions_exist_in_modules():
    known = set(all_permissions())
    for role, permissions in ROLE_PERMISSIONS.items():
        assert set(permissions) <= known, role


def test_clients_cannot_manage_the_gym():
    permissions = get_role_permissions("client")
    assert "memberships:create" not in permissions
    assert "payments:create" not in permissions
    assert "workouts:assign" not in permissions
    assert "dashboard:client" in permissions


def test_unknown_role_gets_nothing():
    assert get_role_permissions("janitor") == []


def test_dashboard_routing():
    assert dashboard_path_for_role("admin") == "/admin"
    assert dashboard_path_for_role("trainer") == "/dashboard"
    assert dashboard_path_for_role("client") == "/dashboard"
