"""
Permissions Configuration
Roles come from the user_role enum on the users table (admin, client, trainer).
This config maps each role to the resource:action permissions it is granted
by the API. Row-level security in the database still applies on top of this.
"""

# Define modules and their actions
MODULES = {
    "profiles": {
        "resource": "profiles",
        "actions": ["read", "update", "list"],
        "description": "Member profile management"
    },
    "memberships": {
        "resource": "memberships",
        "actions": ["create", "read", "update", "delete"],
        "description": "Membership plan catalogue"
    },
    "user_memberships": {
        "resource": "user_memberships",
        "actions": ["create", "read", "update", "expire", "renewals"],
        "description": "Member enrollment in plans"
    },
    "trainers": {
        "resource": "trainers",
        "actions": ["create", "read", "clients"],
        "description": "Trainer roster and client lists"
    },
    "workouts": {
        "resource": "workouts",
        "actions": ["create", "read", "update", "delete", "assign", "complete"],
        "description": "Workout plans and assignments"
    },
    "payments": {
        "resource": "payments",
        "actions": ["create", "read", "update", "summary"],
        "description": "Payment records"
    },
    "dashboard": {
        "resource": "dashboard",
        "actions": ["client", "admin"],
        "description": "Client and admin dashboards"
    },
}

ROLES = ("admin", "client", "trainer")

DEFAULT_ROLE = "client"

# Role -> granted permissions. Admin is granted everything in MODULES.
ROLE_PERMISSIONS = {
    "client": [
        "profiles:read",
        "profiles:update",
        "memberships:read",
        "user_memberships:read",
        "trainers:read",
        "workouts:read",
        "workouts:complete",
        "payments:read",
        "dashboard:client",
    ],
    "trainer": [
        "profiles:read",
        "profiles:update",
        "memberships:read",
        "user_memberships:read",
        "trainers:read",
        "trainers:clients",
        "workouts:create",
        "workouts:read",
        "workouts:update",
        "workouts:delete",
        "workouts:assign",
        "workouts:complete",
        "payments:read",
        "dashboard:client",
    ],
}


def all_permissions():
    """Every resource:action name defined in MODULES"""
    names = []
    for config in MODULES.values():
        for action in config["actions"]:
            names.append(f"{config['resource']}:{action}")
    return names


def get_role_permissions(role: str):
    """Permission names granted to a role. Unknown roles get nothing."""
    if role == "admin":
        return all_permissions()
    return list(ROLE_PERMISSIONS.get(role, []))

