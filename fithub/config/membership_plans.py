"""
Default membership plan catalogue.
Used by scripts/seed_memberships.py to populate the memberships table.
Plans are matched by name; re-running the seed updates them in place.
"""

DEFAULT_PLANS = [
    {
        "name": "Monthly",
        "description": "Month-to-month access to the gym floor and classes",
        "duration_months": 1,
        "price": 49.00,
        "features": ["Gym floor access", "Group classes"],
    },
    {
        "name": "Quarterly",
        "description": "Three months of access with a trainer consultation",
        "duration_months": 3,
        "price": 135.00,
        "features": ["Gym floor access", "Group classes", "Trainer consultation"],
    },
    {
        "name": "Annual",
        "description": "Twelve months of access with a personal trainer",
        "duration_months": 12,
        "price": 480.00,
        "features": ["Gym floor access", "Group classes", "Personal trainer", "Workout plans"],
    },
]
