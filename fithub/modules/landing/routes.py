from fastapi import APIRouter

router = APIRouter(tags=["landing"])

BRAND = "FitHub"

LANDING_CONTENT = {
    "brand": BRAND,
    "headline": "Transform Your Body, Transform Your Life",
    "tagline": (
        "Join our state-of-the-art gym facility and get access to premium equipment, "
        "expert trainers, and a supportive community to help you achieve your fitness goals."
    ),
    "actions": [
        {"label": "Start Your Journey", "href": "/register"},
        {"label": "Member Login", "href": "/login"},
    ],
    "features": [
        {
            "title": "Expert Trainers",
            "description": "Work with certified professionals who will guide you through your fitness journey.",
        },
        {
            "title": "Modern Equipment",
            "description": "Access to top-of-the-line fitness equipment and facilities.",
        },
        {
            "title": "Flexible Plans",
            "description": "Choose from various membership options that suit your needs and schedule.",
        },
    ],
}


@router.get("/")
async def landing():
    """Marketing content for the landing page"""
    return LANDING_CONTENT
