"""
Seed Membership Plans Script
This script populates the memberships table using the plan catalogue config.
Run with: python -m fithub.scripts.seed_memberships
"""

import sys
from fithub.config.membership_plans import DEFAULT_PLANS
from fithub.database.supabase_client import get_service_supabase
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_memberships(supabase: Client, plans=None):
    """Seed membership plans from config. Returns (created, updated)."""
    logger.info("Seeding membership plans...")

    plans = DEFAULT_PLANS if plans is None else plans
    created_count = 0
    updated_count = 0

    for plan in plans:
        try:
            existing = supabase.table("memberships")\
                .select("id")\
                .eq("name", plan["name"])\
                .execute()

            fields = {
                "description": plan.get("description"),
                "duration_months": plan["duration_months"],
                "price": plan["price"],
                "features": plan.get("features"),
            }
            if existing.data:
                supabase.table("memberships")\
                    .update(fields)\
                    .eq("name", plan["name"])\
                    .execute()
                updated_count += 1
                logger.debug(f"Updated plan: {plan['name']}")
            else:
                supabase.table("memberships").insert({"name": plan["name"], **fields}).execute()
                created_count += 1
                logger.debug(f"Created plan: {plan['name']}")
        except Exception as e:
            logger.error(f"Error processing plan {plan['name']}: {e}")

    logger.info(f"Membership plans seeded: {created_count} created, {updated_count} updated")
    return created_count, updated_count


def main():
    """Main function to seed membership plans"""
    try:
        supabase = get_service_supabase()
        created, updated = seed_memberships(supabase)
        logger.info(f"Seeding completed: {created + updated} plans processed")
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
