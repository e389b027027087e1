import asyncio
import logging
from fithub.config.settings import settings
from fithub.database.supabase_client import get_service_supabase
from fithub.modules.user_memberships.service import UserMembershipService

logger = logging.getLogger(__name__)


async def expire_overdue_memberships():
    """Run one expiry sweep with the service-role client (RLS would hide other members' rows)."""
    try:
        service = UserMembershipService(get_service_supabase())
        outcome = service.expire_overdue()
        if not outcome.expired:
            logger.debug("No overdue memberships found")
        return outcome
    except Exception as e:
        logger.error(f"Error in membership expiry sweep: {str(e)}")
        return None


async def expiry_scheduler_loop():
    """Background task that periodically expires overdue memberships"""
    while True:
        try:
            await expire_overdue_memberships()
        except Exception as e:
            logger.error(f"Error in expiry scheduler loop: {str(e)}")

        await asyncio.sleep(settings.expiry_check_interval_seconds)
