import asyncio
import logging
from fastapi import FastAPI, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from supabase import Client

from fithub.config.settings import settings
from fithub.database.supabase_client import get_supabase
from fithub.modules.landing import routes as landing_routes
from fithub.modules.auth import routes as auth_routes
from fithub.modules.profiles import routes as profiles_routes
from fithub.modules.memberships import routes as memberships_routes
from fithub.modules.trainers import routes as trainers_routes
from fithub.modules.user_memberships import routes as user_memberships_routes
from fithub.modules.workouts import routes as workouts_routes
from fithub.modules.payments import routes as payments_routes
from fithub.modules.dashboard import routes as dashboard_routes
from fithub.modules.user_memberships.expiry_scheduler import expiry_scheduler_loop

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(landing_routes.router)
app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(profiles_routes.router, prefix="/api/v1")
app.include_router(memberships_routes.router, prefix="/api/v1")
app.include_router(trainers_routes.router, prefix="/api/v1")
app.include_router(user_memberships_routes.router, prefix="/api/v1")
app.include_router(workouts_routes.router, prefix="/api/v1")
app.include_router(payments_routes.router, prefix="/api/v1")
app.include_router(dashboard_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    if settings.enable_expiry_scheduler:
        app.state.expiry_task = asyncio.create_task(expiry_scheduler_loop())
        logger.info(
            f"Membership expiry scheduler started - checking every {settings.expiry_check_interval_seconds} seconds"
        )


@app.on_event("shutdown")
async def shutdown_event():
    task = getattr(app.state, "expiry_task", None)
    if task is not None:
        task.cancel()
    logger.info("Application shutdown")


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready(supabase: Client = Depends(get_supabase)):
    """Ready once the public plan catalogue can be read from Supabase"""
    try:
        supabase.table("memberships").select("id").limit(1).execute()
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
