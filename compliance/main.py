"""
LLC Compliance Tracker — FastAPI application entry-point.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from compliance.auth import LOGIN_PATH, LoginRequired
from compliance.config import settings
from compliance.database import Base, engine

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: ensure data dir + tables exist
    os.makedirs(settings.DATA_DIR, exist_ok=True)
    # Import models so Base.metadata knows about them
    import compliance.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready (%s)", settings.DATABASE_URL)
    logger.info("Anniversary month: %d", settings.ANNIVERSARY_MONTH)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="LLC Compliance Tracker",
    description="Federal and state compliance obligations, alerts and documents",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(url=LOGIN_PATH, status_code=303)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register routers ─────────────────────────────────────────────────────
from compliance.routers.auth import router as auth_router  # noqa: E402
from compliance.routers.obligations import router as obligations_router  # noqa: E402
from compliance.routers.setup import router as setup_router  # noqa: E402
from compliance.routers.api import router as read_api_router  # noqa: E402
from compliance.routers.pages import router as pages_router  # noqa: E402

app.include_router(auth_router, prefix="/api", tags=["Auth"])
app.include_router(obligations_router, prefix="/api", tags=["Obligations"])
app.include_router(setup_router, prefix="/api", tags=["Setup"])
app.include_router(read_api_router, prefix="/api", tags=["Read API"])
app.include_router(pages_router)
