"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request tracing), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unthink.core.database import init_db
from unthink.core.logging_config import get_logger, setup_logging
from unthink.core.monitoring import initialize_logfire

from .api.v1 import (
    belief_cards,
    comments,
    episodes,
    essays,
    explore,
    feed,
    follows,
    health,
    hearts,
    hot_takes,
    media,
    newsletters,
    payments,
    podcasts,
    profiles,
    reading_list,
    reposts,
    tags,
    tts,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware
from .services.deps import close_clients

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Handles startup and shutdown events for the FastAPI application.
    """
    # Startup
    try:
        logger.info("Starting up Unthink Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Unthink Server...")
    await close_clients()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Unthink Server API

    Backend for Unthink, a social publishing platform for essays, Sparks, hot takes
    and belief cards. It covers profiles and onboarding, engagement (hearts, comments,
    reposts, follows, reading list), the home feed and explore page, podcasts,
    media uploads, text-to-speech, newsletters and creator payment settings.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

initialize_logfire(app)

app.add_middleware(LogfireMiddleware)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=settings.cors.allow_methods,
    allow_headers=settings.cors.allow_headers,
)

setup_exception_handlers(app)

API = constant.API_V1_STR

app.include_router(health.router, tags=["health"])
app.include_router(profiles.router, prefix=f"{API}/profiles", tags=["profiles"])
app.include_router(essays.router, prefix=f"{API}/essays", tags=["essays"])
app.include_router(hot_takes.router, prefix=f"{API}/hot-takes", tags=["hot-takes"])
app.include_router(belief_cards.router, prefix=f"{API}/belief-cards", tags=["belief-cards"])
app.include_router(comments.router, prefix=f"{API}/comments", tags=["comments"])
app.include_router(hearts.router, prefix=f"{API}/hearts", tags=["hearts"])
app.include_router(reposts.router, prefix=f"{API}/reposts", tags=["reposts"])
app.include_router(follows.router, prefix=f"{API}/follows", tags=["follows"])
app.include_router(reading_list.router, prefix=f"{API}/reading-list", tags=["reading-list"])
app.include_router(feed.router, prefix=f"{API}/feed", tags=["feed"])
app.include_router(explore.router, prefix=f"{API}/explore", tags=["explore"])
app.include_router(podcasts.router, prefix=f"{API}/podcasts", tags=["podcasts"])
app.include_router(episodes.router, prefix=f"{API}/episodes", tags=["episodes"])
app.include_router(media.router, prefix=f"{API}/media", tags=["media"])
app.include_router(tts.router, prefix=f"{API}/tts", tags=["tts"])
app.include_router(newsletters.router, prefix=f"{API}/newsletters", tags=["newsletters"])
app.include_router(payments.router, prefix=f"{API}/payments", tags=["payments"])
app.include_router(tags.router, prefix=f"{API}/tags", tags=["tags"])
