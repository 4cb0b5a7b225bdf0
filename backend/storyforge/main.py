"""Main FastAPI application."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storyforge.api import hyperlinks, story
from storyforge.config import DEFAULT_CORS_ORIGINS, get_settings

settings = get_settings()

logging.getLogger("storyforge").setLevel(settings.log_level.upper())

app = FastAPI(
    title="StoryForge API",
    description="Hyperlink and section placement for generated financial news stories",
    version="1.0.0",
    debug=settings.debug,
)

allowed_origins = settings.cors_origins or DEFAULT_CORS_ORIGINS.copy()
cors_allow_all = settings.cors_allow_all or "*" in allowed_origins

if cors_allow_all:
    cors_kwargs = {
        "allow_origins": ["*"],
        "allow_origin_regex": None,
        "allow_credentials": False,
    }
else:
    cors_kwargs = {
        "allow_origins": allowed_origins,
        "allow_origin_regex": settings.cors_origin_regex,
        "allow_credentials": True,
    }

app.add_middleware(
    CORSMiddleware,
    allow_methods=["*"],
    allow_headers=["*"],
    **cors_kwargs,
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "StoryForge API",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(
    hyperlinks.router,
    prefix=f"/api/{settings.api_version}/hyperlinks",
    tags=["hyperlinks"]
)

app.include_router(
    story.router,
    prefix=f"/api/{settings.api_version}/story",
    tags=["story"]
)
