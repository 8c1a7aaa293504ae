"""Prompt Studio FastAPI application (API layer - thin, delegates to the prompt library)."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompt_studio import logging_client
from prompt_studio.api import categories, combinations, prompts, templates
from prompt_studio.api.errors import register_exception_handlers
from prompt_studio.config import settings
from prompt_studio.container import get_container

# Initialize logger
logger = logging_client.setup_logger(
    settings.SERVICE_NAME,
    level=settings.LOG_LEVEL,
    log_host=settings.LOGGING_HOST,
    log_port=settings.LOGGING_PORT
)

# Create FastAPI app
app = FastAPI(
    title="Prompt Studio",
    version=settings.SERVICE_VERSION,
    description="Prompt library, categories, templates and saved prompt combinations"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def startup_event():
    """Build the prompt library on startup."""
    logger.info(f"Starting {settings.SERVICE_NAME} v{settings.SERVICE_VERSION}")

    library = get_container().prompt_library()
    logger.info(
        f"Prompt library ready: {len(library.categories.list())} categories, "
        f"{len(library.prompts.list())} prompts, {len(library.templates.list())} templates"
    )
    if not settings.SEED_DEFAULTS:
        logger.info("Default content disabled (SEED_DEFAULTS=false)")


@app.on_event("shutdown")
async def shutdown_event():
    """Storage is volatile; everything held in memory is dropped."""
    logger.info(f"Shutting down {settings.SERVICE_NAME}")


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Health status
    """
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION
    }


# Register API routers
app.include_router(categories.router, prefix=settings.API_PREFIX)
app.include_router(prompts.router, prefix=settings.API_PREFIX)
app.include_router(combinations.router, prefix=settings.API_PREFIX)
app.include_router(templates.router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
