from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging import logger
from .core.responses import UTF8JSONResponse
from .db.seed import initialize_database
from .db.store import get_store
from .api import admin, events, volunteers

# Create FastAPI app
app = FastAPI(
    title="Club Volunteer Signup",
    description="Volunteer signup for club work days",
    version="1.0.0",
    default_response_class=UTF8JSONResponse,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(events.router, prefix="/api", tags=["event"])
app.include_router(volunteers.router, prefix="/api", tags=["volunteer"])
app.include_router(admin.router, prefix="/admin", tags=["admin"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    logger.info("🚀 Starting Club Volunteer System...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Data directory: {settings.data_dir}")
    initialize_database(get_store())


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    logger.info("Shutting down Club Volunteer System...")
