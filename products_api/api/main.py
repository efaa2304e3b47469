"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from products_api.api.products_router import router as products_router
from products_api.error_handler import ErrorHandler, InvocationError
from products_api.utils.config_loader import load_app_config

# Load app configuration once per process
app_cfg = load_app_config()

# Setup logging
logging.basicConfig(level=app_cfg.logging.level, format=app_cfg.logging.format)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=app_cfg.title,
    description=app_cfg.description,
    version=app_cfg.version,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_cfg.cors.allow_origins,
    allow_credentials=app_cfg.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

error_handler = ErrorHandler()

app.include_router(products_router, prefix=app_cfg.api_prefix)


# ============================================================================
# ERROR HANDLERS
# ============================================================================
@app.exception_handler(InvocationError)
async def invocation_error_handler(request: Request, exc: InvocationError):
    payload = error_handler.handle_exception(exc, context={"path": request.url.path, "method": request.method})
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": app_cfg.title, "version": app_cfg.version, "timestamp": datetime.now().isoformat()}


# ============================================================================
# STARTUP/SHUTDOWN EVENTS
# ============================================================================
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting %s %s (routes under %s)", app_cfg.title, app_cfg.version, app_cfg.api_prefix)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", app_cfg.title)
