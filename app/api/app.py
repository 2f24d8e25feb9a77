"""
FastAPI application for MindCanvas.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.api.routes import router
from app.utils.error_handling import InfographicError, log_diagnostic_info, user_message
from app.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for turning YouTube videos into hand-drawn infographics",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(InfographicError)
async def infographic_exception_handler(request: Request, exc: InfographicError):
    """Surface a failed generation step to the client with its message intact."""
    logging.error(f"{request.url.path} failed ({exc.error_type}): {exc}")
    log_diagnostic_info({"path": request.url.path, "error_type": exc.error_type})
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": user_message(exc), "error_type": exc.error_type},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": f"An unexpected error occurred: {str(exc)}", "error_type": "internal"},
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "MindCanvas infographic API",
    }
