"""
FastAPI application exposing terminal sessions over HTTP.
"""

import logging
import os

from fastapi import FastAPI

from terminal_blog.api.routers import router as api_router

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(title="Terminal Blog API")
app.include_router(api_router)
