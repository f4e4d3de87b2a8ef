# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Iceberg AWS client factory - FastAPI diagnostic application entry point
"""
from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager
from mangum import Mangum

from icebergaws.utils.config_loader import config_loader
from icebergaws.utils.errors import ConfigurationError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate the catalog configuration at startup"""
    logger.info("Starting Iceberg AWS client factory service...")

    try:
        factory = config_loader.get_client_factory()
        logger.info(f"Credential strategies: {factory.describe()}")
    except (RuntimeError, ConfigurationError) as e:
        # Reported per request by /config/credentials
        logger.error(f"Client factory unavailable at startup: {e}")

    yield

    logger.info("Shutting down Iceberg AWS client factory service...")

# Create FastAPI application
app = FastAPI(
    title="Iceberg AWS Client Factory",
    description="Credential resolution for the Iceberg S3 and Glue clients",
    version="1.0.0",
    lifespan=lifespan
)

app.state.config_loader = config_loader

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "icebergaws", "version": "1.0.0"}

# Import and include routers
from icebergaws.routes import config as config_routes
app.include_router(config_routes.router)

# Mangum handler for AWS Lambda; lifespan events don't run there
handler = Mangum(app, lifespan="off")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host='0.0.0.0', port=8000)
