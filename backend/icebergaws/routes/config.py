# SPDX-FileCopyrightText: 2024-2025 Pathway Bio, Inc. <https://pwbio.ai>
# SPDX-FileContributor: Kimberly Robasky
# SPDX-License-Identifier: Apache-2.0

"""
Configuration API endpoints
Reports the resolved credential strategy per service (no secrets)
"""
from fastapi import APIRouter, HTTPException
from typing import Dict, Any
import logging

from icebergaws.utils.config_loader import config_loader
from icebergaws.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/config", tags=["config"])

@router.get("/credentials")
async def get_credential_config() -> Dict[str, Any]:
    """
    Get the credential strategy for the storage and catalog clients

    Secret keys and external IDs are never returned; access keys are masked.
    """
    try:
        factory = config_loader.get_client_factory()
        return factory.describe()

    except (RuntimeError, ConfigurationError) as e:
        logger.error(f"Failed to load client factory configuration: {e}")
        raise HTTPException(status_code=500, detail="Failed to load client factory configuration")
