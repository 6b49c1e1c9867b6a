# File: api/utils/auth.py
from fastapi import Header, HTTPException, status
from api.utils.config import Config
import logging

logger = logging.getLogger("solar_mounting.api")

async def get_api_key(x_api_key: str = Header(...)):
    """Validate API key from header."""
    if x_api_key == Config.API_KEY:
        logger.debug("Authentication successful")
        return {"key": x_api_key, "environment": "production" if Config.API_KEY != "dev_key" else "development"}
    
    logger.warning("Invalid API key provided")
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid API Key"
    )
