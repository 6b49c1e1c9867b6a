# api/utils/config.py
import os
import logging

logger = logging.getLogger("solar_mounting.api")

def _split_origins(value: str):
    return [origin.strip() for origin in value.split(",") if origin.strip()]

class Config:
    """Layout API settings read from the environment"""
    
    # Layout endpoints check this against the X-API-Key header
    API_KEY = os.environ.get("API_KEY", "dev_key")
    
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
    
    # Joint detection compares every pair of panels
    MAX_PANELS_PER_REQUEST = int(os.environ.get("MAX_PANELS_PER_REQUEST", "2000"))
    
    CORS_ORIGINS = _split_origins(os.environ.get("CORS_ORIGINS", "*"))
    
    @classmethod
    def validate(cls):
        """Warn about settings unfit for a deployed service"""
        if cls.API_KEY == "dev_key":
            logger.warning("Using development API key - not secure for production!")
        if cls.MAX_PANELS_PER_REQUEST < 1:
            raise ValueError(f"MAX_PANELS_PER_REQUEST must be at least 1, got {cls.MAX_PANELS_PER_REQUEST}")
