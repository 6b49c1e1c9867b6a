# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from api.utils.auth import get_api_key
from api.utils.config import Config
from api.endpoints.layout import router as layout_router
from typing import Dict

# Set up logging
logger = logging.getLogger("solar_mounting.api")
logger.setLevel(logging.DEBUG if Config.DEBUG else logging.INFO)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Run on application startup.")
    Config.validate()
    
    yield
    
    logger.info("Application shutting down.")

app = FastAPI(
    title="Solar Mounting API",
    description="""
    # Solar Mounting API
    
    Computes rafter mount points and inter-panel joint points for a
    rectangular solar panel array.
    
    ## Authentication
    
    Layout endpoints require an API key in the `X-API-Key` header.
    
    ## Workflow
    
    1. Submit panel positions and the rafter grid to `POST /layout/calculate`
    2. Receive mount and joint coordinates in the response
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Layout",
            "description": "Mount and joint calculation"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)

@app.get("/", tags=["Status"])
async def root():
    return {"status": "online", "message": "Solar Mounting API is running"}

@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.debug("Health check requested")
    return {"status": "healthy", "message": "Solar Mounting API is running"}

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(
    layout_router,
    prefix="/layout",
    tags=["Layout"],
    dependencies=[Depends(get_api_key)]
)

# Run with: uvicorn api.main:app --reload
