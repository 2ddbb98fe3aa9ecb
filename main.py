# src/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from database import init_db
from subscription.routes import router as subscription_router
from insights.routes import router as insights_router
from dev.routes import router as dev_router

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="WiseWallet API",
    description="Recurring subscription tracking with spending insights",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(subscription_router)
app.include_router(insights_router)
if settings.ENABLE_DEV_ROUTES:
    app.include_router(dev_router)

@app.on_event("startup")
async def startup_event():
    """Ensure the database tables exist."""
    logger.info(f"Starting WiseWallet API ({settings.ENVIRONMENT})")
    init_db()

@app.get("/")
async def root():
    """Health check."""
    return {"message": "WiseWallet API is running"}
