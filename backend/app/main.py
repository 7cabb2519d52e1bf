# backend/app/main.py
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.config.settings import settings
from backend.app.routers import dashboard, predictor

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# ==================== FastAPI App ====================
app = FastAPI(
    title=settings.app_title,
    description="Rule-based student performance predictor with insights and a simulated analytics dashboard",
    version="1.0.0",
    docs_url="/docs",
    redoc_url=None
)

# CORS: allow the Streamlit frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(predictor.router)
app.include_router(dashboard.router)


# ==================== Routes ====================

@app.get("/")
async def root():
    return {
        "message": f"{settings.app_title} is LIVE",
        "status": "ready",
        "docs": "/docs"
    }


@app.get("/api/health")
async def health():
    return {
        "status": "healthy",
        "prediction_delay_seconds": settings.prediction_delay_seconds,
    }


# ==================== Run Server ====================
if __name__ == "__main__":
    logger.info(f"Starting {settings.app_title} API on http://{settings.api_host}:{settings.api_port}/docs")
    uvicorn.run("backend.app.main:app", host=settings.api_host, port=settings.api_port, reload=True,
                log_level=settings.log_level.lower())
