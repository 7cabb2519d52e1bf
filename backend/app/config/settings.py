# backend/app/config/settings.py
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    app_title: str = "Student Performance Predictor"
    api_host: str = "127.0.0.1"
    api_port: int = 5010
    # Artificial wait before a prediction is returned (the UI shows a spinner meanwhile)
    prediction_delay_seconds: float = 0.0
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        app_title=os.getenv("APP_TITLE", "Student Performance Predictor"),
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("API_PORT", "5010")),
        prediction_delay_seconds=float(os.getenv("PREDICTION_DELAY_SECONDS", "0")),
        cors_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()
