# backend/app/routers/predictor.py
import asyncio
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from backend.app.config.settings import settings
from backend.app.schemas.predictor_schemas import GradeBand, PredictionResult, StudentInputs
from backend.app.services.grade_mapper import GRADE_SCALE
from backend.app.services.prediction_service import PredictionService

logger = logging.getLogger(__name__)

router = APIRouter()

prediction_service = PredictionService()


def get_prediction_service() -> PredictionService:
    return prediction_service


async def simulate_latency(seconds: float):
    if seconds > 0:
        await asyncio.sleep(seconds)


@router.post("/api/predict", response_model=PredictionResult)
async def predict(
    inputs: StudentInputs,
    service: PredictionService = Depends(get_prediction_service),
):
    """
    Score one student snapshot and return grade, insights and radar values.
    Missing or non-numeric fields count as 0; there is no validation error for them.
    """
    await simulate_latency(settings.prediction_delay_seconds)

    try:
        return service.predict(inputs)
    except Exception as e:
        logger.error(f"Prediction failed: {e}")
        raise HTTPException(status_code=500, detail=f"Prediction failed: {str(e)}")


@router.get("/api/grades", response_model=List[GradeBand])
async def grade_scale():
    return GRADE_SCALE
