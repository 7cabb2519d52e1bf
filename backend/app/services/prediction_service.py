# backend/app/services/prediction_service.py
import logging
import random
from typing import Any, Dict, Optional

from backend.app.schemas.predictor_schemas import PredictionResult, StudentInputs
from backend.app.services.grade_mapper import get_grade
from backend.app.services.insight_generator import (
    build_radar_data,
    generate_study_plan,
    get_recommendation,
    get_strengths,
    get_weaknesses,
)
from backend.app.services.score_calculator import calculate_score

logger = logging.getLogger(__name__)

CONFIDENCE_MIN = 80
CONFIDENCE_SPAN = 15  # 80..94 inclusive


class PredictionService:
    """
    Builds a full PredictionResult from one snapshot of the form.
    Only the confidence value is random; pass a seeded random.Random to pin it.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def sample_confidence(self) -> int:
        return CONFIDENCE_MIN + self.rng.randrange(CONFIDENCE_SPAN)

    def predict(self, inputs: StudentInputs) -> PredictionResult:
        score = calculate_score(inputs)
        grade = get_grade(score)
        logger.info(f"Predicted score {score} (grade {grade.letter})")

        return PredictionResult(
            score=score,
            grade=grade,
            confidence=self.sample_confidence(),
            recommendation=get_recommendation(score, inputs),
            strengths=get_strengths(inputs),
            weaknesses=get_weaknesses(inputs),
            study_plan=generate_study_plan(inputs),
            radar_data=build_radar_data(inputs),
        )

    def predict_from_form(self, form: Dict[str, Any]) -> PredictionResult:
        """Raw form dict (camelCase or snake_case keys, string values allowed)."""
        return self.predict(StudentInputs.model_validate(form))
