# backend/app/services/score_calculator.py
import math
from typing import Dict

from backend.app.schemas.predictor_schemas import StudentInputs
from backend.app.utils.scoring_utils import clamp, round_half_up

# Points contributed per unit of each input
SCORE_WEIGHTS: Dict[str, float] = {
    "study_hours": 2.5,
    "previous_score": 0.3,
    "attendance": 0.25,
    "assignments": 1.8,
    "extracurricular": 1.2,
    "sleep_hours": 1.5,
    "class_participation": 2.0,
}

MIN_SCORE = 0
MAX_SCORE = 100


def weighted_sum(inputs: StudentInputs) -> float:
    return sum(getattr(inputs, field) * weight for field, weight in SCORE_WEIGHTS.items())


def calculate_score(inputs: StudentInputs) -> int:
    """
    Predicted score in [0, 100]: the weighted sum, rounded half-up, then clamped.
    """
    raw = weighted_sum(inputs)
    if math.isnan(raw):
        # huge inputs of opposite sign can cancel to inf - inf
        raw = 0.0
    # Clamping first keeps round() away from inf; the bounds are integers so order doesn't matter
    return round_half_up(clamp(raw, MIN_SCORE, MAX_SCORE))
