# backend/app/services/grade_mapper.py
from typing import List

from backend.app.schemas.predictor_schemas import Grade, GradeBand

# Highest band first; the last band catches everything below 60
GRADE_SCALE: List[GradeBand] = [
    GradeBand(min_score=90, letter="A", description="Excellent", color="green"),
    GradeBand(min_score=80, letter="B", description="Good", color="blue"),
    GradeBand(min_score=70, letter="C", description="Average", color="yellow"),
    GradeBand(min_score=60, letter="D", description="Below Average", color="orange"),
    GradeBand(min_score=0, letter="F", description="Needs Improvement", color="red"),
]


def get_grade(score: float) -> Grade:
    for band in GRADE_SCALE[:-1]:
        if score >= band.min_score:
            return Grade(letter=band.letter, description=band.description, color=band.color)
    fail = GRADE_SCALE[-1]
    return Grade(letter=fail.letter, description=fail.description, color=fail.color)
