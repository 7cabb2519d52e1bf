# backend/app/schemas/predictor_schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List

from backend.app.utils.scoring_utils import parse_number


class StudentInputs(BaseModel):
    """
    The seven predictor form fields.
    Accepts snake_case or the frontend's camelCase names. Every value goes through
    parse_number, so a missing or garbled field quietly counts as 0.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    study_hours: float = Field(default=0.0, alias="studyHours")
    previous_score: float = Field(default=0.0, alias="previousScore")
    attendance: float = 0.0
    assignments: float = 0.0
    extracurricular: float = 0.0
    sleep_hours: float = Field(default=0.0, alias="sleepHours")
    class_participation: float = Field(default=0.0, alias="classParticipation")

    @field_validator("*", mode="before")
    @classmethod
    def _silent_zero(cls, value: Any) -> float:
        return parse_number(value)


class Grade(BaseModel):
    model_config = ConfigDict(frozen=True)

    letter: str
    description: str
    color: str


class RadarPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str
    value: float
    full_mark: int = 100


class PredictionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    grade: Grade
    confidence: int
    recommendation: str
    strengths: List[str]
    weaknesses: List[str]
    study_plan: List[str]
    radar_data: List[RadarPoint]


class GradeBand(BaseModel):
    min_score: int
    letter: str
    description: str
    color: str
