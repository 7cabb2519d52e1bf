# frontend/utils/form_fields.py
from typing import Any, Dict, List, NamedTuple, Optional


class FormField(NamedTuple):
    key: str          # camelCase name the API accepts
    label: str
    min_value: float
    max_value: float
    step: float
    placeholder: str


# Bounds are UI-only; the API itself accepts anything
PREDICTOR_FIELDS: List[FormField] = [
    FormField("studyHours", "Study Hours/Week", 0.0, 168.0, 1.0, "e.g., 20"),
    FormField("previousScore", "Previous Score (%)", 0.0, 100.0, 1.0, "e.g., 75"),
    FormField("attendance", "Attendance (%)", 0.0, 100.0, 1.0, "e.g., 90"),
    FormField("assignments", "Assignments (%)", 0.0, 100.0, 1.0, "e.g., 85"),
    FormField("extracurricular", "Extracurricular (hrs)", 0.0, 168.0, 1.0, "e.g., 5"),
    FormField("sleepHours", "Sleep Hours", 0.0, 24.0, 0.5, "e.g., 7"),
    FormField("classParticipation", "Class Participation (%)", 0.0, 100.0, 1.0, "e.g., 80"),
]


def build_payload(values: Dict[str, Optional[float]]) -> Dict[str, Any]:
    """Request body for /api/predict. Blank inputs are sent as null and score as 0."""
    return {field.key: values.get(field.key) for field in PREDICTOR_FIELDS}


def empty_form() -> Dict[str, Optional[float]]:
    return {field.key: None for field in PREDICTOR_FIELDS}
