import pytest

from backend.app.schemas.predictor_schemas import StudentInputs
from backend.app.services.score_calculator import calculate_score, weighted_sum

EXAMPLE_FORM = {
    "studyHours": 20,
    "previousScore": 75,
    "attendance": 90,
    "assignments": 85,
    "extracurricular": 5,
    "sleepHours": 7,
    "classParticipation": 80,
}


def test_reference_example_is_capped_at_100():
    inputs = StudentInputs.model_validate(EXAMPLE_FORM)
    assert weighted_sum(inputs) == pytest.approx(424.5)
    assert calculate_score(inputs) == 100


def test_all_zero_inputs_score_zero():
    assert calculate_score(StudentInputs()) == 0


def test_mid_range_score():
    inputs = StudentInputs(study_hours=10, previous_score=60, attendance=80, assignments=5)
    # 25 + 18 + 20 + 9
    assert calculate_score(inputs) == 72


def test_half_point_rounds_up():
    # 4 * 2.5 + 15 * 0.3 = 14.5
    inputs = StudentInputs(study_hours=4, previous_score=15)
    assert calculate_score(inputs) == 15


def test_negative_inputs_clamp_to_zero():
    inputs = StudentInputs(study_hours=-100, previous_score=10)
    assert calculate_score(inputs) == 0


def test_declared_maxima_stay_in_bounds():
    inputs = StudentInputs(
        study_hours=168, previous_score=100, attendance=100, assignments=100,
        extracurricular=168, sleep_hours=24, class_participation=100,
    )
    assert calculate_score(inputs) == 100


def test_huge_opposite_inputs_do_not_crash():
    inputs = StudentInputs(study_hours=1e308, class_participation=-1e308)
    assert 0 <= calculate_score(inputs) <= 100


def test_non_numeric_fields_count_as_zero():
    inputs = StudentInputs.model_validate({"studyHours": "abc", "previousScore": None, "attendance": "80%"})
    assert inputs.study_hours == 0.0
    assert inputs.previous_score == 0.0
    assert inputs.attendance == 80.0
    assert calculate_score(inputs) == 20


def test_snake_case_and_camel_case_agree():
    camel = StudentInputs.model_validate(EXAMPLE_FORM)
    snake = StudentInputs(
        study_hours=20, previous_score=75, attendance=90, assignments=85,
        extracurricular=5, sleep_hours=7, class_participation=80,
    )
    assert camel == snake
