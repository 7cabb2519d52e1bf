import pytest

from backend.app.services.grade_mapper import GRADE_SCALE, get_grade


@pytest.mark.parametrize(
    "score, letter, description",
    [
        (100, "A", "Excellent"),
        (90, "A", "Excellent"),
        (89, "B", "Good"),
        (80, "B", "Good"),
        (79, "C", "Average"),
        (70, "C", "Average"),
        (69, "D", "Below Average"),
        (60, "D", "Below Average"),
        (59, "F", "Needs Improvement"),
        (0, "F", "Needs Improvement"),
    ],
)
def test_grade_boundaries(score, letter, description):
    grade = get_grade(score)
    assert grade.letter == letter
    assert grade.description == description


def test_every_score_gets_exactly_one_band():
    for score in range(0, 101):
        matches = [
            band for i, band in enumerate(GRADE_SCALE)
            if score >= band.min_score and (i == 0 or score < GRADE_SCALE[i - 1].min_score)
        ]
        assert len(matches) == 1
        assert get_grade(score).letter == matches[0].letter


def test_fractional_score_below_boundary():
    assert get_grade(89.9).letter == "B"


def test_grade_colors():
    assert [get_grade(s).color for s in (95, 85, 75, 65, 10)] == ["green", "blue", "yellow", "orange", "red"]
