# backend/app/services/insight_generator.py
"""
Rule-based feedback for a predicted score.

Every list is built by walking a fixed sequence of threshold checks, so the
order of the output never changes for the same inputs. When no check fires,
a canned fallback is returned instead of an empty list.
"""
from typing import List

from backend.app.schemas.predictor_schemas import RadarPoint, StudentInputs

STRENGTHS_FALLBACK = ["Regular attendance", "Shows interest in learning"]
WEAKNESSES_FALLBACK = ["Could benefit from more practice", "Consider seeking additional resources"]
STUDY_PLAN_FALLBACK = [
    "✨ Maintain current habits",
    "🎯 Focus on advanced topics",
    "📖 Review material regularly",
    "🤔 Practice problem-solving daily",
]


def get_recommendation(score: int, inputs: StudentInputs) -> str:
    if score >= 90:
        return ("Excellent performance! Consider taking advanced courses or mentoring other students. "
                "Your study habits are working well.")
    elif score >= 80:
        if inputs.study_hours < 20:
            return "Good performance! Increasing study hours to 20+ per week could help you reach excellence."
        return "Good performance! Focus on weak areas and consider group study sessions for better understanding."
    elif score >= 70:
        if inputs.attendance < 85:
            return ("Average performance. Improving attendance to 85%+ and regular review of class notes "
                    "is recommended.")
        return ("Average performance. Create a structured study schedule and seek help from teachers "
                "for difficult topics.")
    elif score >= 60:
        if inputs.assignments < 70:
            return ("Below average performance. Focus on completing all assignments on time and attend "
                    "extra help sessions.")
        return ("Below average performance. Consider tutoring and forming study groups with "
                "better-performing students.")
    return ("Critical performance. Immediate intervention required. Schedule a meeting with academic "
            "counselor and parents.")


def get_strengths(inputs: StudentInputs) -> List[str]:
    strengths = []
    if inputs.attendance > 85:
        strengths.append("Excellent attendance record")
    if inputs.study_hours > 20:
        strengths.append("Dedicated study habits")
    if inputs.assignments > 80:
        strengths.append("Strong assignment completion")
    if inputs.class_participation > 70:
        strengths.append("Active class participation")
    if inputs.sleep_hours >= 7:
        strengths.append("Good sleep schedule")
    # narrower bands just under the headline thresholds
    if 15 < inputs.study_hours <= 20:
        strengths.append("Consistent study routine")
    if 70 < inputs.assignments <= 80:
        strengths.append("Satisfactory assignment submission")

    return strengths or list(STRENGTHS_FALLBACK)


def get_weaknesses(inputs: StudentInputs) -> List[str]:
    weaknesses = []
    if inputs.attendance < 75:
        weaknesses.append("Attendance needs improvement")
    if inputs.study_hours < 15:
        weaknesses.append("Insufficient study time")
    if inputs.assignments < 70:
        weaknesses.append("Assignment completion rate low")
    if inputs.class_participation < 50:
        weaknesses.append("Limited class participation")
    if inputs.sleep_hours < 6:
        weaknesses.append("Inadequate sleep")
    if inputs.previous_score < 60:
        weaknesses.append("Needs to build foundational knowledge")
    if 75 <= inputs.attendance < 85:
        weaknesses.append("Attendance could be better")

    return weaknesses or list(WEAKNESSES_FALLBACK)


def generate_study_plan(inputs: StudentInputs) -> List[str]:
    plans = []
    if inputs.study_hours < 20:
        plans.append("📚 Increase study hours to 20+ per week")
    if inputs.attendance < 90:
        plans.append("🏫 Aim for 90%+ attendance rate")
    if inputs.assignments < 85:
        plans.append("📝 Complete all assignments on time")
    if inputs.class_participation < 60:
        plans.append("🗣️ Participate more in class discussions")
    if inputs.sleep_hours < 7:
        plans.append("😴 Get 7-8 hours of sleep daily")

    # combined gaps get a more specific suggestion
    if inputs.study_hours < 15 and inputs.assignments < 70:
        plans.append("📅 Create a daily study schedule with assignment deadlines")
    if inputs.attendance < 80 and inputs.class_participation < 50:
        plans.append("🤝 Set goals for weekly attendance and class participation")

    return plans or list(STUDY_PLAN_FALLBACK)


def build_radar_data(inputs: StudentInputs) -> List[RadarPoint]:
    # Study and sleep hours are rescaled so that 20h/week and 8h/night reach the full mark
    return [
        RadarPoint(subject="Study Hours", value=min(100.0, inputs.study_hours * 5)),
        RadarPoint(subject="Attendance", value=inputs.attendance),
        RadarPoint(subject="Assignments", value=inputs.assignments),
        RadarPoint(subject="Participation", value=inputs.class_participation),
        RadarPoint(subject="Sleep", value=min(100.0, inputs.sleep_hours * 12.5)),
        RadarPoint(subject="Previous Score", value=inputs.previous_score),
    ]
