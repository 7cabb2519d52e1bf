# backend/app/schemas/dashboard_schemas.py
from pydantic import BaseModel
from typing import List


class StatValue(BaseModel):
    value: int
    change: float  # percent vs. previous period


class DashboardStats(BaseModel):
    total_students: StatValue
    average_score: StatValue
    top_performers: StatValue
    attendance_rate: StatValue
    improvement_rate: StatValue
    at_risk_students: StatValue


class SubjectPerformance(BaseModel):
    subject: str
    score: int
    average: int
    students: int
    target: int = 85


class TrendPoint(BaseModel):
    month: str
    score: int
    attendance: int
    participation: int


class GradeCount(BaseModel):
    name: str
    value: int


class ActivityEntry(BaseModel):
    name: str
    subject: str
    score: int
    status: str
    time: str


class DashboardSnapshot(BaseModel):
    timeframe: str
    generated_at: str
    stats: DashboardStats
    performance: List[SubjectPerformance]
    trend: List[TrendPoint]
    grade_distribution: List[GradeCount]
    recent_activity: List[ActivityEntry]


class Feature(BaseModel):
    title: str
    description: str


class HeadlineStat(BaseModel):
    number: str
    label: str


class Testimonial(BaseModel):
    name: str
    role: str
    content: str
    rating: int


class LandingContent(BaseModel):
    title: str
    tagline: str
    features: List[Feature]
    stats: List[HeadlineStat]
    testimonials: List[Testimonial]
