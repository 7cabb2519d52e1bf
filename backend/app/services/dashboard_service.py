# backend/app/services/dashboard_service.py
import logging
import random
from datetime import datetime, timezone
from typing import List, Optional

from backend.app.schemas.dashboard_schemas import (
    ActivityEntry,
    DashboardSnapshot,
    DashboardStats,
    GradeCount,
    StatValue,
    SubjectPerformance,
    TrendPoint,
)

logger = logging.getLogger(__name__)

TIMEFRAMES = ("week", "month", "quarter", "year")
SUBJECTS = ["Mathematics", "Science", "English", "History", "Computer Science"]
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
SUBJECT_TARGET = 85

# name -> (base, span, change %); sampled value is base + randrange(span)
STAT_RANGES = {
    "total_students": (2350, 500, 3.2),
    "average_score": (78, 12, 2.1),
    "top_performers": (320, 80, 5.4),
    "attendance_rate": (87, 8, -1.2),
    "improvement_rate": (65, 15, 4.8),
    "at_risk_students": (45, 30, -8.3),
}

# letter -> (base, span)
GRADE_COUNT_RANGES = {
    "A": (200, 100),
    "B": (300, 150),
    "C": (250, 100),
    "D": (150, 80),
    "F": (50, 50),
}

RECENT_ACTIVITY = [
    ActivityEntry(name="Alice Johnson", subject="Math", score=95, status="Excellent", time="5 min"),
    ActivityEntry(name="Bob Smith", subject="Science", score=78, status="Good", time="15 min"),
    ActivityEntry(name="Carol Davis", subject="English", score=82, status="Good", time="25 min"),
    ActivityEntry(name="David Wilson", subject="History", score=65, status="Needs Help", time="35 min"),
    ActivityEntry(name="Eva Brown", subject="CS", score=98, status="Excellent", time="45 min"),
]


class DashboardService:
    """
    Simulated "live" dashboard figures. Every call draws a fresh sample;
    nothing is read from or written to storage.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _sample(self, base: int, span: int) -> int:
        return base + self.rng.randrange(span)

    def sample_performance(self) -> List[SubjectPerformance]:
        return [
            SubjectPerformance(
                subject=subject,
                score=self._sample(70, 25),
                average=self._sample(65, 20),
                students=self._sample(150, 100),
                target=SUBJECT_TARGET,
            )
            for subject in SUBJECTS
        ]

    def sample_trend(self) -> List[TrendPoint]:
        return [
            TrendPoint(
                month=month,
                score=self._sample(65, 20),
                attendance=self._sample(75, 15),
                participation=self._sample(60, 25),
            )
            for month in MONTHS
        ]

    def sample_stats(self) -> DashboardStats:
        values = {
            name: StatValue(value=self._sample(base, span), change=change)
            for name, (base, span, change) in STAT_RANGES.items()
        }
        return DashboardStats(**values)

    def sample_grade_distribution(self) -> List[GradeCount]:
        return [
            GradeCount(name=letter, value=self._sample(base, span))
            for letter, (base, span) in GRADE_COUNT_RANGES.items()
        ]

    def generate_snapshot(self, timeframe: str = "week") -> DashboardSnapshot:
        if timeframe not in TIMEFRAMES:
            raise ValueError(f"Unknown timeframe '{timeframe}'. Expected one of: {', '.join(TIMEFRAMES)}")

        snapshot = DashboardSnapshot(
            timeframe=timeframe,
            generated_at=datetime.now(timezone.utc).isoformat(),
            stats=self.sample_stats(),
            performance=self.sample_performance(),
            trend=self.sample_trend(),
            grade_distribution=self.sample_grade_distribution(),
            recent_activity=list(RECENT_ACTIVITY),
        )
        logger.info(f"Generated dashboard snapshot for timeframe={timeframe}")
        return snapshot
