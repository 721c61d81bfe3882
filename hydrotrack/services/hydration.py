"""Daily intake arithmetic shared by the intake endpoints and the streak engine."""
from collections import defaultdict
from dataclasses import dataclass
from datetime import date

from hydrotrack.utils.timeutils import date_range


@dataclass(frozen=True)
class DaySummary:
    total_intake: float
    daily_goal: float
    progress: float   # percent of goal, capped at 100
    remaining: float  # liters left, never negative


def total_intake(intakes) -> float:
    return round(sum(intake.amount for intake in intakes), 3)


def summarize_day(total: float, goal: float) -> DaySummary:
    """
    Example:
        goal=2.0, total=0.5+0.7+0.5 -> total_intake=1.7, progress=85.0, remaining=0.3
    """
    total = round(total, 3)
    progress = min(100.0, (total / goal) * 100) if goal > 0 else 100.0
    remaining = max(0.0, round(goal - total, 1))
    return DaySummary(
        total_intake=total,
        daily_goal=goal,
        progress=round(progress, 1),
        remaining=remaining,
    )


def daily_totals(intakes, start: date, end: date) -> list[dict]:
    """One {date, amount} row per day of [start, end], zero-filled."""
    per_day = defaultdict(float)
    for intake in intakes:
        per_day[intake.timestamp.date()] += intake.amount
    return [
        {"date": day.isoformat(), "amount": round(per_day.get(day, 0.0), 3)}
        for day in date_range(start, end)
    ]
