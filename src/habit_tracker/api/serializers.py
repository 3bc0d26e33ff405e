"""Convert domain objects into JSON-ready payloads."""

from habit_tracker.domain.habits import HabitConfig
from habit_tracker.domain.progress import DailyProgress, DaySummary, WeeklyView
from habit_tracker.domain.records import CompletionStats


def habit_payload(habit: HabitConfig) -> dict[str, object]:
    return {
        "id": str(habit.id),
        "name": habit.name,
        "icon": habit.icon,
        "color": habit.color,
        "is_active": habit.is_active,
        "goals": habit.goals,
        "targets": {"daily": habit.targets.daily, "weekly": habit.targets.weekly},
        "aggregation": {key: str(mode) for key, mode in habit.aggregation.items()},
    }


def progress_payload(progress: DailyProgress) -> dict[str, object]:
    return {"overall": progress.overall, "details": progress.details}


def day_payload(day: DaySummary | None) -> dict[str, object] | None:
    if day is None:
        return None
    return {
        "date": day.date,
        "day_name": day.day_name,
        "record": day.record.flatten(day.date) if day.record else None,
    }


def weekly_payload(view: WeeklyView) -> dict[str, object]:
    return {
        "days": [day_payload(day) for day in view.days],
        "progress_percentage": view.progress_percentage,
        "best_day": day_payload(view.best_day),
        "worst_day": day_payload(view.worst_day),
        "trend": str(view.trend),
        "chart_data": [
            {"label": point.label, "value": point.value, "date": point.date}
            for point in view.chart_data
        ],
        "target_progress": view.target_progress,
    }


def completion_payload(stats: CompletionStats) -> dict[str, object]:
    return {
        "total_days": stats.total_days,
        "completed_days": stats.completed_days,
        "completion_rate": stats.completion_rate,
        "records": stats.records,
    }
