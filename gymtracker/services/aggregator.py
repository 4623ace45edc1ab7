# gymtracker/services/aggregator.py
"""
Read-side statistics over workouts.

Everything here is a pure function of the objects passed in; nothing
touches the database. Callers hand over workouts sorted newest first
(the order WorkoutRepository.list_by_date returns).
"""
from __future__ import annotations
import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Sequence

from gymtracker.models import Workout, WorkoutExercise

DEFAULT_HISTORY_LIMIT = 4

@dataclass(slots=True)
class WorkoutStats:
    workouts_per_week: int = 0
    workouts_this_month: int = 0
    exercises_per_workout: int = 0
    exercises_this_month: int = 0

@dataclass(slots=True)
class LiveStats:
    sets: int = 0
    reps: int = 0
    lbs: int = 0

@dataclass(slots=True)
class WorkoutTotals:
    exercises: int = 0
    sets: int = 0
    reps: int = 0
    lbs: int = 0


def one_week_ago(now: datetime) -> datetime:
    return now - timedelta(weeks=1)

def one_month_ago(now: datetime) -> datetime:
    """Same wall-clock time one calendar month earlier, day clamped to the month length."""
    year, month = (now.year - 1, 12) if now.month == 1 else (now.year, now.month - 1)
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def workout_stats(all_workouts: Sequence[Workout], now: datetime) -> WorkoutStats:
    """
    Dashboard numbers relative to `now`.

    exercises_per_workout averages over every workout ever logged, not just
    this month's, and truncates toward zero.
    """
    if not all_workouts:
        return WorkoutStats()

    week_start = one_week_ago(now)
    month_start = one_month_ago(now)
    this_month = [w for w in all_workouts if w.started_at >= month_start]

    total_exercises = sum(len(w.exercises) for w in all_workouts)
    return WorkoutStats(
        workouts_per_week=sum(1 for w in all_workouts if w.started_at >= week_start),
        workouts_this_month=len(this_month),
        exercises_per_workout=total_exercises // len(all_workouts),
        exercises_this_month=sum(len(w.exercises) for w in this_month),
    )


def workouts_in_month(all_workouts: Iterable[Workout], year: int, month: int) -> list[Workout]:
    return [w for w in all_workouts if (w.started_at.year, w.started_at.month) == (year, month)]


def exercise_history(
    all_workouts: Iterable[Workout],
    template_id: int,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> Iterator[WorkoutExercise]:
    """Yield the most recent WorkoutExercise for `template_id`, at most one per workout."""
    if limit <= 0:
        return
    found = 0
    for workout in all_workouts:
        match = next((ex for ex in workout.exercises if ex.template_id == template_id), None)
        if match is None:
            continue
        yield match
        found += 1
        if found >= limit:
            return


def format_history_entry(workout_exercise: WorkoutExercise, unit: str = "lbs") -> str:
    sets = workout_exercise.sets
    if not sets:
        return "0 sets"

    reps = [s.reps for s in sets]
    weights = [int(s.weight) for s in sets]
    min_reps, max_reps = min(reps), max(reps)
    min_w, max_w = min(weights), max(weights)
    n = len(sets)

    if min_reps == max_reps and min_w == max_w:
        return f"{n} x {min_reps} x {min_w} {unit}"
    if min_w == max_w:
        return f"{n} x {min_reps}-{max_reps} x {min_w} {unit}"
    # varying weight prints min reps only, even when reps vary too
    return f"{n} x {min_reps} x {min_w}-{max_w} {unit}"


def live_session_stats(workout_exercise: WorkoutExercise | None) -> LiveStats:
    if workout_exercise is None:
        return LiveStats()
    stats = LiveStats()
    for s in workout_exercise.sets:
        stats.sets += 1
        stats.reps += s.reps
        stats.lbs += int(s.weight * s.reps)  # truncated per set, then summed
    return stats


def workout_totals(workout: Workout) -> WorkoutTotals:
    totals = WorkoutTotals(exercises=len(workout.exercises))
    for ex in workout.exercises:
        live = live_session_stats(ex)
        totals.sets += live.sets
        totals.reps += live.reps
        totals.lbs += live.lbs
    return totals
