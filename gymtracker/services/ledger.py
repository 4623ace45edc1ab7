# gymtracker/services/ledger.py
"""
Session ledger: owns the single in-progress workout and every mutation of it.

The ledger is a two-state machine:

    IDLE --start_session--> IN_PROGRESS --end_session--> IDLE

Starting while a workout is in progress is rejected instead of silently
replacing it, so an unfinished workout is never orphaned without its
personal bests being applied.

Storage failures are swallowed here. A failed save is rolled back and
logged, then the workout graph (its exercises, sets, end time and raised
personal bests) is put back in memory exactly as it was before the save.
Those values are not stored and are not retried by a later commit.
A failed fetch reads as empty. Callers that need durability must confirm it themselves.
"""
from __future__ import annotations
import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, TypeVar

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from gymtracker.errors import NoActiveSessionError, PersistenceError, SessionInProgressError
from gymtracker.models import ExerciseSet, ExerciseTemplate, MuscleGroup, Workout, WorkoutExercise
from gymtracker.repositories.template_repo import TemplateRepository
from gymtracker.repositories.workout_repo import WorkoutRepository
from gymtracker.services.catalog import seed_if_empty
from gymtracker.services.personal_bests import update_personal_bests

log = logging.getLogger(__name__)

R = TypeVar("R")

class LedgerState(str, Enum):
    idle = "idle"
    in_progress = "in_progress"

class SessionLedger:
    def __init__(self, db: Session):
        self.template_repo = TemplateRepository(db)
        self.workout_repo = WorkoutRepository(db)
        self._active: Optional[Workout] = None

        self._quietly(lambda: seed_if_empty(self.template_repo), default=0, action="seed catalog")
        self._active = self._quietly(self.workout_repo.get_in_progress, default=None,
                                     action="load active workout")
        # closed in memory by an end_session whose save failed
        if self._active is not None and not self._active.in_progress:
            self._active = None

    # STATE
    @property
    def state(self) -> LedgerState:
        return LedgerState.idle if self._active is None else LedgerState.in_progress

    @property
    def active(self) -> Optional[Workout]:
        return self._active

    # WRITES
    def start_session(self, now: datetime | None = None, *, notes: str | None = None) -> Workout:
        if self._active is not None:
            raise SessionInProgressError(self._active.id)
        workout = self.workout_repo.insert(Workout(started_at=now or datetime.now(), notes=notes))
        self._save("start session")
        self._active = workout
        log.info("workout %s started at %s", workout.id, workout.started_at)
        return workout

    def record_set(self, template: ExerciseTemplate, reps: int, weight: float) -> ExerciseSet:
        """Append a set to the active workout, creating its exercise entry on first use.

        reps >= 1 and weight >= 0 are checked by the request schema, not here.
        """
        workout = self._active
        if workout is None:
            raise NoActiveSessionError()

        entry = self.find_exercise(template.id)
        if entry is None:
            entry = WorkoutExercise(template_id=template.id, template=template)
            workout.exercises.append(entry)

        logged = ExerciseSet(reps=reps, weight=weight, completed=True)
        entry.sets.append(logged)
        self._save("record set", restore=self._snapshot(workout))
        return logged

    def end_session(self, now: datetime | None = None) -> Optional[Workout]:
        workout = self._active
        if workout is None:
            return None
        workout.ended_at = now or datetime.now()
        raised = update_personal_bests(workout)
        # one commit covers the closed workout and every raised best
        self._save("end session", restore=self._snapshot(workout))
        self._active = None
        log.info("workout %s ended, %d personal best(s) raised", workout.id, len(raised))
        return workout

    # READS
    def find_exercise(self, template_id: int) -> Optional[WorkoutExercise]:
        if self._active is None:
            return None
        return next((ex for ex in self._active.exercises if ex.template_id == template_id), None)

    def templates(self, group: MuscleGroup | None = None) -> list[ExerciseTemplate]:
        return self._quietly(lambda: self.template_repo.list_by_name(group=group),
                             default=[], action="fetch templates")

    def get_template(self, template_id: int) -> Optional[ExerciseTemplate]:
        return self._quietly(lambda: self.template_repo.find(template_id),
                             default=None, action="fetch template")

    def workouts(self) -> list[Workout]:
        """All workouts, newest first."""
        return self._quietly(self.workout_repo.list_by_date, default=[], action="fetch workouts")

    def get_workout(self, workout_id: int) -> Optional[Workout]:
        return self._quietly(lambda: self.workout_repo.find(workout_id),
                             default=None, action="fetch workout")

    # HELPERS
    def _save(self, action: str, restore: Callable[[], None] | None = None) -> bool:
        try:
            self.workout_repo.save()
            return True
        except PersistenceError as e:
            # the rollback expired the graph; put the unsaved change back
            if restore is not None:
                restore()
            log.warning("%s: save failed and was rolled back, change is in memory but not stored: %s",
                        action, e)
            return False

    def _snapshot(self, workout: Workout) -> Callable[[], None]:
        """Capture the loaded workout graph so it can be re-applied after a rollback.

        Values go back with set_committed_value: nothing is reloaded from the
        database and nothing is queued for the next commit.
        """
        graph: list = [workout]
        links: list = [(workout, "exercises", list(workout.exercises))]
        for ex in workout.exercises:
            graph += [ex, ex.template, *ex.sets]
            links += [(ex, "workout", workout), (ex, "template", ex.template), (ex, "sets", list(ex.sets))]
            links += [(s, "workout_exercise", ex) for s in ex.sets]
        values = [
            (obj, {attr.key: getattr(obj, attr.key) for attr in sa_inspect(obj).mapper.column_attrs})
            for obj in graph
        ]

        def restore() -> None:
            for obj, columns in values:
                for key, value in columns.items():
                    set_committed_value(obj, key, value)
            for obj, key, value in links:
                set_committed_value(obj, key, value)
        return restore

    def _quietly(self, fn: Callable[[], R], *, default: R, action: str) -> R:
        try:
            return fn()
        except PersistenceError as e:
            log.warning("%s failed: %s", action, e)
            return default
