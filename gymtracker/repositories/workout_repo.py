from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from gymtracker.errors import PersistenceError
from gymtracker.models import Workout
from gymtracker.repositories.base import BaseRepository

class WorkoutRepository(BaseRepository):
    model = Workout

    def list_by_date(self) -> list[Workout]:
        """All workouts, newest first."""
        return self.fetch(Workout, Workout.started_at.desc(), Workout.id.desc())

    def get_in_progress(self) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.ended_at.is_(None))\
                              .order_by(Workout.started_at.desc(), Workout.id.desc())\
                              .limit(1)
        try:
            return self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
