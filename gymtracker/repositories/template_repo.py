from __future__ import annotations
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from gymtracker.errors import PersistenceError
from gymtracker.models import ExerciseTemplate, MuscleGroup
from gymtracker.repositories.base import BaseRepository

class TemplateRepository(BaseRepository):
    model = ExerciseTemplate

    # READS
    def list_by_name(self, *, group: Optional[MuscleGroup] = None) -> list[ExerciseTemplate]:
        where = ExerciseTemplate.muscle_group == group if group is not None else None
        return self.fetch(ExerciseTemplate, ExerciseTemplate.name.asc(), where=where)

    def count(self) -> int:
        try:
            return self.db.execute(select(func.count()).select_from(ExerciseTemplate)).scalar_one()
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
