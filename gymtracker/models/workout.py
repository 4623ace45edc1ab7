from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, DateTime, Text
from gymtracker.db import Base

class Workout(Base):
    __tablename__ = "workouts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    started_at: Mapped[datetime] = mapped_column(DateTime, index=True, nullable=False)
    ended_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutExercise.id",
    )

    @property
    def in_progress(self) -> bool:
        return self.ended_at is None

    @property
    def title(self) -> str:
        return f"{self.started_at:%A} Workout"

    @property
    def exercise_count(self) -> int:
        return len(self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(len(ex.sets) for ex in self.exercises)

    @property
    def total_reps(self) -> int:
        return sum(s.reps for ex in self.exercises for s in ex.sets)

    @property
    def total_weight(self) -> float:
        """Volume: weight x reps summed over every set."""
        return sum(s.weight * s.reps for ex in self.exercises for s in ex.sets)
