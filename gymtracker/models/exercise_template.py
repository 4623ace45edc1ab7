from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, Float, Text, Enum as SAEnum
from gymtracker.db import Base

class MuscleGroup(str, Enum):
    push = "push"
    pull = "pull"
    legs = "legs"

class ExerciseTemplate(Base):
    __tablename__ = "exercise_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    muscle_group: Mapped[MuscleGroup] = mapped_column(
        SAEnum(MuscleGroup, name="muscle_group"),
        index=True,
        nullable=False,
    )
    rest_seconds: Mapped[int] = mapped_column(Integer, nullable=False, default=90)
    # NULL until the first workout containing this exercise ends
    personal_best: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<ExerciseTemplate {self.id} {self.name!r}>"
