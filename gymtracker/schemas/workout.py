from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, StringConstraints
from gymtracker.schemas.exercise_set import SetRead

# Notes: trimmed, up to 500 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

class WorkoutStart(BaseModel):
    notes: NotesStr | None = None

class WorkoutExerciseRead(BaseModel):
    id: int
    template_id: int
    name: str
    sets: list[SetRead]

    model_config = {"from_attributes": True}

class WorkoutTotalsRead(BaseModel):
    exercises: int
    sets: int
    reps: int
    lbs: int

class WorkoutRead(BaseModel):
    id: int
    title: str
    started_at: datetime
    ended_at: datetime | None = None
    notes: str | None = None
    total_sets: int
    total_reps: int
    total_weight: float
    exercises: list[WorkoutExerciseRead]

    model_config = {"from_attributes": True}

class WorkoutSummary(BaseModel):
    id: int
    title: str
    started_at: datetime
    ended_at: datetime | None = None
    exercise_count: int
    total_weight: float

    model_config = {"from_attributes": True}

class ActiveWorkoutRead(WorkoutRead):
    totals: WorkoutTotalsRead
