from typing import Annotated
from pydantic import BaseModel, Field

PosInt = Annotated[int, Field(ge=1)]
NonNegFloat = Annotated[float, Field(ge=0, le=2000)]

class SetCreate(BaseModel):
    template_id: int
    reps: PosInt
    weight: NonNegFloat = 0

class SetRead(BaseModel):
    id: int
    workout_exercise_id: int
    reps: int
    weight: float
    completed: bool

    model_config = {"from_attributes": True}

class LiveStatsRead(BaseModel):
    template_id: int
    sets: int
    reps: int
    lbs: int
