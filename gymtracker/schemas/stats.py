from pydantic import BaseModel

class WorkoutStatsRead(BaseModel):
    workouts_per_week: int
    workouts_this_month: int
    exercises_per_workout: int
    exercises_this_month: int

    model_config = {"from_attributes": True}
