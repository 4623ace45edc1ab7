from datetime import datetime
from pydantic import BaseModel
from gymtracker.models import MuscleGroup

class TemplateRead(BaseModel):
    id: int
    name: str
    description: str
    muscle_group: MuscleGroup
    rest_seconds: int
    personal_best: float | None = None

    model_config = {"from_attributes": True}

class HistoryEntry(BaseModel):
    workout_id: int
    started_at: datetime
    summary: str

class TemplateHistory(BaseModel):
    template_id: int
    name: str
    personal_best: float | None = None
    entries: list[HistoryEntry]
