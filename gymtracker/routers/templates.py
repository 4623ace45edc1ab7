from fastapi import APIRouter, Depends, Query
from gymtracker.deps.ledger import get_ledger, template_or_404
from gymtracker.models import MuscleGroup
from gymtracker.schemas.template import HistoryEntry, TemplateHistory, TemplateRead
from gymtracker.services.aggregator import exercise_history, format_history_entry
from gymtracker.services.ledger import SessionLedger
from gymtracker.settings import get_settings

router = APIRouter(prefix="/templates", tags=["templates"])

@router.get("", response_model=list[TemplateRead])
def list_templates(
    group: MuscleGroup | None = Query(None, description="push, pull or legs"),
    ledger: SessionLedger = Depends(get_ledger),
):
    return ledger.templates(group=group)

@router.get("/{template_id}", response_model=TemplateRead)
def get_template(template_id: int, ledger: SessionLedger = Depends(get_ledger)):
    return template_or_404(ledger, template_id)

@router.get("/{template_id}/history", response_model=TemplateHistory)
def get_history(
    template_id: int,
    limit: int | None = Query(None, ge=1, le=50),
    ledger: SessionLedger = Depends(get_ledger),
):
    settings = get_settings()
    template = template_or_404(ledger, template_id)
    recent = exercise_history(ledger.workouts(), template_id, limit=limit or settings.HISTORY_LIMIT)
    entries = [
        HistoryEntry(
            workout_id=ex.workout_id,
            started_at=ex.workout.started_at,
            summary=format_history_entry(ex, unit=settings.WEIGHT_UNIT),
        )
        for ex in recent
    ]
    return TemplateHistory(
        template_id=template.id,
        name=template.name,
        personal_best=template.personal_best,
        entries=entries,
    )
