from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Response, status
from gymtracker.deps.ledger import get_ledger, require_active_workout, template_or_404
from gymtracker.errors import NoActiveSessionError, SessionInProgressError
from gymtracker.models import Workout
from gymtracker.schemas.exercise_set import LiveStatsRead, SetCreate, SetRead
from gymtracker.schemas.workout import ActiveWorkoutRead, WorkoutRead, WorkoutStart
from gymtracker.services.aggregator import live_session_stats, workout_totals
from gymtracker.services.ledger import SessionLedger

router = APIRouter(prefix="/session", tags=["session"])

def _active_read(workout: Workout) -> ActiveWorkoutRead:
    body = WorkoutRead.model_validate(workout).model_dump()
    return ActiveWorkoutRead(**body, totals=asdict(workout_totals(workout)))

@router.get("", response_model=ActiveWorkoutRead)
def get_active(workout: Workout = Depends(require_active_workout)):
    return _active_read(workout)

@router.post("", response_model=ActiveWorkoutRead, status_code=status.HTTP_201_CREATED)
def start_session(payload: WorkoutStart | None = None, ledger: SessionLedger = Depends(get_ledger)):
    try:
        workout = ledger.start_session(notes=payload.notes if payload else None)
    except SessionInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _active_read(workout)

@router.post("/sets", response_model=SetRead, status_code=status.HTTP_201_CREATED)
def record_set(payload: SetCreate, ledger: SessionLedger = Depends(get_ledger)):
    template = template_or_404(ledger, payload.template_id)
    try:
        return ledger.record_set(template, reps=payload.reps, weight=payload.weight)
    except NoActiveSessionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.get("/exercises/{template_id}", response_model=LiveStatsRead)
def exercise_stats(
    template_id: int,
    ledger: SessionLedger = Depends(get_ledger),
    _active: Workout = Depends(require_active_workout),
):
    template = template_or_404(ledger, template_id)
    stats = live_session_stats(ledger.find_exercise(template.id))
    return LiveStatsRead(template_id=template.id, **asdict(stats))

@router.post("/end", response_model=WorkoutRead, responses={204: {"description": "No workout in progress"}})
def end_session(ledger: SessionLedger = Depends(get_ledger)):
    workout = ledger.end_session()
    if workout is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return workout
