from fastapi import APIRouter, Depends, HTTPException, Query, status
from gymtracker.deps.ledger import get_ledger
from gymtracker.schemas.workout import WorkoutRead, WorkoutSummary
from gymtracker.services.aggregator import workouts_in_month
from gymtracker.services.ledger import SessionLedger

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutSummary])
def list_workouts(
    year: int | None = Query(None, ge=1970, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    ledger: SessionLedger = Depends(get_ledger),
):
    if (year is None) != (month is None):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                            detail="year and month must be given together")
    if year is None:
        return ledger.workouts()
    return workouts_in_month(ledger.workouts(), year, month)

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: int, ledger: SessionLedger = Depends(get_ledger)):
    workout = ledger.get_workout(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout
