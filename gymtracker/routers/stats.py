from datetime import datetime
from fastapi import APIRouter, Depends
from gymtracker.deps.ledger import get_ledger
from gymtracker.schemas.stats import WorkoutStatsRead
from gymtracker.services.aggregator import workout_stats
from gymtracker.services.ledger import SessionLedger

router = APIRouter(prefix="/stats", tags=["stats"])

@router.get("", response_model=WorkoutStatsRead)
def get_stats(ledger: SessionLedger = Depends(get_ledger)):
    return workout_stats(ledger.workouts(), datetime.now())
