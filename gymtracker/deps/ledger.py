# gymtracker/deps/ledger.py
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from gymtracker.db import get_db
from gymtracker.models import ExerciseTemplate, Workout
from gymtracker.services.ledger import SessionLedger

def get_ledger(db: Session = Depends(get_db)) -> SessionLedger:
    return SessionLedger(db)

def require_active_workout(ledger: SessionLedger = Depends(get_ledger)) -> Workout:
    if ledger.active is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No workout in progress")
    return ledger.active

def template_or_404(ledger: SessionLedger, template_id: int) -> ExerciseTemplate:
    template = ledger.get_template(template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return template
