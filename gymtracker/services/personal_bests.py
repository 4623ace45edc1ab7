from __future__ import annotations
from gymtracker.models import ExerciseTemplate, Workout

def update_personal_bests(workout: Workout) -> list[ExerciseTemplate]:
    """
    Raise each template's personal best to the heaviest set in `workout`.

    A best is only ever raised, never lowered. Returns the templates that
    changed; the caller owns the save.
    """
    changed: list[ExerciseTemplate] = []
    for ex in workout.exercises:
        template = ex.template
        top = max((s.weight for s in ex.sets), default=0)
        if template.personal_best is None or top > template.personal_best:
            template.personal_best = top
            changed.append(template)
    return changed
