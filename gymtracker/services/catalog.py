"""
Fixed exercise catalog and the one-time seeding that installs it.

The catalog is only written into an empty database. Later edits to
CATALOG never reach a database that already holds templates.
"""
from __future__ import annotations
import logging
from typing import NamedTuple

from gymtracker.models import ExerciseTemplate, MuscleGroup
from gymtracker.repositories.template_repo import TemplateRepository

log = logging.getLogger(__name__)

class CatalogEntry(NamedTuple):
    name: str
    group: MuscleGroup
    rest_seconds: int
    description: str

PUSH, PULL, LEGS = MuscleGroup.push, MuscleGroup.pull, MuscleGroup.legs

CATALOG: tuple[CatalogEntry, ...] = (
    # push
    CatalogEntry("Bench Press", PUSH, 180, "Barbell press from the chest while lying on a flat bench."),
    CatalogEntry("Incline Bench Press", PUSH, 150, "Barbell press on a 30-45 degree bench, upper chest focus."),
    CatalogEntry("Dumbbell Bench Press", PUSH, 120, "Flat bench press with a dumbbell in each hand."),
    CatalogEntry("Overhead Press", PUSH, 150, "Standing barbell press from the shoulders to lockout overhead."),
    CatalogEntry("Dumbbell Shoulder Press", PUSH, 120, "Seated press with dumbbells from shoulder height."),
    CatalogEntry("Dumbbell Flyes", PUSH, 90, "Wide-arc chest fly on a flat bench with slightly bent elbows."),
    CatalogEntry("Dips", PUSH, 120, "Bodyweight or loaded dips on parallel bars, chest and triceps."),
    CatalogEntry("Tricep Pushdown", PUSH, 60, "Cable pushdown with a bar or rope, elbows pinned to the sides."),
    CatalogEntry("Lateral Raises", PUSH, 60, "Dumbbells raised out to the sides to shoulder height."),
    # pull
    CatalogEntry("Deadlift", PULL, 240, "Barbell lifted from the floor to a standing lockout."),
    CatalogEntry("Bent-over Rows", PULL, 150, "Barbell rowed to the lower chest with a hinged torso."),
    CatalogEntry("Pull-ups", PULL, 120, "Overhand hang to chin over the bar, bodyweight or loaded."),
    CatalogEntry("Lat Pulldown", PULL, 90, "Cable bar pulled to the upper chest from a seated position."),
    CatalogEntry("Seated Cable Row", PULL, 90, "Cable handle rowed to the torso with an upright back."),
    CatalogEntry("Dumbbell Row", PULL, 90, "Single-arm row with the free hand braced on a bench."),
    CatalogEntry("Face Pulls", PULL, 60, "Rope pulled toward the face at eye height, rear delts."),
    CatalogEntry("Barbell Curl", PULL, 60, "Standing curl with a straight or EZ barbell."),
    CatalogEntry("Hammer Curl", PULL, 60, "Neutral-grip dumbbell curl for biceps and forearms."),
    # legs
    CatalogEntry("Squat", LEGS, 240, "Back squat with the bar on the upper back to parallel or below."),
    CatalogEntry("Front Squat", LEGS, 180, "Squat with the bar racked on the front of the shoulders."),
    CatalogEntry("Romanian Deadlift", LEGS, 150, "Hip hinge with soft knees, bar kept close to the legs."),
    CatalogEntry("Leg Press", LEGS, 120, "Sled pressed away on a 45 degree leg press machine."),
    CatalogEntry("Walking Lunges", LEGS, 90, "Alternating forward lunges holding dumbbells."),
    CatalogEntry("Leg Curl", LEGS, 60, "Machine hamstring curl, lying or seated."),
    CatalogEntry("Calf Raises", LEGS, 60, "Standing raise onto the toes through a full range."),
)


def seed_if_empty(repo: TemplateRepository) -> int:
    """Insert CATALOG when no template exists yet. Returns the number inserted."""
    if repo.count() > 0:
        return 0
    for entry in CATALOG:
        repo.insert(ExerciseTemplate(
            name=entry.name,
            description=entry.description,
            muscle_group=entry.group,
            rest_seconds=entry.rest_seconds,
            personal_best=None,
        ))
    repo.save()
    log.info("seeded %d exercise templates", len(CATALOG))
    return len(CATALOG)
