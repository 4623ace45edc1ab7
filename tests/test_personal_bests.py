from gymtracker.models import ExerciseSet, ExerciseTemplate, MuscleGroup, Workout, WorkoutExercise
from gymtracker.services.personal_bests import update_personal_bests
from datetime import datetime

def template(name="Bench Press", best=None):
    return ExerciseTemplate(name=name, description="", muscle_group=MuscleGroup.push,
                            rest_seconds=90, personal_best=best)

def workout_with(tmpl, *weights):
    ex = WorkoutExercise(template=tmpl, sets=[ExerciseSet(reps=5, weight=w, completed=True) for w in weights])
    return Workout(started_at=datetime(2026, 10, 18), exercises=[ex])

def test_first_best_is_heaviest_set():
    t = template()
    changed = update_personal_bests(workout_with(t, 100, 135, 120))
    assert t.personal_best == 135
    assert changed == [t]

def test_raises_existing_best():
    t = template(best=150)
    update_personal_bests(workout_with(t, 140, 160))
    assert t.personal_best == 160

def test_never_lowers_best():
    t = template(best=150)
    changed = update_personal_bests(workout_with(t, 140, 150))
    assert t.personal_best == 150
    assert changed == []

def test_empty_exercise_sets_zero_when_no_best():
    t = template()
    update_personal_bests(workout_with(t))
    assert t.personal_best == 0

def test_each_exercise_updates_its_own_template():
    bench, squat = template("Bench Press", best=200), template("Squat")
    w = Workout(started_at=datetime(2026, 10, 18), exercises=[
        WorkoutExercise(template=bench, sets=[ExerciseSet(reps=3, weight=205, completed=True)]),
        WorkoutExercise(template=squat, sets=[ExerciseSet(reps=5, weight=225, completed=True)]),
    ])
    changed = update_personal_bests(w)
    assert (bench.personal_best, squat.personal_best) == (205, 225)
    assert changed == [bench, squat]
