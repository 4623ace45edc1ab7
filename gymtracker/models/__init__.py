from gymtracker.models.exercise_template import ExerciseTemplate, MuscleGroup
from gymtracker.models.workout import Workout
from gymtracker.models.workout_exercise import WorkoutExercise
from gymtracker.models.exercise_set import ExerciseSet

__all__ = ["ExerciseTemplate", "MuscleGroup", "Workout", "WorkoutExercise", "ExerciseSet"]
