from gymtracker.models.user import User
from gymtracker.models.exercise_definition import ExerciseDefinition
from gymtracker.models.template import WorkoutTemplate, TemplateExercise
from gymtracker.models.workout import WorkoutSession, CompletedExercise, ExerciseSet

__all__ = [
    "User",
    "ExerciseDefinition",
    "WorkoutTemplate",
    "TemplateExercise",
    "WorkoutSession",
    "CompletedExercise",
    "ExerciseSet",
]
