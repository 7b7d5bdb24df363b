from typing import Annotated
from pydantic import Field

from gymtracker.schemas.base import CamelModel

NonNegInt = Annotated[int, Field(ge=0)]

class SetCreate(CamelModel):
    reps: NonNegInt
    weight: float = 0

class CompletedExerciseCreate(CamelModel):
    # stored as sent; the definition is neither looked up nor checked
    exercise_definition_id: str
    exercise_name: str
    sets: list[SetCreate] = []

class WorkoutSessionCreate(CamelModel):
    date: Annotated[str, Field(min_length=1)]
    completed_exercises: list[CompletedExerciseCreate]

class SetRead(CamelModel):
    id: str
    reps: int
    weight: float

class CompletedExerciseRead(CamelModel):
    id: str
    exercise_definition_id: str
    exercise_name: str
    sets: list[SetRead] = []

class WorkoutSessionRead(CamelModel):
    id: str
    user_id: str
    date: str
    completed_exercises: list[CompletedExerciseRead] = []

class LastPerformance(CamelModel):
    sets: list[SetRead]
    date: str
