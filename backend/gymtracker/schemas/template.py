from typing import Annotated, Union
from pydantic import BaseModel, Field, field_validator

from gymtracker.schemas.base import CamelModel
from gymtracker.schemas.exercise_definition import ExerciseRef

TemplateName = Annotated[str, Field(max_length=120)]

class ExerciseRefIn(BaseModel):
    # clients may post whole definition objects; only the id is kept
    id: str

class TemplateWrite(CamelModel):
    name: TemplateName
    exercises: list[Union[str, ExerciseRefIn]] | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        # stored exactly as sent; only all-whitespace names are refused
        if not v.strip():
            raise ValueError("name cannot be blank")
        return v

    def exercise_ids(self) -> list[str]:
        """Referenced definition ids, first occurrence wins."""
        seen: dict[str, None] = {}
        for ref in self.exercises or []:
            seen.setdefault(ref if isinstance(ref, str) else ref.id, None)
        return list(seen)

class TemplateRead(CamelModel):
    id: str
    user_id: str
    name: str
    exercises: list[ExerciseRef] = []
