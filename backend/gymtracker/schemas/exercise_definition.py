from typing import Annotated
from pydantic import Field, field_validator

from gymtracker.schemas.base import CamelModel

NameStr = Annotated[str, Field(max_length=120)]

class ExerciseDefinitionCreate(CamelModel):
    name: NameStr
    description: str | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        # stored exactly as sent; only all-whitespace names are refused
        if not v.strip():
            raise ValueError("name cannot be blank")
        return v

class ExerciseDefinitionRead(CamelModel):
    id: str
    user_id: str
    name: str
    description: str = ""

class ExerciseRef(CamelModel):
    """Definition as embedded in a template."""
    id: str
    name: str
    description: str = ""
