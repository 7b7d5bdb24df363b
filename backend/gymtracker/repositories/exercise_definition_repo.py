from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from gymtracker.models import ExerciseDefinition
from gymtracker.repositories.base import BaseRepository

class ExerciseDefinitionRepository(BaseRepository[ExerciseDefinition]):
    model = ExerciseDefinition

    def list_by_user(self, user_id: str) -> list[ExerciseDefinition]:
        stmt = select(ExerciseDefinition).where(ExerciseDefinition.user_id == user_id)\
                                         .order_by(ExerciseDefinition.name.asc(), ExerciseDefinition.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_by_name(self, user_id: str, name: str) -> Optional[ExerciseDefinition]:
        stmt = select(ExerciseDefinition).where(
            ExerciseDefinition.user_id == user_id, ExerciseDefinition.name == name
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, user_id: str, *, name: str, description: str | None) -> ExerciseDefinition:
        if self.get_by_name(user_id, name):
            raise ValueError("exercise_name_taken")
        d = ExerciseDefinition(user_id=user_id, name=name, description=description or "")
        try:
            with self.unit_of_work():
                self.db.add(d)
        except IntegrityError:
            # lost a race with a concurrent create of the same name
            raise ValueError("exercise_name_taken")
        self.db.refresh(d)
        return d
