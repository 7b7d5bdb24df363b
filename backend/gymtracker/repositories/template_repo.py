from __future__ import annotations
from typing import Iterable, Optional

from sqlalchemy import and_, delete, select

from gymtracker.models import ExerciseDefinition, TemplateExercise, WorkoutTemplate
from gymtracker.repositories.base import BaseRepository
from gymtracker.schemas.exercise_definition import ExerciseRef
from gymtracker.schemas.template import TemplateRead

class TemplateRepository(BaseRepository[WorkoutTemplate]):
    model = WorkoutTemplate

    # READS
    def _materialized(self, user_id: str, template_id: Optional[str] = None) -> list[TemplateRead]:
        """
        Templates with their exercises resolved to the owner's definitions.

        One LEFT JOIN over templates -> link rows -> definitions. A template
        without links, or whose links all dangle, comes back as a row with a
        NULL definition; those rows only seed the template and never become
        list entries.
        """
        stmt = (
            select(WorkoutTemplate, ExerciseDefinition)
            .outerjoin(TemplateExercise, TemplateExercise.template_id == WorkoutTemplate.id)
            .outerjoin(
                ExerciseDefinition,
                and_(
                    ExerciseDefinition.id == TemplateExercise.exercise_definition_id,
                    ExerciseDefinition.user_id == WorkoutTemplate.user_id,
                ),
            )
            .where(WorkoutTemplate.user_id == user_id)
            .order_by(WorkoutTemplate.name.asc(), WorkoutTemplate.id.asc(), ExerciseDefinition.name.asc())
        )
        if template_id is not None:
            stmt = stmt.where(WorkoutTemplate.id == template_id)

        out: dict[str, TemplateRead] = {}
        for tpl, definition in self.db.execute(stmt).all():
            read = out.get(tpl.id)
            if read is None:
                read = out[tpl.id] = TemplateRead(id=tpl.id, user_id=tpl.user_id, name=tpl.name, exercises=[])
            if definition is None:
                continue
            read.exercises.append(
                ExerciseRef(id=definition.id, name=definition.name, description=definition.description)
            )
        return list(out.values())

    def list_by_user(self, user_id: str) -> list[TemplateRead]:
        return self._materialized(user_id)

    def get(self, user_id: str, template_id: str) -> Optional[TemplateRead]:
        found = self._materialized(user_id, template_id)
        return found[0] if found else None

    # WRITES
    def _link(self, template_id: str, exercise_ids: Iterable[str]) -> None:
        self.db.add_all(
            TemplateExercise(template_id=template_id, exercise_definition_id=ex_id)
            for ex_id in exercise_ids
        )

    def create(self, user_id: str, *, name: str, exercise_ids: list[str]) -> TemplateRead:
        tpl = WorkoutTemplate(user_id=user_id, name=name)
        with self.unit_of_work():
            self.db.add(tpl)
            self.db.flush()  # assigns tpl.id for the link rows
            self._link(tpl.id, exercise_ids)
        return self.get(user_id, tpl.id)

    def update(self, user_id: str, template_id: str, *, name: str, exercise_ids: list[str]) -> Optional[TemplateRead]:
        """Replace name and the whole exercise set; None if the caller owns no such template."""
        tpl = self.get_owned(template_id, user_id)
        if tpl is None:
            return None
        with self.unit_of_work():
            tpl.name = name
            self.db.execute(delete(TemplateExercise).where(TemplateExercise.template_id == tpl.id))
            self._link(tpl.id, exercise_ids)
        return self.get(user_id, template_id)

    def delete(self, user_id: str, template_id: str) -> bool:
        tpl = self.get_owned(template_id, user_id)
        if tpl is None:
            return False
        with self.unit_of_work():
            self.db.execute(delete(TemplateExercise).where(TemplateExercise.template_id == tpl.id))
            self.db.delete(tpl)
        return True
