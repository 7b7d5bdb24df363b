from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import ForeignKey, String, Text, Integer, DateTime, func
from gymtracker.db import Base, new_id

class WorkoutTemplate(Base):
    __tablename__ = "workout_templates"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

class TemplateExercise(Base):
    """Link row template -> exercise definition. The definition side has no FK:
    a dangling id is kept and just drops out when the template is read."""
    __tablename__ = "template_exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    template_id: Mapped[str] = mapped_column(
        ForeignKey("workout_templates.id", ondelete="CASCADE"), index=True
    )
    exercise_definition_id: Mapped[str] = mapped_column(Text, nullable=False)
