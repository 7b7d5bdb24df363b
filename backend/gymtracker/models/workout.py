from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, DateTime, String, Text, Float, func
from gymtracker.db import Base, new_id

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    # ISO-8601 string as sent by the client; only presence is checked
    date: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    exercises = relationship(
        "CompletedExercise",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="CompletedExercise.position",
    )

class CompletedExercise(Base):
    __tablename__ = "completed_exercises"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    session_id: Mapped[str] = mapped_column(
        ForeignKey("workout_sessions.id", ondelete="CASCADE"), index=True
    )
    exercise_definition_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    exercise_name: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    session = relationship("WorkoutSession", back_populates="exercises")
    sets = relationship(
        "ExerciseSet",
        back_populates="completed_exercise",
        cascade="all, delete-orphan",
        order_by="ExerciseSet.position",
    )

class ExerciseSet(Base):
    __tablename__ = "exercise_sets"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    completed_exercise_id: Mapped[str] = mapped_column(
        ForeignKey("completed_exercises.id", ondelete="CASCADE"), index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    completed_exercise = relationship("CompletedExercise", back_populates="sets")
