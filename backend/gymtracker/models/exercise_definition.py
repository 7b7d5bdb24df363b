from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, UniqueConstraint
from gymtracker.db import Base, new_id

class ExerciseDefinition(Base):
    __tablename__ = "exercise_definitions"
    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_exercise_definitions_user_name"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # owner; not a FK, the auth guard accepts ids without an account lookup
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
