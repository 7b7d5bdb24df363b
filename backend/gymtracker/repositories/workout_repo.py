from __future__ import annotations
from typing import Iterable, Optional

from sqlalchemy import select

from gymtracker.models import CompletedExercise, ExerciseSet, WorkoutSession
from gymtracker.repositories.base import BaseRepository
from gymtracker.schemas.workout import (
    CompletedExerciseCreate,
    CompletedExerciseRead,
    LastPerformance,
    SetRead,
    WorkoutSessionRead,
)

# Most recent first; created_at/id make equal dates deterministic
_NEWEST_FIRST = (WorkoutSession.date.desc(), WorkoutSession.created_at.desc(), WorkoutSession.id.desc())

def _fold(rows: Iterable[tuple]) -> list[WorkoutSessionRead]:
    """
    Rebuild nested sessions from flat (session, exercise, set) join rows.

    Rows must arrive grouped by session and exercise in display order. The
    outer joins yield a single NULL exercise for a session without exercises
    and a NULL set for an exercise without sets; neither turns into an entry,
    so empty children read back as [].
    """
    sessions: dict[str, WorkoutSessionRead] = {}
    exercises: dict[str, CompletedExerciseRead] = {}
    for sess, ce, st in rows:
        out = sessions.get(sess.id)
        if out is None:
            out = sessions[sess.id] = WorkoutSessionRead(
                id=sess.id, user_id=sess.user_id, date=sess.date, completed_exercises=[]
            )
        if ce is None:
            continue
        ex = exercises.get(ce.id)
        if ex is None:
            ex = exercises[ce.id] = CompletedExerciseRead(
                id=ce.id,
                exercise_definition_id=ce.exercise_definition_id,
                exercise_name=ce.exercise_name,
                sets=[],
            )
            out.completed_exercises.append(ex)
        if st is None:
            continue
        ex.sets.append(SetRead(id=st.id, reps=st.reps, weight=st.weight))
    return list(sessions.values())

class WorkoutRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    # READS
    def _nested(self, user_id: str, session_id: Optional[str] = None) -> list[WorkoutSessionRead]:
        stmt = (
            select(WorkoutSession, CompletedExercise, ExerciseSet)
            .outerjoin(CompletedExercise, CompletedExercise.session_id == WorkoutSession.id)
            .outerjoin(ExerciseSet, ExerciseSet.completed_exercise_id == CompletedExercise.id)
            .where(WorkoutSession.user_id == user_id)
            .order_by(*_NEWEST_FIRST, CompletedExercise.position.asc(), ExerciseSet.position.asc())
        )
        if session_id is not None:
            stmt = stmt.where(WorkoutSession.id == session_id)
        return _fold(self.db.execute(stmt).all())

    def list_by_user(self, user_id: str) -> list[WorkoutSessionRead]:
        return self._nested(user_id)

    def get(self, user_id: str, session_id: str) -> Optional[WorkoutSessionRead]:
        found = self._nested(user_id, session_id)
        return found[0] if found else None

    def last_performance(self, user_id: str, exercise_definition_id: str) -> Optional[LastPerformance]:
        """
        Sets from the newest session of `user_id` that contains the exercise.
        Within that session the first matching exercise wins.
        """
        stmt = (
            select(CompletedExercise, WorkoutSession.date)
            .join(WorkoutSession, CompletedExercise.session_id == WorkoutSession.id)
            .where(
                WorkoutSession.user_id == user_id,
                CompletedExercise.exercise_definition_id == exercise_definition_id,
            )
            .order_by(*_NEWEST_FIRST, CompletedExercise.position.asc())
            .limit(1)
        )
        hit = self.db.execute(stmt).first()
        if hit is None:
            return None
        ce, date = hit
        sets = self.db.execute(
            select(ExerciseSet)
            .where(ExerciseSet.completed_exercise_id == ce.id)
            .order_by(ExerciseSet.position.asc())
        ).scalars().all()
        return LastPerformance(
            sets=[SetRead(id=s.id, reps=s.reps, weight=s.weight) for s in sets],
            date=date,
        )

    # WRITES
    def create(self, user_id: str, *, date: str, completed_exercises: list[CompletedExerciseCreate]) -> WorkoutSessionRead:
        """
        Session, exercises and sets go in as one transaction. Ids are always
        generated here; exercise_name is stored exactly as the client sent it.
        """
        sess = WorkoutSession(user_id=user_id, date=date)
        for i, ce in enumerate(completed_exercises):
            sess.exercises.append(
                CompletedExercise(
                    exercise_definition_id=ce.exercise_definition_id,
                    exercise_name=ce.exercise_name,
                    position=i,
                    sets=[
                        ExerciseSet(position=j, reps=s.reps, weight=s.weight)
                        for j, s in enumerate(ce.sets)
                    ],
                )
            )
        with self.unit_of_work():
            self.db.add(sess)
        return self.get(user_id, sess.id)

    def delete(self, user_id: str, session_id: str) -> bool:
        """Delete a session with its exercises and sets; False if the caller owns no such session."""
        sess = self.get_owned(session_id, user_id)
        if sess is None:
            return False
        with self.unit_of_work():
            # relationship cascade removes exercises and sets in this flush
            self.db.delete(sess)
        return True
