from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.deps.auth import get_current_user_id
from gymtracker.repositories.workout_repo import WorkoutRepository
from gymtracker.schemas.workout import LastPerformance, WorkoutSessionCreate, WorkoutSessionRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

NOT_FOUND = "Workout session not found or unauthorized."

@router.get("", response_model=list[WorkoutSessionRead])
def list_workouts(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return WorkoutRepository(db).list_by_user(user_id)

@router.post("", response_model=WorkoutSessionRead, status_code=status.HTTP_201_CREATED)
def create_workout(
    payload: WorkoutSessionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return WorkoutRepository(db).create(
        user_id, date=payload.date, completed_exercises=payload.completed_exercises
    )

@router.get("/last-exercise/{exercise_def_id}", response_model=LastPerformance)
def last_exercise(exercise_def_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    last = WorkoutRepository(db).last_performance(user_id, exercise_def_id)
    if not last:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No previous data for this exercise found.")
    return last

@router.get("/{workout_id}", response_model=WorkoutSessionRead)
def get_workout(workout_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    sess = WorkoutRepository(db).get(user_id, workout_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return sess

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    if not WorkoutRepository(db).delete(user_id, workout_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
