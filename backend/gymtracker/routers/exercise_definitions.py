from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.deps.auth import get_current_user_id
from gymtracker.repositories.exercise_definition_repo import ExerciseDefinitionRepository
from gymtracker.schemas.exercise_definition import ExerciseDefinitionCreate, ExerciseDefinitionRead

router = APIRouter(prefix="/exercise-definitions", tags=["exercise-definitions"])

@router.get("", response_model=list[ExerciseDefinitionRead])
def list_exercise_definitions(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return ExerciseDefinitionRepository(db).list_by_user(user_id)

@router.post("", response_model=ExerciseDefinitionRead, status_code=status.HTTP_201_CREATED)
def create_exercise_definition(
    payload: ExerciseDefinitionCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    try:
        return ExerciseDefinitionRepository(db).create(
            user_id, name=payload.name, description=payload.description
        )
    except ValueError as e:
        if str(e) == "exercise_name_taken":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Exercise name already exists.")
        raise
