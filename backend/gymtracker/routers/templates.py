from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.deps.auth import get_current_user_id
from gymtracker.repositories.template_repo import TemplateRepository
from gymtracker.schemas.template import TemplateRead, TemplateWrite

router = APIRouter(prefix="/templates", tags=["templates"])

NOT_FOUND = "Template not found or unauthorized."

@router.get("", response_model=list[TemplateRead])
def list_templates(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return TemplateRepository(db).list_by_user(user_id)

@router.post("", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def create_template(payload: TemplateWrite, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return TemplateRepository(db).create(user_id, name=payload.name, exercise_ids=payload.exercise_ids())

@router.get("/{template_id}", response_model=TemplateRead)
def get_template(template_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    tpl = TemplateRepository(db).get(user_id, template_id)
    if not tpl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return tpl

@router.put("/{template_id}", response_model=TemplateRead)
def update_template(
    template_id: str,
    payload: TemplateWrite,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    tpl = TemplateRepository(db).update(
        user_id, template_id, name=payload.name, exercise_ids=payload.exercise_ids()
    )
    if not tpl:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return tpl

@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(template_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    if not TemplateRepository(db).delete(user_id, template_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
