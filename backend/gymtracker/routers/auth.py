from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from gymtracker.db import get_db
from gymtracker.schemas.user import UserRegister, UserLogin, LoginResult
from gymtracker.security import hash_password, verify_password, create_access_token
from gymtracker.repositories.user_repo import UserRepository

router = APIRouter(tags=["auth"])

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: UserRegister, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_username(payload.username):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken.")
    try:
        repo.create(username=payload.username, password_hash=hash_password(payload.password))
    except ValueError as e:
        if str(e) == "username_taken":
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken.")
        raise
    return {"message": "User registered successfully."}

@router.post("/login", response_model=LoginResult)
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = UserRepository(db).get_by_username(payload.username) if payload.username else None
    # same answer for unknown user and wrong password
    if not user or not verify_password(payload.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")
    token = create_access_token(sub=user.id)
    return LoginResult(message="Login successful", token=token, user_id=user.id)
