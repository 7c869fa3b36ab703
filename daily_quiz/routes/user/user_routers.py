from typing import List

from fastapi import APIRouter, Depends, Body
from sqlalchemy.orm import Session

from daily_quiz.core.database import get_db
from daily_quiz.core.errors import NotFoundError
from daily_quiz.models.user_db.user_db_crud import get_user_by_id, identify_user, rename_user, get_leaderboard
from daily_quiz.schemas.users.user_base import UserLogin, UserOut, UserUpdate


user_router = APIRouter(prefix="/users", tags=["Users"])


@user_router.post("/login", response_model=UserOut)
def login_user(payload: UserLogin, db: Session = Depends(get_db)):
    return identify_user(db, payload.name)


@user_router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, db: Session = Depends(get_db)):
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@user_router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    return get_leaderboard(db)


@user_router.put("/{user_id}", response_model=UserOut)
def edit_user(
    user_id: str,
    updates: UserUpdate = Body(...),
    db: Session = Depends(get_db)
):
    return rename_user(db, user_id, updates.name)
