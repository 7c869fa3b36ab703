import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from daily_quiz.core.database import get_db
from daily_quiz.core.errors import NotFoundError, UnauthorizedError
from daily_quiz.core.security import check_admin_credentials
from daily_quiz.models.user_db.user_db_crud import make_user_admin
from daily_quiz.schemas.login.login_base import AdminAuthRequest
from daily_quiz.schemas.users.user_base import UserOut

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/admin", tags=["Admin"])


@auth_router.post("/auth", response_model=UserOut)
def authenticate_admin(payload: AdminAuthRequest, db: Session = Depends(get_db)):
    if not check_admin_credentials(payload.id, payload.password):
        logger.warning("Rejected admin credentials for user %s", payload.current_user_id)
        raise UnauthorizedError("Invalid admin id or password")

    if payload.current_user_id is None:
        raise NotFoundError("Current user not found")

    return make_user_admin(db, payload.current_user_id)
