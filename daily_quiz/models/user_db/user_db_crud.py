import logging
import time
from uuid import UUID
from sqlalchemy.orm import Session
from daily_quiz.core.config import settings
from daily_quiz.core.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from daily_quiz.core.security import hash_password, is_admin_identity
from daily_quiz.models.user_db.user_db import User
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")
    return name


def get_user_by_name(db: Session, name: str):
    return db.query(User).filter(User.name == name).order_by(User.created_at).first()


def get_user_by_login_id(db: Session, login_id: str):
    return db.query(User).filter(User.login_id == login_id).first()


def get_user_by_id(db: Session, user_id: Union[UUID, str]):
    # ids are opaque to callers; one that is not a UUID just matches nobody
    if not isinstance(user_id, UUID):
        try:
            user_id = UUID(str(user_id))
        except ValueError:
            return None
    return db.query(User).filter(User.id == user_id).first()


def require_user(db: Session, user_id: Union[UUID, str]) -> User:
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def identify_user(db: Session, name: str) -> User:
    """Log in by name, registering the user on first sight."""
    name = _clean_name(name)
    user = get_user_by_name(db, name)
    if user:
        return user

    user = User(
        name=name,
        login_id=f"{name}{int(time.time() * 1000)}",
        is_admin=False,
        score=0,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.name, user.id)
    return user


def rename_user(db: Session, user_id: Union[UUID, str], new_name: str) -> User:
    user = require_user(db, user_id)

    if is_admin_identity(user.login_id, user.is_admin):
        raise ForbiddenError("The administrator account cannot be renamed")

    user.name = _clean_name(new_name)
    db.commit()
    db.refresh(user)
    logger.info("Renamed user %s to %s", user.id, user.name)
    return user


def make_user_admin(db: Session, user_id: Union[UUID, str]) -> User:
    """Promote a user onto the distinguished admin identity.

    The caller has already checked the shared credential pair. Promotion is
    permanent: the user's login id and credential are overwritten with the
    configured admin values and there is no way back.
    """
    user = require_user(db, user_id)

    if is_admin_identity(user.login_id, user.is_admin):
        return user

    holder = get_user_by_login_id(db, settings.ADMIN_ID)
    if holder and holder.id != user.id:
        raise ConflictError("The administrator identity is already assigned to another user")

    user.is_admin = True
    user.login_id = settings.ADMIN_ID
    user.password_hash = hash_password(settings.ADMIN_PASSWORD)
    db.commit()
    db.refresh(user)
    logger.info("Promoted user %s to administrator", user.id)
    return user


def get_leaderboard(db: Session) -> List[User]:
    # equal scores: whoever got there first ranks higher
    return (
        db.query(User)
        .filter(User.is_admin == False)  # noqa: E712
        .order_by(User.score.desc(), User.latest_quiz_at.asc().nulls_first(), User.created_at.asc())
        .all()
    )
