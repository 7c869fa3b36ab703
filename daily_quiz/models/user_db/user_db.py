import uuid
from sqlalchemy import Column, String, Boolean, Integer, DateTime, Uuid
from daily_quiz.core.database import Base
from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    login_id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False, index=True)
    password_hash = Column(String, nullable=True)  # only set on the promoted admin
    is_admin = Column(Boolean, nullable=False, default=False)
    score = Column(Integer, nullable=False, default=0)
    latest_quiz_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
