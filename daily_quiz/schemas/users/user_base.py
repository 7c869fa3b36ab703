from pydantic import AliasChoices, Field
from uuid import UUID
from typing import Optional
from datetime import datetime

from daily_quiz.schemas.common.base_schema import CamelModel


class UserLogin(CamelModel):
    name: Optional[str] = None


class UserUpdate(CamelModel):
    name: Optional[str] = None


class UserOut(CamelModel):
    id: UUID
    login_id: str
    name: str
    is_admin: bool = False
    score: int = 0
    # stored as latest_quiz_at, published as latestQuizDate
    latest_quiz_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("latest_quiz_at", "latestQuizDate"),
        serialization_alias="latestQuizDate",
    )
    created_at: Optional[datetime] = None
