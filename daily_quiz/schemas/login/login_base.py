from typing import Optional

from daily_quiz.schemas.common.base_schema import CamelModel


class AdminAuthRequest(CamelModel):
    id: str
    password: str
    current_user_id: Optional[str] = None
