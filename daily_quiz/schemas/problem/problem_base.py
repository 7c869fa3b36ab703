from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from pydantic import Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from daily_quiz.schemas.common.base_schema import CamelModel

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class QuestionOption(CamelModel):
    text: Optional[str] = ""
    image: Optional[str] = ""  # data URI


class QuestionPayload(CamelModel):
    text: Optional[str] = ""
    image: Optional[str] = ""
    options: List[QuestionOption] = Field(min_length=2)


class ProblemCreate(CamelModel):
    date: str = Field(pattern=DATE_PATTERN)
    question: Union[QuestionPayload, str]
    answer: int = Field(ge=1)

    @model_validator(mode="after")
    def answer_within_options(self):
        question = self.question
        if isinstance(question, str):
            # already encoded by the client; it must still decode to a valid payload
            try:
                question = QuestionPayload.model_validate_json(question)
            except PydanticValidationError:
                raise ValueError("question must be a JSON object with at least two options")
        if self.answer > len(question.options):
            raise ValueError("answer must point at one of the options")
        return self


class SolverOut(CamelModel):
    user_id: UUID
    name: str
    is_correct: bool
    solved_at: datetime


class ProblemOut(CamelModel):
    date: str
    question: Union[Dict[str, Any], str]
    answer: int
    solvers: List[SolverOut] = []
    created_at: Optional[datetime] = None


class SolveRequest(CamelModel):
    user_id: str
    answer: int


class SolveResult(CamelModel):
    success: bool = True
    is_correct: bool
    new_score: int
