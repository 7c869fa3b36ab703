from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from daily_quiz.core.database import get_db
from daily_quiz.models.problem_db.problem_crud import create_problem, delete_problem, list_problems, submit_answer
from daily_quiz.schemas.problem.problem_base import ProblemCreate, ProblemOut, SolveRequest, SolveResult

problem_router = APIRouter(prefix="/problems", tags=["Problems"])


@problem_router.get("", response_model=List[ProblemOut])
def list_all_problems(db: Session = Depends(get_db)):
    return list_problems(db)


@problem_router.post("", response_model=ProblemOut, status_code=status.HTTP_201_CREATED)
def add_problem(problem_in: ProblemCreate, db: Session = Depends(get_db)):
    # no admin check here; the client only shows the form to admins
    return create_problem(db, problem_in)


@problem_router.delete("/{date}")
def remove_problem(date: str, db: Session = Depends(get_db)):
    delete_problem(db, date)
    return {"message": f"Problem for {date} deleted"}


@problem_router.post("/{date}/solve", response_model=SolveResult)
def solve_problem(date: str, payload: SolveRequest, db: Session = Depends(get_db)):
    return submit_answer(db, date, payload.user_id, payload.answer)
