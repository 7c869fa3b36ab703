import logging
from typing import List, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from daily_quiz.core.errors import AlreadySolvedError, ConflictError, NotFoundError
from daily_quiz.models.problem_db.problem_db import Problem, ProblemSolver
from daily_quiz.models.user_db.user_db import User, utcnow
from daily_quiz.models.user_db.user_db_crud import get_user_by_id
from daily_quiz.schemas.problem.problem_base import ProblemCreate, SolveResult
from daily_quiz.services.question_codec import decode_question, encode_question

logger = logging.getLogger(__name__)


def get_problem_by_date(db: Session, date: str):
    return db.query(Problem).filter(Problem.date == date).first()


def serialize_problem(problem: Problem) -> dict:
    return {
        "date": problem.date,
        "question": decode_question(problem.question, problem.date),
        "answer": problem.answer,
        "solvers": [
            {"user_id": s.user_id, "name": s.name, "is_correct": s.is_correct, "solved_at": s.solved_at}
            for s in problem.solvers
        ],
        "created_at": problem.created_at,
    }


def list_problems(db: Session) -> List[dict]:
    problems = (
        db.query(Problem)
        .options(selectinload(Problem.solvers))
        .order_by(Problem.date.desc())
        .all()
    )
    return [serialize_problem(p) for p in problems]


def create_problem(db: Session, problem_in: ProblemCreate) -> dict:
    problem = Problem(
        date=problem_in.date,
        question=encode_question(problem_in.question),
        answer=problem_in.answer,
    )
    db.add(problem)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"A problem already exists for {problem_in.date}")
    db.refresh(problem)
    logger.info("Created problem for %s", problem.date)
    return serialize_problem(problem)


def delete_problem(db: Session, date: str) -> None:
    problem = get_problem_by_date(db, date)
    if not problem:
        raise NotFoundError(f"No problem found for {date}")
    db.delete(problem)
    db.commit()
    logger.info("Deleted problem for %s", date)


def has_solved(problem: Problem, user_id: UUID) -> bool:
    return any(s.user_id == user_id for s in problem.solvers)


def submit_answer(db: Session, date: str, user_id: Union[UUID, str], selected_answer: int) -> SolveResult:
    problem = get_problem_by_date(db, date)
    user = get_user_by_id(db, user_id)
    if not problem or not user:
        raise NotFoundError("Problem or user not found")

    if has_solved(problem, user.id):
        raise AlreadySolvedError("You have already solved this problem")

    is_correct = problem.answer == int(selected_answer)
    now = utcnow()

    # the unique (problem_date, user_id) key makes this insert the real guard
    db.add(ProblemSolver(
        problem_date=problem.date,
        user_id=user.id,
        name=user.name,
        is_correct=is_correct,
        solved_at=now,
    ))
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise AlreadySolvedError("You have already solved this problem")

    if is_correct:
        user.score = User.score + 1
        user.latest_quiz_at = now

    # solver record and score change land in the same transaction
    db.commit()
    db.refresh(user)

    logger.info(
        "User %s answered %s for %s (%s), score %s",
        user.id, selected_answer, date, "correct" if is_correct else "wrong", user.score,
    )
    return SolveResult(success=True, is_correct=is_correct, new_score=user.score)
