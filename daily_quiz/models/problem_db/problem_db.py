from sqlalchemy import Column, String, Boolean, Integer, DateTime, Text, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from daily_quiz.core.database import Base
from daily_quiz.models.user_db.user_db import utcnow


class Problem(Base):
    __tablename__ = "problems"

    date = Column(String(10), primary_key=True)  # YYYY-MM-DD
    question = Column(Text, nullable=False)  # JSON: { text, image, options: [{ text, image }] }
    answer = Column(Integer, nullable=False)  # 1-based option index
    created_at = Column(DateTime(timezone=True), default=utcnow)

    solvers = relationship(
        "ProblemSolver",
        back_populates="problem",
        order_by="ProblemSolver.id",
        cascade="all, delete-orphan",
    )


class ProblemSolver(Base):
    __tablename__ = "problem_solvers"
    __table_args__ = (
        UniqueConstraint("problem_date", "user_id", name="uq_problem_solver"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    problem_date = Column(String(10), ForeignKey("problems.date", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    name = Column(String, nullable=False)  # snapshot at solve time
    is_correct = Column(Boolean, nullable=False)
    solved_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    problem = relationship("Problem", back_populates="solvers")
