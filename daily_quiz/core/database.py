from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from daily_quiz.core.config import settings


def build_engine(url: str, echo: bool = False):
    connect_args = {}
    if url.startswith("sqlite"):
        # sync routes run in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
