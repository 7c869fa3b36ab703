import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from daily_quiz.core.config import settings
from daily_quiz.core.database import Base, engine
from daily_quiz.core.errors import QuizError
from daily_quiz.core.logging_config import configure_logging
from daily_quiz.models.problem_db import problem_db  # noqa: F401  (registers tables)
from daily_quiz.routes.auth.auth_routers import auth_router
from daily_quiz.routes.problem.problem_routers import problem_router
from daily_quiz.routes.user.user_routers import user_router

logger = logging.getLogger("daily_quiz")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if settings.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    logger.info("Daily quiz API ready under %s", settings.API_PREFIX)
    yield


def create_app() -> FastAPI:
    app = FastAPI(title="Daily Quiz API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(user_router, prefix=settings.API_PREFIX)
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(problem_router, prefix=settings.API_PREFIX)

    @app.exception_handler(QuizError)
    async def quiz_error_handler(request: Request, exc: QuizError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # missing or malformed fields are a plain 400, like the other input errors
        errors = exc.errors()
        message = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body')}: {err.get('msg')}"
            for err in errors
        )
        return JSONResponse(status_code=400, content={"detail": message or "Invalid request"})

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
