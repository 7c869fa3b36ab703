"""Domain errors raised by the quiz service and rendered by the API."""


class QuizError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(QuizError):
    status_code = 400


class UnauthorizedError(QuizError):
    status_code = 401


class ForbiddenError(QuizError):
    status_code = 403


class NotFoundError(QuizError):
    status_code = 404


class ConflictError(QuizError):
    status_code = 409


class AlreadySolvedError(ConflictError):
    # the solve endpoint has always answered duplicates with 400
    status_code = 400
