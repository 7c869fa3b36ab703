"""Client state controller for the daily quiz.

Holds the current user and the last-fetched user and problem lists, and moves
between screens in response to user actions. Nothing here renders; a view
layer reads ``controller.state`` after each transition. The cached lists are
disposable copies: every mutation is followed by a re-fetch from the API.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date as date_type
from enum import Enum

import httpx

from daily_quiz.client.api_client import ApiError, QuizApiClient
from daily_quiz.client.local_store import LocalStore
from daily_quiz.schemas.problem.problem_base import QuestionOption, QuestionPayload
from daily_quiz.services.question_codec import encode_question

logger = logging.getLogger(__name__)

CLIENT_ERRORS = (ApiError, httpx.HTTPError)


class Screen(str, Enum):
    NAME_ENTRY = "name_entry"
    MAIN = "main"


class View(str, Enum):
    PROBLEMS = "problems"
    LEADERBOARD = "leaderboard"
    ADD_PROBLEM = "add_problem"
    ACCOUNT = "account"


@dataclass(slots=True)
class Feedback:
    """Outcome of the last submitted answer."""

    is_correct: bool
    new_score: int


@dataclass(slots=True)
class OptionDraft:
    text: str = ""
    image: str = ""


@dataclass(slots=True)
class ProblemDetail:
    problem: dict
    options_disabled: bool


@dataclass
class ClientState:
    screen: Screen = Screen.NAME_ENTRY
    view: View = View.PROBLEMS
    current_user: dict | None = None
    users: list[dict] = field(default_factory=list)
    problems: list[dict] = field(default_factory=list)
    open_problem: str | None = None
    feedback: Feedback | None = None
    admin_error: str | None = None
    busy: bool = False
    alerts: list[str] = field(default_factory=list)


def _error_text(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return str(exc)


class QuizController:
    def __init__(
        self,
        api: QuizApiClient,
        store: LocalStore,
        confirm: Callable[[str], bool] | None = None,
        alert: Callable[[str], None] | None = None,
    ) -> None:
        self.api = api
        self.store = store
        self.state = ClientState()
        self._confirm = confirm or (lambda message: True)
        self._alert_hook = alert

    # --- helpers -------------------------------------------------------

    def _alert(self, message: str) -> None:
        self.state.alerts.append(message)
        if self._alert_hook is not None:
            self._alert_hook(message)

    @contextmanager
    def _busy(self) -> Iterator[None]:
        self.state.busy = True
        try:
            yield
        finally:
            self.state.busy = False

    @property
    def is_admin(self) -> bool:
        return bool(self.state.current_user and self.state.current_user.get("isAdmin"))

    def _user_id(self) -> str | None:
        user = self.state.current_user
        return user.get("id") if user else None

    def _find_problem(self, problem_date: str) -> dict | None:
        return next((p for p in self.state.problems if p.get("date") == problem_date), None)

    def has_solved(self, problem: dict) -> bool:
        user_id = self._user_id()
        if not user_id:
            return False
        return any(s.get("userId") == user_id for s in problem.get("solvers", []))

    # --- fetching ------------------------------------------------------

    def fetch_problems(self) -> None:
        try:
            self.state.problems = self.api.list_problems()
        except CLIENT_ERRORS as exc:
            logger.error("Error fetching problems: %s", exc)
            self._alert("Loading problems failed.")

    def fetch_users(self) -> None:
        # a stale leaderboard is not worth interrupting the user for
        try:
            self.state.users = self.api.list_users()
        except CLIENT_ERRORS as exc:
            logger.error("Error fetching users: %s", exc)

    def refresh_current_user(self) -> None:
        user_id = self._user_id()
        if not user_id:
            return
        try:
            fresh = self.api.get_user(user_id)
        except CLIENT_ERRORS as exc:
            logger.error("Error updating current user: %s", exc)
            return
        self.state.current_user = {**self.state.current_user, **fresh}
        self.store.save_user(self.state.current_user)

    def problems_on(self, problem_date: str) -> list[dict]:
        return [p for p in self.state.problems if p.get("date") == problem_date]

    # --- screen transitions ---------------------------------------------

    def start(self) -> Screen:
        """Rehydrate from local state, skipping name entry for a known user."""
        saved = self.store.load_user()
        if not saved:
            self.state.screen = Screen.NAME_ENTRY
            return self.state.screen

        with self._busy():
            self.state.current_user = saved
            self.refresh_current_user()
            self.fetch_problems()
            self.fetch_users()
        self.state.screen = Screen.MAIN
        self.state.view = View.PROBLEMS
        return self.state.screen

    def enter_name(self, name: str) -> bool:
        name = (name or "").strip()
        if not name:
            self._alert("Please enter your name.")
            return False

        with self._busy():
            try:
                user = self.api.login(name)
            except CLIENT_ERRORS as exc:
                logger.error("Login failed: %s", exc)
                self._alert(f"Login failed: {_error_text(exc)}")
                return False

            self.state.current_user = user
            self.store.save_user(user)
            self.state.screen = Screen.MAIN
            self.state.view = View.PROBLEMS
            self.fetch_problems()
            self.fetch_users()
        return True

    def logout(self) -> None:
        self.state.current_user = None
        self.state.open_problem = None
        self.state.feedback = None
        self.store.clear_user()
        self.state.screen = Screen.NAME_ENTRY

    # --- main views -----------------------------------------------------

    def show_problems(self) -> None:
        with self._busy():
            self.fetch_problems()
        self.state.view = View.PROBLEMS

    def show_leaderboard(self) -> None:
        with self._busy():
            self.fetch_users()
        self.state.view = View.LEADERBOARD

    def show_add_problem(self) -> bool:
        if not self.is_admin:
            self._alert("Only administrators can add problems.")
            return False
        self.state.view = View.ADD_PROBLEM
        return True

    def show_account(self) -> None:
        self.state.view = View.ACCOUNT

    def rename(self, new_name: str) -> bool:
        user = self.state.current_user
        if user is None:
            return False
        if new_name == user.get("name"):
            self.state.view = View.PROBLEMS
            return True

        with self._busy():
            try:
                updated = self.api.rename_user(user["id"], new_name)
            except CLIENT_ERRORS as exc:
                logger.error("Account update failed: %s", exc)
                self._alert(_error_text(exc) or "Changing the name failed.")
                return False

        user["name"] = updated["name"]
        self.store.save_user(user)
        self._alert("Your name has been changed.")
        self.state.view = View.PROBLEMS
        return True

    def authenticate_admin(self, admin_id: str, password: str) -> bool:
        user_id = self._user_id()
        with self._busy():
            try:
                promoted = self.api.authenticate_admin(admin_id, password, user_id)
            except CLIENT_ERRORS as exc:
                logger.error("Admin authentication failed: %s", exc)
                self.state.admin_error = _error_text(exc) or "Invalid admin id or password."
                return False

        self.state.current_user = {**(self.state.current_user or {}), **promoted}
        self.store.save_user(self.state.current_user)
        self.state.admin_error = None
        self._alert("Administrator authentication complete.")
        return True

    # --- admin actions --------------------------------------------------

    def add_problem(
        self,
        text: str = "",
        options: Sequence[OptionDraft] = (),
        correct_index: int | None = None,
        problem_date: str | None = None,
        image: str = "",
    ) -> bool:
        """Build a question from the form and create it.

        ``correct_index`` is the 0-based position of the chosen option among
        ``options`` as entered, including blank rows.
        """
        if not self.is_admin:
            self._alert("Only administrators can add problems.")
            return False

        valid = [(i, o) for i, o in enumerate(options) if o.text or o.image]
        problem_date = problem_date or date_type.today().isoformat()

        error = None
        if not text and not image:
            error = "Enter the question text or an image."
        elif len(valid) < 2:
            error = "At least two options are required."
        elif correct_index is None:
            error = "Select the correct answer."
        elif correct_index not in [i for i, _ in valid]:
            error = "The selected answer is not a valid option."
        if error:
            self._alert(error)
            return False

        answer = [i for i, _ in valid].index(correct_index) + 1
        question = encode_question(QuestionPayload(
            text=text,
            image=image,
            options=[QuestionOption(text=o.text, image=o.image) for _, o in valid],
        ))

        with self._busy():
            try:
                self.api.create_problem(problem_date, question, answer)
            except CLIENT_ERRORS as exc:
                logger.error("Adding problem failed: %s", exc)
                self._alert(_error_text(exc) or "Adding the problem failed.")
                return False
            self.fetch_problems()

        self._alert("Problem added.")
        self.state.view = View.PROBLEMS
        return True

    def delete_problem(self, problem_date: str) -> bool:
        if not self.is_admin:
            self._alert("Only administrators can delete problems.")
            return False
        if not self._confirm(f"Delete the problem for {problem_date}?"):
            return False

        with self._busy():
            try:
                self.api.delete_problem(problem_date)
            except CLIENT_ERRORS as exc:
                logger.error("Deleting problem failed: %s", exc)
                self._alert(_error_text(exc) or "Deleting the problem failed.")
                return False
            self.fetch_problems()

        self._alert("Problem deleted.")
        return True

    # --- solving --------------------------------------------------------

    def open_problem(self, problem_date: str) -> ProblemDetail | None:
        problem = self._find_problem(problem_date)
        if problem is None:
            return None
        self.state.open_problem = problem_date
        self.state.feedback = None
        return ProblemDetail(problem=problem, options_disabled=self.has_solved(problem))

    def close_problem(self) -> None:
        self.state.open_problem = None

    def answer(self, problem_date: str, selected_index: int) -> Feedback | None:
        """Submit the 0-based ``selected_index`` option for a problem."""
        problem = self._find_problem(problem_date)
        if problem is None or self.state.current_user is None:
            return None
        if self.has_solved(problem):
            self._alert("You have already solved this problem.")
            return None

        self.state.feedback = None
        with self._busy():
            try:
                result = self.api.solve(problem_date, self._user_id(), selected_index + 1)
                self.state.feedback = Feedback(result["isCorrect"], result["newScore"])
            except CLIENT_ERRORS as exc:
                logger.error("Submitting answer failed: %s", exc)
                self._alert(f"Submitting the answer failed: {_error_text(exc)}")

            # re-sync with the server whatever happened above
            self.fetch_problems()
            self.fetch_users()
            self.refresh_current_user()
        return self.state.feedback
