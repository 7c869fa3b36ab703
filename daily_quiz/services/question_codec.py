import json
import logging
from typing import Any, Dict, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)


def encode_question(question: Union[BaseModel, str]) -> str:
    """Textual encoding stored in ``problems.question``.

    Strings are taken as already encoded, the way the web client sends them.
    """
    if isinstance(question, str):
        return question
    return json.dumps(question.model_dump(), ensure_ascii=False)


def decode_question(raw: str, problem_date: str = "") -> Union[Dict[str, Any], str]:
    """Parse a stored question, falling back to the raw text on bad data."""
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Question field is not valid JSON for problem %s", problem_date)
        return raw

    if not isinstance(decoded, dict):
        logger.warning("Question field is not a JSON object for problem %s", problem_date)
        return raw
    return decoded
