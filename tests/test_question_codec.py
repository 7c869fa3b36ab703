import logging

from daily_quiz.schemas.problem.problem_base import QuestionOption, QuestionPayload
from daily_quiz.services.question_codec import decode_question, encode_question


def test_encoded_payload_decodes_to_a_dict():
    payload = QuestionPayload(text="Pick one", options=[QuestionOption(text="a"), QuestionOption(text="b")])

    decoded = decode_question(encode_question(payload), "2024-01-01")

    assert decoded["text"] == "Pick one"
    assert [o["text"] for o in decoded["options"]] == ["a", "b"]


def test_strings_are_stored_verbatim():
    assert encode_question('{"text": "x"}') == '{"text": "x"}'


def test_bad_json_falls_back_to_raw_text(caplog):
    with caplog.at_level(logging.WARNING):
        assert decode_question("{oops", "2024-01-09") == "{oops"
        assert decode_question("42", "2024-01-10") == "42"

    assert "2024-01-09" in caplog.text
    assert "2024-01-10" in caplog.text
