import json
from typing import Optional

from sqlalchemy.orm import Session
from daily_quiz.core.database import SessionLocal
from daily_quiz.models.problem_db.problem_db import Problem


problem_data = [
    {
        "date": "2024-01-01",
        "question": {
            "text": "2 + 2 = ?",
            "image": "",
            "options": [
                {"text": "3", "image": ""},
                {"text": "4", "image": ""},
                {"text": "5", "image": ""},
                {"text": "22", "image": ""}
            ]
        },
        "answer": 2
    },
    {
        "date": "2024-01-02",
        "question": {
            "text": "Which planet is closest to the sun?",
            "image": "",
            "options": [
                {"text": "Venus", "image": ""},
                {"text": "Earth", "image": ""},
                {"text": "Mercury", "image": ""}
            ]
        },
        "answer": 3
    },
    {
        "date": "2024-01-03",
        "question": {
            "text": "How many sides does a hexagon have?",
            "image": "",
            "options": [
                {"text": "6", "image": ""},
                {"text": "8", "image": ""}
            ]
        },
        "answer": 1
    }
]


def seed_problems(db: Optional[Session] = None) -> int:
    owns_session = db is None
    if owns_session:
        db = SessionLocal()

    added = 0
    try:
        for data in problem_data:
            exists = db.query(Problem).filter(Problem.date == data["date"]).first()
            if not exists:
                db.add(Problem(
                    date=data["date"],
                    question=json.dumps(data["question"], ensure_ascii=False),
                    answer=data["answer"],
                ))
                added += 1
        db.commit()
    finally:
        if owns_session:
            db.close()
    return added


if __name__ == "__main__":
    print(f"Seeded {seed_problems()} problems")
