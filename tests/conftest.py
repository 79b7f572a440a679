import os

import pytest


@pytest.fixture(autouse=True)
def _restore_environ():
    # configure() calls load_dotenv, which writes into os.environ; keep that per-test
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def mcq_quiz_question():
    return {
        "questionType": "MCQ",
        "id": 1,
        "question": "2+2?",
        "points": 10,
        "options": ["3", "4"],
        "answer": 2,
    }


@pytest.fixture
def text_quiz_question():
    return {
        "questionType": "TEXT",
        "id": 2,
        "question": "Name the club's founding year",
        "points": 5,
        "answer": "2019",
    }


@pytest.fixture
def mcq_feedback_question():
    return {
        "questionType": "MCQ",
        "id": 7,
        "question": "How was the workshop?",
        "options": ["Awful", "Bad", "Okay", "Good", "Great"],
        "answer": 4,
    }


@pytest.fixture
def text_feedback_question():
    return {
        "questionType": "TEXT",
        "id": 8,
        "question": "Anything else?",
        "answer": "",
    }


@pytest.fixture
def edit_user():
    return {
        "id": 3,
        "name": "Ada",
        "email": "ada@club.org",
        "branchId": "cse",
        "phone": "9876543210",
    }
