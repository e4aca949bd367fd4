import os
import tempfile

# Keep the default SQLite file out of the working tree
os.environ.setdefault("DB_DIR", tempfile.mkdtemp(prefix="ordquiz_db_"))

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session as DbSession, sessionmaker
from sqlalchemy.pool import StaticPool

from ordquiz.app import app
from ordquiz.database import get_db, init_db
from ordquiz.dependencies import get_question_bank, get_text_model
from ordquiz.models.quiz import QuizItem
from ordquiz.services.question_bank import QuestionBank


def make_item(word: str = "foo", answer: str = "A", **overrides) -> QuizItem:
    data = {
        "word": word,
        "options": {"A": "x", "B": "y", "C": "z", "D": "v", "E": "w"},
        "answer": answer,
        "year": 2019,
        "term": "vt",
        "source": "test.pdf",
    }
    data.update(overrides)
    return QuizItem.from_dict(data)


class FakeModel:
    """Stands in for GeminiModel: returns canned replies, records prompts."""

    model_name = "fake-model"

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, contents):
        self.calls.append(contents)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def db_session() -> Iterator[DbSession]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def bank() -> QuestionBank:
    return QuestionBank([make_item(f"ord{i}") for i in range(50)])


@pytest.fixture
def fake_model() -> FakeModel:
    return FakeModel()


@pytest.fixture
def client(db_session: DbSession, bank: QuestionBank, fake_model: FakeModel) -> Iterator[TestClient]:
    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_question_bank] = lambda: bank
    app.dependency_overrides[get_text_model] = lambda: fake_model
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
