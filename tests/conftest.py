"""Shared fixtures: an in-memory store injected into the app in place of Postgres."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from pooseboard.database import DatabaseError
from pooseboard.main import create_app
from pooseboard.models.score import Score

VALID_KEY = "s3cret"


class FakeDatabase:
    """Implements the DatabaseManager interface over plain lists."""

    def __init__(self, api_keys=(VALID_KEY,), scores=()):
        self.api_keys = set(api_keys)
        self.scores = list(scores)
        self.fail_reads = False
        self.fail_writes = False
        self.initialized = False
        self.closed = False
        self.key_lookups: list[str] = []
        self.requested_counts: list[int] = []

    async def initialize(self):
        self.initialized = True

    async def close(self):
        self.closed = True

    async def is_valid_api_key(self, key: str) -> bool:
        self.key_lookups.append(key)
        return key in self.api_keys

    async def get_top_scores(self, count: int) -> list[Score]:
        self.requested_counts.append(count)
        if self.fail_reads:
            raise DatabaseError("connection refused")
        ranked = sorted(self.scores, key=lambda s: s.score, reverse=True)
        return ranked[:count]

    async def insert_score(self, score: Score):
        if self.fail_writes:
            raise DatabaseError("connection refused")
        self.scores.append(score)


@pytest.fixture()
def fake_db() -> FakeDatabase:
    return FakeDatabase(
        scores=[Score(name=f"player{i}", score=i * 10) for i in range(1, 16)]
    )


@pytest.fixture()
def client(fake_db: FakeDatabase) -> Iterator[TestClient]:
    with TestClient(create_app(db=fake_db)) as test_client:
        yield test_client


def with_key(path: str, key: str = VALID_KEY) -> str:
    return f"{path}?apikey={key}"
