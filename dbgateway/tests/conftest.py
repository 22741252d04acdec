"""Shared fixtures: a recording stand-in for the async Supabase client."""

from typing import Any, List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from dbgateway.api import create_app
from dbgateway.infrastructure.database import RepositoryRegistry, SupabaseClient, TableRepository


class FakeResponse:
    def __init__(self, data: Any = None, count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Records every builder call; execute() returns the next canned response."""

    def __init__(self, supabase: "FakeSupabase", target: Tuple):
        self.supabase = supabase
        self.target = target
        self.calls: List[Tuple[str, tuple, dict]] = []

    def _record(self, name: str, *args, **kwargs) -> "FakeQuery":
        self.calls.append((name, args, kwargs))
        return self

    def select(self, *args, **kwargs):
        return self._record("select", *args, **kwargs)

    def insert(self, *args, **kwargs):
        return self._record("insert", *args, **kwargs)

    def update(self, *args, **kwargs):
        return self._record("update", *args, **kwargs)

    def upsert(self, *args, **kwargs):
        return self._record("upsert", *args, **kwargs)

    def delete(self, *args, **kwargs):
        return self._record("delete", *args, **kwargs)

    def eq(self, *args, **kwargs):
        return self._record("eq", *args, **kwargs)

    def order(self, *args, **kwargs):
        return self._record("order", *args, **kwargs)

    def limit(self, *args, **kwargs):
        return self._record("limit", *args, **kwargs)

    def range(self, *args, **kwargs):
        return self._record("range", *args, **kwargs)

    def called(self, name: str) -> List[Tuple[tuple, dict]]:
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]

    async def execute(self) -> FakeResponse:
        if self.supabase.error is not None:
            raise self.supabase.error
        if self.supabase.responses:
            return self.supabase.responses.pop(0)
        return FakeResponse(data=[])


class FakeSupabase:
    """Minimal async Supabase client: table() and rpc() builders only."""

    def __init__(self):
        self.queries: List[FakeQuery] = []
        self.responses: List[FakeResponse] = []
        self.error: Optional[Exception] = None

    def respond(self, data: Any = None, count: Optional[int] = None) -> None:
        self.responses.append(FakeResponse(data=data, count=count))

    def fail(self, error: Exception) -> None:
        self.error = error

    def table(self, name: str) -> FakeQuery:
        query = FakeQuery(self, ("table", name))
        self.queries.append(query)
        return query

    def rpc(self, fn: str, params: Optional[dict] = None) -> FakeQuery:
        query = FakeQuery(self, ("rpc", fn, params))
        self.queries.append(query)
        return query

    @property
    def last(self) -> FakeQuery:
        return self.queries[-1]


@pytest.fixture(autouse=True)
def reset_supabase_singleton():
    SupabaseClient.reset()
    yield
    SupabaseClient.reset()


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def repository(fake_supabase) -> TableRepository:
    return TableRepository("test_table", fake_supabase)


@pytest.fixture
def registry(fake_supabase) -> RepositoryRegistry:
    return RepositoryRegistry(fake_supabase)


@pytest.fixture
def api_client(registry) -> TestClient:
    return TestClient(create_app(registry=registry))
