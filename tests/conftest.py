"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from src import main
from src.platform.config import Settings, get_settings
from src.services.interfaces import NotionAPI
from src.services.notion import get_notion_client

from tests.fakes import NotionAssessmentFake


@dataclass
class _Expectation:
    expected: Dict[str, Any]
    returns: Any = None
    raises: Exception | None = None


class NotionAPIStub(NotionAPI):
    """Stubbed Notion API with expectation helpers."""

    def __init__(self) -> None:
        self._expectations: Dict[str, list[_Expectation]] = {
            "query": [],
            "create": [],
            "update": [],
            "retrieve": [],
        }
        self._last_calls: Dict[str, Dict[str, Any]] = {}
        self._call_history: Dict[str, list[Dict[str, Any]]] = {}

    def expect_query(
        self,
        database_id: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["query"].append(
            _Expectation({"database_id": database_id, "payload": payload}, returns, raises)
        )
        return self

    def expect_create(
        self,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["create"].append(_Expectation({"payload": payload}, returns, raises))
        return self

    def expect_update(
        self,
        page_id: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["update"].append(
            _Expectation({"page_id": page_id, "payload": payload}, returns, raises)
        )
        return self

    def expect_retrieve(
        self,
        page_id: str | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["retrieve"].append(_Expectation({"page_id": page_id}, returns, raises))
        return self

    def assert_last_query(
        self, database_id: str | None = None, payload: Dict[str, Any] | None = None
    ) -> None:
        self._assert_last_call("query", database_id, payload)

    def assert_last_create(self, payload: Dict[str, Any] | None = None) -> None:
        self._assert_last_call("create", payload=payload)

    def assert_last_update(
        self, page_id: str | None = None, payload: Dict[str, Any] | None = None
    ) -> None:
        self._assert_last_call("update", page_id, payload)

    def assert_not_called(self, name: str) -> None:
        calls = self._call_history.get(name, [])
        assert not calls, f"Expected no {name} calls, saw {len(calls)}"

    def call_count(self, name: str) -> int:
        return len(self._call_history.get(name, []))

    async def query(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._handle_call("query", database_id, payload)

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._handle_call("create", payload)

    async def update(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._handle_call("update", page_id, payload)

    async def retrieve(self, page_id: str) -> Dict[str, Any]:
        return await self._handle_call("retrieve", page_id)

    async def _handle_call(self, name: str, *args: Any) -> Any:
        recorded: Dict[str, Any] = {}
        match name:
            case "query":
                recorded = {"database_id": args[0], "payload": dict(args[1])}
            case "create":
                recorded = {"payload": args[0]}
            case "update":
                recorded = {"page_id": args[0], "payload": args[1]}
            case "retrieve":
                recorded = {"page_id": args[0]}

        self._last_calls[name] = recorded
        self._call_history.setdefault(name, []).append(recorded)
        expectations = self._expectations[name]
        if expectations:
            expectation = expectations.pop(0)
            for key, expected_value in expectation.expected.items():
                if expected_value is not None and recorded.get(key) != expected_value:
                    raise AssertionError(
                        f"Expected {name} {key}={expected_value!r} but got {recorded.get(key)!r}"
                    )
            if expectation.raises:
                raise expectation.raises
            return expectation.returns
        return {}

    def _assert_last_call(
        self,
        name: str,
        identifier: str | None = None,
        payload: Dict[str, Any] | None = None,
    ) -> None:
        assert name in self._last_calls, f"No {name} call was recorded"
        recorded = self._last_calls[name]
        if identifier is not None:
            target_key = "database_id" if name == "query" else "page_id"
            assert (
                recorded.get(target_key) == identifier
            ), f"Expected last {name} {target_key}={identifier!r}"
        if payload is not None:
            assert recorded.get("payload") == payload, f"Expected last {name} payload to match"

    def last_create_payload(self) -> Dict[str, Any] | None:
        return self._last_payload("create")

    def last_update_payload(self) -> Dict[str, Any] | None:
        return self._last_payload("update")

    def query_history(self) -> list[Dict[str, Any]]:
        return [recorded["payload"] for recorded in self._call_history.get("query", [])]

    def _last_payload(self, name: str) -> Dict[str, Any] | None:
        if name not in self._last_calls:
            return None
        return self._last_calls[name].get("payload")


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        notion_secret="notion-secret",
        notion_trainee_database_id="trainee-db",
        notion_test_database_id="test-db",
        notion_evaluation_database_id="evaluation-db",
    )


@pytest.fixture
def notion_api_stub() -> NotionAPIStub:
    return NotionAPIStub()


@pytest.fixture
def notion_fake(settings: Settings) -> NotionAssessmentFake:
    """In-memory Notion workspace holding trainees, tests and evaluations."""

    return NotionAssessmentFake(settings)


@pytest.fixture
def app(settings: Settings, notion_api_stub: NotionAPIStub) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_notion_client: lambda: notion_api_stub,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
