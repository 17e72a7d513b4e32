"""Factories and assertion helpers for API tests."""

from __future__ import annotations

from typing import Any, Dict

from src.platform.config import Settings
from tests.builders import make_notion_test, make_notion_trainee
from tests.conftest import NotionAPIStub


def auth_headers(settings: Settings) -> Dict[str, str]:
    return {"x-api-key": settings.api_key}


def expect_evaluable_pair(
    stub: NotionAPIStub,
    *,
    trainee: Dict[str, Any] | None = None,
    test: Dict[str, Any] | None = None,
) -> None:
    """Queue the trainee and test lookups an evaluation request performs."""

    stub.expect_retrieve("trainee-1", returns=trainee or make_notion_trainee())
    stub.expect_retrieve("test-1", returns=test or make_notion_test())


def assert_metrics(payload: Dict[str, Any], **expected: float) -> None:
    """Compare numeric response fields within floating point tolerance."""

    for key, value in expected.items():
        assert abs(payload[key] - value) <= abs(value) * 1e-6, (
            f"Expected {key}={value!r}, saw {payload[key]!r}"
        )
