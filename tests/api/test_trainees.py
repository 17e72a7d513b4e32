"""Trainee API integration tests."""

from __future__ import annotations

import httpx
import pytest
from fastapi import HTTPException

from src.platform.config import Settings
from tests.api.helpers import auth_headers
from tests.builders import make_notion_test, make_notion_trainee, notion_number
from tests.conftest import NotionAPIStub

pytestmark = pytest.mark.asyncio


async def test_list_active_trainees(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_query(
        database_id=settings.notion_trainee_database_id,
        returns={
            "results": [
                make_notion_trainee(id="trainee-1"),
                make_notion_trainee(id="trainee-2", properties={"Active": {"checkbox": False}}),
            ]
        },
    )

    response = await client.get(
        "/v1/trainees", params={"active_only": "true"}, headers=auth_headers(settings)
    )

    assert response.status_code == 200
    body = response.json()
    assert [trainee["id"] for trainee in body] == ["trainee-1"]
    assert body[0]["birth_date"] == "1990-05-20"
    assert body[0]["weight_kg"] == 70


async def test_set_trainee_status(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_retrieve("trainee-1", returns=make_notion_trainee())

    response = await client.put(
        "/v1/trainees/trainee-1/status",
        json={"is_active": False},
        headers=auth_headers(settings),
    )

    assert response.status_code == 200
    assert response.json() == {"status": "deactivated", "id": "trainee-1"}
    notion_api_stub.assert_last_update(
        "trainee-1", {"properties": {"Active": {"checkbox": False}}}
    )


async def test_toggle_trainee_status(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_retrieve(
        "trainee-1",
        returns=make_notion_trainee(properties={"Active": {"checkbox": False}}),
    )

    response = await client.post(
        "/v1/trainees/trainee-1/toggle-status", headers=auth_headers(settings)
    )

    assert response.status_code == 200
    assert response.json() == {"status": "activated", "id": "trainee-1"}


async def test_toggle_unknown_trainee(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_retrieve(
        "ghost", raises=HTTPException(status_code=404, detail="object_not_found")
    )

    response = await client.post("/v1/trainees/ghost/toggle-status", headers=auth_headers(settings))

    assert response.status_code == 404
    assert response.json() == {"detail": {"error": "Trainee not found"}}
    notion_api_stub.assert_not_called("update")


async def test_list_trainee_tests_by_type(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_retrieve("trainee-1", returns=make_notion_trainee())
    notion_api_stub.expect_query(
        database_id=settings.notion_test_database_id,
        returns={
            "results": [
                make_notion_test(id="test-1"),
                make_notion_test(
                    id="test-2",
                    properties={
                        "Type": {"select": {"name": "strength"}},
                        "Cooper Distance [m]": notion_number(None),
                        "VO2 Max": notion_number(None),
                        "Strength Score": notion_number(48),
                    },
                ),
            ]
        },
    )

    response = await client.get(
        "/v1/trainees/trainee-1/tests",
        params={"test_type": "strength"},
        headers=auth_headers(settings),
    )

    assert response.status_code == 200
    body = response.json()
    assert [test["id"] for test in body] == ["test-2"]
    assert body[0]["type_label"] == "Strength"
    assert body[0]["average_score"] == 48.0


async def test_list_cooper_tests_skips_tests_without_distance(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_retrieve("trainee-1", returns=make_notion_trainee())
    notion_api_stub.expect_query(
        database_id=settings.notion_test_database_id,
        returns={
            "results": [
                make_notion_test(id="test-1"),
                make_notion_test(
                    id="test-2", properties={"Cooper Distance [m]": notion_number(None)}
                ),
            ]
        },
    )

    response = await client.get(
        "/v1/trainees/trainee-1/cooper-tests", headers=auth_headers(settings)
    )

    assert response.status_code == 200
    assert [test["id"] for test in response.json()] == ["test-1"]


async def test_notion_failure_propagates(
    client: httpx.AsyncClient, notion_api_stub: NotionAPIStub, settings: Settings
) -> None:
    notion_api_stub.expect_query(
        raises=HTTPException(status_code=504, detail="Request to Notion timed out")
    )

    response = await client.get("/v1/trainees", headers=auth_headers(settings))

    assert response.status_code == 504
