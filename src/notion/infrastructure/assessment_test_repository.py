from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from ...models.assessment import PerformanceTest
from ...platform.config import Settings
from ...services.interfaces import NotionAPI
from ..application.ports import AssessmentTestRepository
from .properties import (
    query_all,
    read_date,
    read_number,
    read_relation_id,
    read_rich_text,
    read_select,
    retrieve_live_page,
)


class NotionAssessmentTestAdapter(AssessmentTestRepository):
    """Concrete Notion adapter for recorded fitness tests."""

    def __init__(self, *, settings: Settings, client: NotionAPI) -> None:
        self._settings = settings
        self._client = client

    async def list_tests_for_trainee(self, trainee_id: str) -> List[PerformanceTest]:
        payload = {
            "filter": {"property": "Trainee", "relation": {"contains": trainee_id}},
            "sorts": [{"property": "Date", "direction": "descending"}],
        }
        pages = await query_all(
            self._client, self._settings.notion_test_database_id, payload
        )
        tests: List[PerformanceTest] = []
        for page in pages:
            test = self._parse_page(page)
            if test is not None:
                tests.append(test)
        return tests

    async def get_test(self, test_id: str) -> Optional[PerformanceTest]:
        page = await retrieve_live_page(self._client, test_id)
        if page is None:
            return None
        return self._parse_page(page)

    async def delete_test(self, test_id: str) -> None:
        # Notion has no hard delete; archiving removes the page from queries.
        await self._client.update(test_id, {"archived": True})

    @staticmethod
    def _parse_page(page: Dict[str, Any]) -> Optional[PerformanceTest]:
        props: Dict[str, Any] = page.get("properties", {})
        try:
            return PerformanceTest(
                id=str(page.get("id") or ""),
                trainee_id=read_relation_id(props, "Trainee") or "",
                test_type=read_select(props, "Type") or "",
                test_date=read_date(props, "Date"),
                cooper_distance_m=read_number(props, "Cooper Distance [m]"),
                vo2_max=read_number(props, "VO2 Max"),
                flexibility_score=read_number(props, "Flexibility Score"),
                strength_score=read_number(props, "Strength Score"),
                duration_minutes=read_number(props, "Duration [min]"),
                notes=read_rich_text(props, "Notes"),
            )
        except (TypeError, ValueError) as exc:
            logger.warning(f"Skipping malformed test page {page.get('id')}: {exc}")
            return None


def create_notion_test_adapter(
    *, settings: Settings, client: NotionAPI
) -> AssessmentTestRepository:
    """Create a Notion test adapter without relying on FastAPI wiring."""

    return NotionAssessmentTestAdapter(settings=settings, client=client)
