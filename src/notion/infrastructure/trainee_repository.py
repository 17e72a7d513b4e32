from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from ...models.trainee import Trainee
from ...platform.config import Settings
from ...services.interfaces import NotionAPI
from ..application.ports import TraineeRepository
from .properties import (
    checkbox,
    query_all,
    read_checkbox,
    read_date,
    read_number,
    read_plain,
    read_rich_text,
    read_title,
    retrieve_live_page,
)


class NotionTraineeAdapter(TraineeRepository):
    """Concrete Notion adapter for trainee records."""

    def __init__(self, *, settings: Settings, client: NotionAPI) -> None:
        self._settings = settings
        self._client = client

    async def list_trainees(self) -> List[Trainee]:
        payload = {"sorts": [{"property": "Name", "direction": "ascending"}]}
        pages = await query_all(
            self._client, self._settings.notion_trainee_database_id, payload
        )
        trainees: List[Trainee] = []
        for page in pages:
            trainee = self._parse_page(page)
            if trainee is not None:
                trainees.append(trainee)
        return trainees

    async def get_trainee(self, trainee_id: str) -> Optional[Trainee]:
        page = await retrieve_live_page(self._client, trainee_id)
        if page is None:
            return None
        return self._parse_page(page)

    async def set_active(self, trainee_id: str, is_active: bool) -> None:
        await self._client.update(
            trainee_id, {"properties": {"Active": checkbox(is_active)}}
        )

    @staticmethod
    def _parse_page(page: Dict[str, Any]) -> Optional[Trainee]:
        props: Dict[str, Any] = page.get("properties", {})
        try:
            return Trainee(
                id=str(page.get("id") or ""),
                name=read_title(props, "Name"),
                email=read_plain(props, "Email", "email"),
                phone=read_plain(props, "Phone", "phone_number"),
                birth_date=read_date(props, "Birth Date"),
                address=read_rich_text(props, "Address"),
                weight_kg=read_number(props, "Weight Kg"),
                is_active=read_checkbox(props, "Active", default=True),
            )
        except (TypeError, ValueError) as exc:
            logger.warning(f"Skipping malformed trainee page {page.get('id')}: {exc}")
            return None


def create_notion_trainee_adapter(
    *, settings: Settings, client: NotionAPI
) -> TraineeRepository:
    """Create a Notion trainee adapter without relying on FastAPI wiring."""

    return NotionTraineeAdapter(settings=settings, client=client)

