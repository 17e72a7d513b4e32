"""Helpers and doubles for Notion interactions in tests."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from fastapi import HTTPException

from src.platform.config import Settings
from src.services.interfaces import NotionAPI


class NotionAssessmentFake(NotionAPI):
    """In-memory Notion workspace keyed by database id.

    Queries honour ``relation.contains`` filters on the ``Trainee`` property
    and skip archived pages; ``retrieve`` raises a 404 for unknown pages like
    the real client does.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._databases: Dict[str, List[Dict[str, Any]]] = {}
        self._pages: Dict[str, Dict[str, Any]] = {}
        self._created: List[Dict[str, Any]] = []
        self._updates: List[Tuple[str, Dict[str, Any]]] = []

    def _seed(self, database_id: str, pages: Iterable[Dict[str, Any]]) -> None:
        for page in pages:
            self._databases.setdefault(database_id, []).append(page)
            self._pages[page["id"]] = page

    def with_trainees(self, pages: Iterable[Dict[str, Any]]) -> "NotionAssessmentFake":
        self._seed(self._settings.notion_trainee_database_id, pages)
        return self

    def with_tests(self, pages: Iterable[Dict[str, Any]]) -> "NotionAssessmentFake":
        self._seed(self._settings.notion_test_database_id, pages)
        return self

    def created(self) -> List[Dict[str, Any]]:
        """Expose recorded create payloads for assertions."""

        return list(self._created)

    def updates(self) -> List[Tuple[str, Dict[str, Any]]]:
        return list(self._updates)

    def page(self, page_id: str) -> Dict[str, Any]:
        return self._pages[page_id]

    async def query(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        pages = [
            page
            for page in self._databases.get(database_id, [])
            if not page.get("archived")
        ]
        relation_filter = payload.get("filter", {}).get("relation")
        if relation_filter:
            wanted = relation_filter["contains"]
            pages = [
                page
                for page in pages
                if any(
                    item.get("id") == wanted
                    for item in page["properties"]
                    .get("Trainee", {})
                    .get("relation", [])
                )
            ]
        return {"results": pages, "has_more": False, "next_cursor": None}

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        page_id = f"created-{len(self._created) + 1}"
        self._created.append(payload)
        page = {"id": page_id, "properties": payload.get("properties", {})}
        self._seed(payload["parent"]["database_id"], [page])
        return {"id": page_id}

    async def update(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        self._updates.append((page_id, payload))
        page = self._pages.setdefault(page_id, {"id": page_id, "properties": {}})
        page.setdefault("properties", {}).update(payload.get("properties", {}))
        if "archived" in payload:
            page["archived"] = payload["archived"]
        return {"id": page_id}

    async def retrieve(self, page_id: str) -> Dict[str, Any]:
        if page_id not in self._pages:
            raise HTTPException(status_code=404, detail="object_not_found")
        return self._pages[page_id]
