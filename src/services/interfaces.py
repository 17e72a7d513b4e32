"""Port for the Notion REST endpoints the repositories rely on."""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

NotionObject = Dict[str, Any]


@runtime_checkable
class NotionAPI(Protocol):
    """Page and database operations used by the trainee, test and evaluation stores.

    Implementations raise ``fastapi.HTTPException`` carrying Notion's status
    code when a call fails; a missing page surfaces as a 404. Archiving a page
    is an ``update`` with ``{"archived": True}``.
    """

    async def query(self, database_id: str, payload: Dict[str, Any]) -> NotionObject:
        """Return one page of results for a database query."""

    async def create(self, payload: Dict[str, Any]) -> NotionObject:
        """Create a page under the parent named in ``payload``."""

    async def update(self, page_id: str, payload: Dict[str, Any]) -> NotionObject:
        """Patch page properties or its archived flag."""

    async def retrieve(self, page_id: str) -> NotionObject:
        """Fetch a single page, archived or not."""


__all__ = ["NotionAPI", "NotionObject"]
