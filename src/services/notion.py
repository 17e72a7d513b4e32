from __future__ import annotations

from typing import Any, Dict

import httpx
from fastapi import Depends, HTTPException
from loguru import logger

from ..platform.config import Settings, get_settings
from .interfaces import NotionAPI, NotionObject

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"


def _error_detail(response: httpx.Response) -> str:
    """Prefer Notion's ``message`` field over the raw body."""

    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text


class NotionClient(NotionAPI):
    """Async Notion client; failures become ``HTTPException`` with Notion's status."""

    def __init__(self, *, settings: Settings, timeout: float = 30.0) -> None:
        self._headers: Dict[str, str] = {
            "Authorization": f"Bearer {settings.notion_secret}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        }
        self._timeout = timeout

    async def _send(self, method: str, path: str, **kwargs: Any) -> NotionObject:
        try:
            async with httpx.AsyncClient(
                base_url=NOTION_API_URL, headers=self._headers, timeout=self._timeout
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning(f"Notion {method} {path} timed out after {self._timeout}s")
            raise HTTPException(status_code=504, detail="Request to Notion timed out") from exc

        if response.is_success:
            return response.json()

        detail = _error_detail(response)
        if response.status_code == 404:
            logger.debug(f"Notion {method} {path}: not found")
        else:
            logger.error(f"Notion {method} {path} failed with {response.status_code}: {detail}")
        raise HTTPException(status_code=response.status_code, detail=detail)

    async def query(self, database_id: str, payload: Dict[str, Any]) -> NotionObject:
        return await self._send("POST", f"/databases/{database_id}/query", json=payload)

    async def create(self, payload: Dict[str, Any]) -> NotionObject:
        return await self._send("POST", "/pages", json=payload)

    async def update(self, page_id: str, payload: Dict[str, Any]) -> NotionObject:
        return await self._send("PATCH", f"/pages/{page_id}", json=payload)

    async def retrieve(self, page_id: str) -> NotionObject:
        return await self._send("GET", f"/pages/{page_id}")


def get_notion_client(settings: Settings = Depends(get_settings)) -> NotionAPI:
    """FastAPI dependency returning a client for the configured workspace."""

    return NotionClient(settings=settings)
