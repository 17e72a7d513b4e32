"""Readers and writers for Notion page property payloads."""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ...services.interfaces import NotionAPI

Properties = Dict[str, Any]


def read_title(props: Properties, name: str) -> str:
    title_data = props.get(name, {}).get("title", [])
    if title_data:
        return title_data[0].get("text", {}).get("content", "")
    return ""


def read_rich_text(props: Properties, name: str) -> Optional[str]:
    payload = props.get(name, {}).get("rich_text")
    if payload:
        return payload[0].get("text", {}).get("content")
    return None


def read_number(props: Properties, name: str) -> Optional[float]:
    return props.get(name, {}).get("number")


def read_checkbox(props: Properties, name: str, default: bool = False) -> bool:
    value = props.get(name, {}).get("checkbox")
    return default if value is None else bool(value)


def read_date(props: Properties, name: str) -> Optional[str]:
    """Return the ISO date part of a date property's start."""

    date_data = props.get(name, {}).get("date")
    if date_data and date_data.get("start"):
        return date_data["start"].split("T")[0]
    return None


def read_select(props: Properties, name: str) -> Optional[str]:
    payload = props.get(name, {})
    if payload.get("select"):
        return payload["select"].get("name")
    # Older test pages store the type as plain text.
    return read_rich_text(props, name)


def read_relation_id(props: Properties, name: str) -> Optional[str]:
    relations: List[Dict[str, Any]] = props.get(name, {}).get("relation", [])
    if relations:
        return relations[0].get("id")
    return None


def read_plain(props: Properties, name: str, kind: str) -> Optional[str]:
    """Read ``email``/``phone_number`` style properties holding a bare string."""

    return props.get(name, {}).get(kind)


def title(content: str) -> Dict[str, Any]:
    return {"title": [{"text": {"content": content}}]}


def rich_text(content: str) -> Dict[str, Any]:
    return {"rich_text": [{"text": {"content": content}}]}


def number(value: Optional[float]) -> Dict[str, Any]:
    return {"number": value}


def date_value(value: date) -> Dict[str, Any]:
    return {"date": {"start": value.isoformat()}}


def relation(page_id: str) -> Dict[str, Any]:
    return {"relation": [{"id": page_id}]}


def checkbox(value: bool) -> Dict[str, Any]:
    return {"checkbox": value}


async def query_all(
    client: NotionAPI, database_id: str, payload: Dict[str, Any]
) -> List[Dict[str, Any]]:
    """Follow ``next_cursor`` until every page of a query has been read."""

    body: Dict[str, Any] = dict(payload)
    pages: List[Dict[str, Any]] = []
    while True:
        response: Dict[str, Any] = await client.query(database_id, body)
        pages.extend(response.get("results", []))
        if not response.get("has_more"):
            break
        body["start_cursor"] = response.get("next_cursor")
    return pages


async def retrieve_live_page(client: NotionAPI, page_id: str) -> Optional[Dict[str, Any]]:
    """Return a page unless it is missing or archived."""

    try:
        page = await client.retrieve(page_id)
    except HTTPException as exc:
        if exc.status_code == 404:
            return None
        raise
    if not page or page.get("archived") or page.get("in_trash"):
        return None
    return page
