from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from ...models.evaluation import PerformanceEvaluationRecord
from ...platform.config import Settings
from ...services.interfaces import NotionAPI
from ..application.ports import EvaluationRepository
from .properties import (
    date_value,
    number,
    query_all,
    read_date,
    read_number,
    read_relation_id,
    read_rich_text,
    relation,
    rich_text,
    title,
)

# Record field -> Notion number property.
NUMBER_PROPERTIES: Dict[str, str] = {
    "intensity_percentage": "Intensity [%]",
    "training_time": "Training Time [min]",
    "cooper_distance_m": "Cooper Distance [m]",
    "body_weight_kg": "Body Weight Kg",
    "vo2_max": "VO2 Max",
    "training_distance": "Training Distance [m]",
    "training_intensity": "Training Intensity [%]",
    "training_speed": "Training Speed [km/h]",
    "total_o2_consumption": "Total O2 [L]",
    "caloric_expenditure": "Caloric Expenditure [kcal]",
    "weight_loss": "Weight Loss [kg]",
}


class NotionEvaluationAdapter(EvaluationRepository):
    """Concrete Notion adapter storing performance evaluations."""

    def __init__(self, *, settings: Settings, client: NotionAPI) -> None:
        self._settings = settings
        self._client = client

    async def create_evaluation(self, record: PerformanceEvaluationRecord) -> str:
        props: Dict[str, Any] = {
            "Name": title(f"Evaluation {record.test_date.isoformat()}"),
            "Trainee": relation(record.trainee_id),
            "Test": relation(record.test_id),
            "Date": date_value(record.test_date),
        }
        for field_name, property_name in NUMBER_PROPERTIES.items():
            props[property_name] = number(getattr(record, field_name))
        if record.observations:
            props["Observations"] = rich_text(record.observations)

        payload = {
            "parent": {"database_id": self._settings.notion_evaluation_database_id},
            "properties": props,
        }
        created = await self._client.create(payload)
        return str(created.get("id") or "")

    async def list_evaluations(
        self, trainee_id: Optional[str] = None
    ) -> List[PerformanceEvaluationRecord]:
        payload: Dict[str, Any] = {
            "sorts": [{"property": "Date", "direction": "descending"}]
        }
        if trainee_id:
            payload["filter"] = {
                "property": "Trainee",
                "relation": {"contains": trainee_id},
            }
        pages = await query_all(
            self._client, self._settings.notion_evaluation_database_id, payload
        )
        records: List[PerformanceEvaluationRecord] = []
        for page in pages:
            record = self._parse_page(page)
            if record is not None:
                records.append(record)
        return records

    @staticmethod
    def _parse_page(page: Dict[str, Any]) -> Optional[PerformanceEvaluationRecord]:
        props: Dict[str, Any] = page.get("properties", {})
        try:
            numbers = {
                field_name: read_number(props, property_name)
                for field_name, property_name in NUMBER_PROPERTIES.items()
            }
            return PerformanceEvaluationRecord(
                id=str(page.get("id") or ""),
                trainee_id=read_relation_id(props, "Trainee") or "",
                test_id=read_relation_id(props, "Test") or "",
                test_date=read_date(props, "Date"),
                observations=read_rich_text(props, "Observations") or "",
                **numbers,
            )
        except (TypeError, ValueError) as exc:
            logger.warning(f"Skipping malformed evaluation page {page.get('id')}: {exc}")
            return None


def create_notion_evaluation_adapter(
    *, settings: Settings, client: NotionAPI
) -> EvaluationRepository:
    """Create a Notion evaluation adapter without relying on FastAPI wiring."""

    return NotionEvaluationAdapter(settings=settings, client=client)
