"""
Parsers from plain JSON-like dicts to content models.

Each parser raises ContentError naming the offending record so the caller
can report it; nothing is silently skipped.
"""

from datetime import date
from typing import Any, Iterable

from ..errors import ContentError
from .models import Forecast, Quote, Task


def _require(record: Any, fields: tuple[str, ...]) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise ContentError("Record must be an object", raw_data=record)
    missing = [name for name in fields if name not in record]
    if missing:
        raise ContentError(
            f"Record missing fields: {', '.join(missing)}",
            raw_data=record,
            missing_fields=missing,
        )
    return record


def parse_forecast(record: dict[str, Any]) -> Forecast:
    """Build a Forecast from {"date", "temperature", "descriptions", "endHour"}."""
    record = _require(record, ("date", "temperature", "descriptions"))
    try:
        day = record["date"]
        if not isinstance(day, date):
            day = date.fromisoformat(str(day)[:10])
        descriptions = record["descriptions"]
        if isinstance(descriptions, str):
            descriptions = [descriptions]
        end_hour = int(record.get("endHour", record.get("end_hour", 23)))
        temperature = int(round(float(record["temperature"])))
    except (TypeError, ValueError) as e:
        raise ContentError(f"Invalid forecast: {e}", raw_data=record) from e

    if not 0 <= end_hour <= 23:
        raise ContentError(f"endHour out of range: {end_hour}", raw_data=record)
    return Forecast(
        date=day,
        temperature=temperature,
        descriptions=tuple(str(d) for d in descriptions),
        end_hour=end_hour,
    )


def parse_quote(record: dict[str, Any]) -> Quote:
    """Build a Quote from {"name", "percentChange", "price"}."""
    record = _require(record, ("name", "price"))
    change = record.get("percentChange", record.get("percent_change"))
    if change is None:
        raise ContentError("Record missing fields: percentChange", raw_data=record,
                           missing_fields=["percentChange"])
    try:
        return Quote(name=str(record["name"]).strip().upper(),
                     percent_change=float(change),
                     price=float(record["price"]))
    except (TypeError, ValueError) as e:
        raise ContentError(f"Invalid quote: {e}", raw_data=record) from e


def parse_task(record: dict[str, Any]) -> Task:
    """Build a Task from {"title", "taskList"}."""
    record = _require(record, ("title",))
    task_list = record.get("taskList", record.get("task_list"))
    if task_list is None:
        raise ContentError("Record missing fields: taskList", raw_data=record,
                           missing_fields=["taskList"])
    return Task(title=str(record["title"]).strip(), task_list=str(task_list))


def parse_forecasts(records: Iterable[dict[str, Any]]) -> list[Forecast]:
    return [parse_forecast(r) for r in records]


def parse_quotes(records: Iterable[dict[str, Any]]) -> list[Quote]:
    return [parse_quote(r) for r in records]


def parse_tasks(records: Iterable[dict[str, Any]]) -> list[Task]:
    return [parse_task(r) for r in records]
