# csv export — turns record lists into downloadable csv text
# columns are an explicit key -> label mapping, values are read by key

import json
from datetime import date, datetime, timezone
from typing import Any, Iterable, Mapping, Sequence

from pydantic import BaseModel

Column = tuple[str, str]

# column maps used by the dashboard's export buttons
USER_COLUMNS: list[Column] = [
    ("id", "User ID"),
    ("displayName", "Display Name"),
    ("email", "Email"),
    ("role", "Role"),
    ("verified", "Verified"),
    ("active", "Active"),
    ("createdAt", "Created At"),
]

CONSULTANT_REQUEST_COLUMNS: list[Column] = [
    ("id", "User ID"),
    ("displayName", "Name"),
    ("email", "Email"),
    ("createdAt", "Applied Date"),
    ("cvUrl", "CV URL"),
    ("linkedinUrl", "LinkedIn URL"),
]

TASK_COLUMNS: list[Column] = [
    ("id", "Task ID"),
    ("userId", "User ID"),
    ("title", "Title"),
    ("status", "Status"),
    ("pointsAwarded", "Points Awarded"),
    ("requiresVerification", "Requires Verification"),
    ("date", "Task Date"),
    ("createdAt", "Created At"),
    ("completedAt", "Completed At"),
]

LEADERBOARD_COLUMNS: list[Column] = [
    ("rank", "Rank"),
    ("userId", "User ID"),
    ("userName", "User Name"),
    ("totalPoints", "Total Points"),
    ("lastUpdated", "Last Updated"),
]

SOS_COLUMNS: list[Column] = [
    ("id", "Contact ID"),
    ("userId", "User ID"),
    ("name", "Contact Name"),
    ("phoneNumber", "Phone Number"),
    ("relationship", "Relationship"),
    ("createdAt", "Created At"),
    ("updatedAt", "Updated At"),
]


def format_timestamp(value: datetime) -> str:
    """iso-8601 in utc with milliseconds, e.g. 2025-01-05T09:30:00.000Z"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, datetime):
        text = format_timestamp(value)
    elif isinstance(value, BaseModel):
        text = json.dumps(value.model_dump(mode="json", by_alias=True), separators=(",", ":"))
    elif isinstance(value, (dict, list, tuple)):
        text = json.dumps(value, separators=(",", ":"), default=str)
    else:
        text = str(value)

    if "," in text or '"' in text or "\n" in text:
        text = '"' + text.replace('"', '""') + '"'
    return text


def _as_mapping(record: Any) -> Mapping[str, Any]:
    """pydantic records are read by their camelCase aliases, like the json api"""
    if isinstance(record, BaseModel):
        return {
            **record.model_dump(by_alias=True),
            **record.model_dump(),
        }
    return record


def to_csv(records: Iterable[Any], columns: Sequence[Column]) -> str:
    """header row of labels then one row per record, lines joined by \\n"""
    lines = [",".join(format_cell(label) for _, label in columns)]
    for record in records:
        row = _as_mapping(record)
        lines.append(",".join(format_cell(row.get(key)) for key, _ in columns))
    return "\n".join(lines)


def export_filename(name: str, today: date) -> str:
    return f"{name}-{today.isoformat()}.csv"
