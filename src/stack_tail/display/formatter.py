"""Row formatting for status records."""

from __future__ import annotations

from datetime import tzinfo

from rich.text import Text

from stack_tail.domain import StatusClass, StatusRecord
from stack_tail.utils import format_timestamp

COLUMN_SEPARATOR = "\t"

COMPLETE_GLYPH = "✅"
DELETED_GLYPH = "⚰️ "
FAILED_GLYPH = "❌"
IN_PROGRESS_GLYPH = "🔄"


def decorate_status(record: StatusRecord) -> Text:
    """Prefix the status with a glyph and colour it by lifecycle class."""

    status_class = record.status_class
    if status_class is StatusClass.COMPLETED:
        glyph = DELETED_GLYPH if record.is_deletion() else COMPLETE_GLYPH
        return Text.assemble(f"{glyph} ", (record.status, "bold bright_green"))
    if status_class is StatusClass.FAILED:
        return Text.assemble(f"{FAILED_GLYPH} ", (record.status, "bold bright_red"))
    return Text(f"{IN_PROGRESS_GLYPH} {record.status}")


def render_columns(
    record: StatusRecord,
    timezone: tzinfo | None = None,
    *,
    include_reason: bool = True,
) -> list[Text]:
    columns = [
        Text(format_timestamp(record.timestamp, timezone)),
        Text(record.resource_id, style="bold"),
        Text(record.resource_type, style="bright_black"),
        decorate_status(record),
    ]
    if include_reason:
        # Keep each row on one screen line.
        reason = " ".join(record.reason.split())
        columns.append(Text(reason, style="bright_black"))
    return columns


def render(
    record: StatusRecord,
    timezone: tzinfo | None = None,
    *,
    include_reason: bool = True,
) -> Text:
    """Render a record as a single tab-delimited row."""

    columns = render_columns(record, timezone, include_reason=include_reason)
    return Text(COLUMN_SEPARATOR).join(columns)


__all__ = ["COLUMN_SEPARATOR", "decorate_status", "render", "render_columns"]
