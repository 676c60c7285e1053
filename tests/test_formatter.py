from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from stack_tail.display import decorate_status, render
from stack_tail.domain import STACK_RESOURCE_TYPE, StatusRecord


def _record(status: str = "UPDATE_COMPLETE", reason: str = "User Initiated") -> StatusRecord:
    return StatusRecord(
        resource_type=STACK_RESOURCE_TYPE,
        timestamp="1996-12-19T16:39:57-08:00",
        status=status,
        resource_id="demo",
        reason=reason,
    )


def _spans(text: object) -> set[str]:
    return {str(span.style) for span in text.spans}  # type: ignore[attr-defined]


def test_render_produces_tab_delimited_row() -> None:
    row = render(_record())

    assert row.plain.split("\t") == [
        "1996-12-19 16:39:57 -08:00",
        "demo",
        STACK_RESOURCE_TYPE,
        "✅ UPDATE_COMPLETE",
        "User Initiated",
    ]


def test_render_can_omit_reason() -> None:
    row = render(_record(), include_reason=False)

    assert row.plain.split("\t")[-1] == "✅ UPDATE_COMPLETE"
    assert "User Initiated" not in row.plain


def test_render_styles_columns() -> None:
    styles = _spans(render(_record()))

    assert "bold" in styles
    assert "bright_black" in styles
    assert "bold bright_green" in styles


def test_status_decoration_by_lifecycle() -> None:
    assert decorate_status(_record("CREATE_COMPLETE")).plain == "✅ CREATE_COMPLETE"
    assert decorate_status(_record("DELETE_COMPLETE")).plain == "⚰️  DELETE_COMPLETE"
    assert decorate_status(_record("CREATE_FAILED")).plain == "❌ CREATE_FAILED"
    assert decorate_status(_record("CREATE_IN_PROGRESS")).plain == "🔄 CREATE_IN_PROGRESS"
    assert "bold bright_red" in _spans(decorate_status(_record("CREATE_FAILED")))
    assert not decorate_status(_record("CREATE_IN_PROGRESS")).spans


def test_render_is_idempotent() -> None:
    record = _record()
    zone = ZoneInfo("America/New_York")

    first = render(record, zone)
    second = render(record, zone)

    assert first.plain == second.plain
    assert first.spans == second.spans


def test_render_converts_to_named_timezone() -> None:
    record = _record()

    native = render(record).plain.split("\t")[0]
    local = render(record, ZoneInfo("America/New_York")).plain.split("\t")[0]

    assert native == "1996-12-19 16:39:57 -08:00"
    assert local == "1996-12-19 19:39:57 EST"
    assert native != local
    same_instant = datetime(1996, 12, 19, 19, 39, 57, tzinfo=ZoneInfo("America/New_York"))
    assert same_instant == record.timestamp
    assert same_instant.astimezone(UTC) == datetime(1996, 12, 20, 0, 39, 57, tzinfo=UTC)


def test_render_keeps_sub_second_precision() -> None:
    record = _record().model_copy(
        update={"timestamp": datetime(2024, 5, 1, 9, 0, 0, 123456, tzinfo=UTC)}
    )

    native = render(record).plain.split("\t")[0]
    local = render(record, ZoneInfo("America/New_York")).plain.split("\t")[0]

    assert native == "2024-05-01 09:00:00.123456 +00:00"
    assert local == "2024-05-01 05:00:00.123456 EDT"


def test_render_flattens_multi_line_reason() -> None:
    row = render(_record("CREATE_FAILED", reason="Handler failed:\n  AccessDenied\r\n"))

    assert "\n" not in row.plain
    assert row.plain.split("\t")[-1] == "Handler failed: AccessDenied"
