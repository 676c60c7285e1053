from __future__ import annotations

import asyncio
import io
from collections.abc import Sequence
from datetime import UTC, datetime
from types import SimpleNamespace

import pytest
from rich.console import Console
from rich.control import Control
from rich.text import Text

from stack_tail.display import TerminalRenderer, align_columns, drive
from stack_tail.domain import SourceKind, StatusRecord
from stack_tail.runtime import FollowEngine, Tick

CURSOR_UP = "\x1b[1A"
ERASE_LINE = "\x1b[2K"


@pytest.fixture(autouse=True)
def _capable_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM", "xterm-256color")


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=200, color_system=None, force_terminal=True)


def _record(resource_id: str, status: str = "CREATE_COMPLETE") -> StatusRecord:
    return StatusRecord(
        resource_type="AWS::S3::Bucket",
        timestamp=datetime(2024, 5, 1, 9, 0, tzinfo=UTC),
        status=status,
        resource_id=resource_id,
        reason="",
    )


def test_align_columns_pads_to_widest_cell() -> None:
    rows = [
        [Text("a"), Text("bbbb"), Text("c")],
        [Text("aaa"), Text("b"), Text("c")],
    ]

    lines = [line.plain for line in align_columns(rows)]

    assert lines == ["a    bbbb  c", "aaa  b     c"]


def test_align_columns_keeps_empty_cells() -> None:
    lines = [line.plain for line in align_columns([[Text(""), Text("x")], [Text("yy"), Text("z")]])]

    assert lines == ["    x", "yy  z"]


def test_first_draw_erases_nothing() -> None:
    buffer = io.StringIO()
    renderer = TerminalRenderer(_console(buffer))

    renderer.draw(Tick(previous_count=0, records=(_record("Bucket"), _record("Queue"))))

    output = buffer.getvalue()
    assert CURSOR_UP not in output
    assert output.count("\n") == 2
    assert "Bucket" in output
    assert "Queue" in output


def test_draw_erases_previous_rows() -> None:
    buffer = io.StringIO()
    renderer = TerminalRenderer(_console(buffer))

    renderer.draw(Tick(previous_count=3, records=(_record("Bucket"),)))

    output = buffer.getvalue()
    assert output.count(CURSOR_UP) == 3
    assert output.count(ERASE_LINE) == 3
    assert output.index(ERASE_LINE) < output.index("Bucket")


def test_renderer_omits_reason_when_asked() -> None:
    buffer = io.StringIO()
    record = _record("Bucket").model_copy(update={"reason": "Resource creation Initiated"})

    TerminalRenderer(_console(buffer), include_reason=False).write([record])

    assert "Resource creation Initiated" not in buffer.getvalue()


def test_erase_and_flush_failures_are_ignored() -> None:
    class BrokenConsole(Console):
        def control(self, *control: Control) -> None:
            raise OSError("terminal went away")

    class BrokenStream(io.StringIO):
        def flush(self) -> None:
            raise OSError("terminal went away")

    renderer = TerminalRenderer(BrokenConsole(file=io.StringIO(), force_terminal=True))
    renderer.clear(2)

    stub = SimpleNamespace(file=BrokenStream())
    TerminalRenderer(stub).flush()  # type: ignore[arg-type]


def test_drive_repaints_each_tick() -> None:
    class TwoStepSource:
        kind = SourceKind.RESOURCES

        def __init__(self) -> None:
            self._batches = [
                (_record("Bucket", "CREATE_IN_PROGRESS"), _record("Queue", "CREATE_IN_PROGRESS")),
                (_record("Bucket"), _record("Queue")),
            ]

        async def fetch(self) -> tuple[StatusRecord, ...]:
            return self._batches.pop(0)

        def is_done(self, batch: Sequence[StatusRecord], follow: bool) -> bool:
            return not follow or all(record.is_terminal() for record in batch)

    async def _no_sleep(seconds: float) -> None:
        return None

    buffer = io.StringIO()
    engine = FollowEngine(TwoStepSource(), follow=True, sleep=_no_sleep)

    drawn = asyncio.run(drive(engine, TerminalRenderer(_console(buffer))))

    output = buffer.getvalue()
    assert drawn == 2
    assert output.count(CURSOR_UP) == 2
    assert output.count("CREATE_IN_PROGRESS") == 2
    assert output.count("CREATE_COMPLETE") == 2
    assert output.rindex("CREATE_IN_PROGRESS") < output.index(CURSOR_UP)


def test_piped_output_is_not_cropped() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=20, color_system=None, force_terminal=False)

    TerminalRenderer(console).write([_record("AVeryLongLogicalResourceIdentifier")])

    assert "AVeryLongLogicalResourceIdentifier" in buffer.getvalue()
    assert "CREATE_COMPLETE" in buffer.getvalue()


def test_multi_line_reason_draws_one_line_per_record() -> None:
    buffer = io.StringIO()
    record = _record("Bucket", "CREATE_FAILED").model_copy(
        update={"reason": "Handler failed:\nAccessDenied"}
    )

    TerminalRenderer(_console(buffer)).write([record])

    assert buffer.getvalue().count("\n") == 1
    assert "Handler failed: AccessDenied" in buffer.getvalue()
