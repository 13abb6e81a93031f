from __future__ import annotations

from daia_test.cli.reporting import format_plan, format_result, make_listener
from daia_test.core.domain.models import TestRun


def _run(tap: bool) -> tuple[TestRun, list[str]]:
    lines: list[str] = []
    run = TestRun(listener=make_listener(lines.append, tap=tap))
    run.record(True, "first")
    run.record(False, "second", detail="HTTP 500")
    run.record(True, "third")
    return run, lines


def test_tap_mode_prints_everything():
    run, lines = _run(tap=True)
    lines.append(format_plan(run))

    assert lines == [
        "ok 1 - first",
        "not ok 2 - second",
        "# HTTP 500",
        "ok 3 - third",
        "1..3 # failed 1",
    ]


def test_default_mode_prints_only_failures():
    _, lines = _run(tap=False)
    assert lines == ["not ok 2 - second"]


def test_plan_when_all_pass():
    run = TestRun()
    run.record(True, "x")
    assert format_plan(run) == "1..1 # all passed"
    assert format_result(run.results[0]) == "ok 1 - x"
