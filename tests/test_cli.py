import pytest

from weightemit.cli import run_plan
from weightemit.diagnostics import build_plan
from weightemit import WeightedEmitter


def test_build_plan_lists_delivery_order():
    def audit():
        pass

    def notify():
        pass

    emitter = WeightedEmitter().on("saved", notify).once("saved.Infinity", audit)
    plan = build_plan(emitter, "saved")
    assert [(entry.position, entry.weight, entry.once) for entry in plan] == [
        (1, "Infinity", True),
        (2, "-Infinity", False),
    ]
    assert plan[0].label.endswith("audit")
    assert build_plan(emitter, "missing") == []


def test_run_plan_prints_order(capsys):
    run_plan(["a.2", "a", "a.1", "--event", "a", "--emit"])
    out = capsys.readouterr().out
    assert "Delivery plan for 'a'" in out
    assert "Dispatched 'a': #1 a.2, #3 a.1, #2 a" in out


def test_run_plan_rejects_invalid_name(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_plan(["a.1.1.1"])
    assert excinfo.value.code == 1
