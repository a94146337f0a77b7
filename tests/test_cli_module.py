from __future__ import annotations

import io
import os
import subprocess
import sys
from pathlib import Path

import pytest

from ship_navigation.__main__ import main

REPO_ROOT = Path(__file__).resolve().parents[1]
SAMPLE = REPO_ROOT / "samples" / "demo_journey.txt"


def _run_module(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    cmd = [sys.executable, "-m", "ship_navigation", *args]
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        cmd, text=True, encoding="utf-8", capture_output=True, cwd=REPO_ROOT, env=env, input=stdin
    )


def test_cli_help_succeeds() -> None:
    p = _run_module("--help")
    assert p.returncode == 0, p.stderr
    assert "Ship Navigation Simulator" in (p.stdout or "")


def test_cli_input_file_prints_both_distances() -> None:
    assert SAMPLE.exists()
    p = _run_module("run", "--input", str(SAMPLE))
    assert p.returncode == 0, p.stderr
    assert p.stdout == "manhattan distance is 25\nmanhattan distance is 286\n"


def test_cli_reads_stdin_when_no_input_given() -> None:
    p = _run_module("run", stdin="F10\nN3\nF7\nR90\nF11\n")
    assert p.returncode == 0, p.stderr
    assert p.stdout.splitlines() == ["manhattan distance is 25", "manhattan distance is 286"]


def test_cli_rejects_bad_rotation_without_partial_output() -> None:
    p = _run_module("run", stdin="F10\nR45\nF11\n")
    assert p.returncode == 2
    assert p.stdout == ""
    assert "invalid rotation 45" in p.stderr
    assert "line 2" in p.stderr


def test_cli_rejects_missing_input_file(tmp_path: Path, capsys) -> None:
    rc = main(["run", "--input", str(tmp_path / "nope.txt")])
    assert rc == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "file not found" in captured.err


def test_cli_trace_prints_both_rule_sets_before_results(capsys) -> None:
    rc = main(["run", "--input", str(SAMPLE), "--trace"])
    assert rc == 0

    out = capsys.readouterr().out
    assert out.index("heading rules") < out.index("waypoint rules") < out.index("manhattan distance is 25")
    assert out.rstrip().endswith("manhattan distance is 286")


def test_cli_bare_invocation_reads_stdin() -> None:
    p = _run_module(stdin="F10\nN3\nF7\nR90\nF11\n")
    assert p.returncode == 0, p.stderr
    assert p.stdout == "manhattan distance is 25\nmanhattan distance is 286\n"


@pytest.mark.parametrize(
    "journey, message",
    [
        ("F10\nX5\n", "invalid instruction: X5"),
        ("F10\nF\n", "invalid instruction line"),
        ("F10\nF٣\n", "invalid action value"),
        ("F99999999999999999999\n", "out of range"),
    ],
)
def test_cli_rejects_bad_lines_without_partial_output(journey: str, message: str) -> None:
    p = _run_module(stdin=journey)
    assert p.returncode == 2
    assert p.stdout == ""
    assert message in p.stderr


def test_main_without_arguments_plots_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("R90\nF10\n"))
    rc = main([])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "manhattan distance is 10",
        "manhattan distance is 110",
    ]


def test_cli_writes_nothing_besides_stdout(tmp_path: Path, capsys) -> None:
    journey = tmp_path / "journey.txt"
    journey.write_text("F10\nN3\nF7\nR90\nF11\n", encoding="utf-8")

    rc = main(["run", "--input", str(journey), "--trace"])
    assert rc == 0
    capsys.readouterr()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["journey.txt"]

    with pytest.raises(SystemExit):
        main(["run", "--events-out", str(tmp_path / "events.json")])


def test_demo_trace_script_reports_distances() -> None:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    p = subprocess.run(
        [sys.executable, str(REPO_ROOT / "scripts" / "demo_trace.py")],
        text=True, capture_output=True, cwd=REPO_ROOT, env=env,
    )
    assert p.returncode == 0, p.stderr
    assert "heading rules" in p.stdout and "waypoint rules" in p.stdout
    assert p.stdout.count("Manhattan distance:") == 2
