from __future__ import annotations

import io
import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from tunnel_guard.app.cli import EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR, apply_overrides, parse_args, run
from tunnel_guard.main import main
from tunnel_guard.usecases.config_models import AppConfig


def _input(tmp_path: Path, *values: str) -> Path:
    path = tmp_path / "steps.txt"
    path.write_text("\n".join(values) + "\n", encoding="utf-8")
    return path


def test_parse_args_reads_flags() -> None:
    args = parse_args(
        [
            "--input",
            "steps.txt",
            "--config",
            "cfg.yml",
            "--window-length",
            "3",
            "--output",
            "out.txt",
            "--format",
            "json",
            "--index-base",
            "1",
            "--log-level",
            "debug",
        ]
    )
    assert args.input == "steps.txt"
    assert args.config == "cfg.yml"
    assert args.window_length == 3
    assert args.output == "out.txt"
    assert args.format == "json"
    assert args.index_base == 1
    assert args.log_level == "debug"


def test_parse_args_requires_input() -> None:
    with pytest.raises(SystemExit):
        parse_args([])


def test_apply_overrides_wins_over_config() -> None:
    args = SimpleNamespace(window_length=4, output="o.txt", format="json", index_base=1, log_level="error")
    cfg = apply_overrides(AppConfig(), args)
    assert cfg.scan.window_length == 4
    assert cfg.output.file_path == "o.txt"
    assert cfg.output.format == "json"
    assert cfg.output.index_base == 1
    assert cfg.logging.level == "error"


def test_apply_overrides_keeps_config_when_flags_absent() -> None:
    args = SimpleNamespace(window_length=None, output=None, format=None, index_base=None, log_level=None)
    base = AppConfig.model_validate({"scan": {"window_length": 7}, "output": {"file": "x.txt"}})
    cfg = apply_overrides(base, args)
    assert cfg.scan.window_length == 7
    assert cfg.output.file_path == "x.txt"


def test_run_prints_violation_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _input(tmp_path, "5", "4", "7", "9", "14")
    assert run(["--input", str(path), "--window-length", "3"]) == 0
    assert capsys.readouterr().out == "critical number 14 at index 4 (line 5)\n"


def test_run_prints_safe(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _input(tmp_path, "5", "4", "9")
    assert run(["--input", str(path), "--window-length", "2"]) == 0
    assert capsys.readouterr().out == "tunnel is safe (checked 3 steps)\n"


def test_run_writes_json_to_output_file(tmp_path: Path) -> None:
    path = _input(tmp_path, "5", "junk", "4", "7", "9", "14")
    out = tmp_path / "result.json"
    code = run(
        [
            "--input",
            str(path),
            "--window-length",
            "3",
            "--format",
            "json",
            "--index-base",
            "1",
            "--output",
            str(out),
        ]
    )
    assert code == 0
    assert json.loads(out.read_text(encoding="utf-8")) == {"safe": False, "step": 14, "index": 5, "line_no": 6}


def test_run_uses_config_file_and_jsonl_logs(tmp_path: Path) -> None:
    path = _input(tmp_path, "5", "4", "9")
    log_path = tmp_path / "scan.jsonl"
    out = tmp_path / "out.txt"
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(
        "\n".join(
            [
                "scan:",
                "  window_length: 2",
                "output:",
                f"  file: {out}",
                "logging:",
                "  sink: jsonl",
                f"  path: {log_path}",
            ]
        ),
        encoding="utf-8",
    )
    assert run(["--input", str(path), "--config", str(cfg)]) == 0
    assert out.read_text(encoding="utf-8") == "tunnel is safe (checked 3 steps)\n"
    messages = [json.loads(line)["message"] for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert messages == ["scan.started", "scan.safe"]


def test_run_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n2\n5\n"))
    assert run(["--input", "-", "--window-length", "2"]) == 0
    assert capsys.readouterr().out == "critical number 5 at index 3 (line 4)\n"


def test_run_rejects_invalid_window_length(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _input(tmp_path, "1")
    assert run(["--input", str(path), "--window-length", "0"]) == EXIT_CONFIG_ERROR
    assert "invalid configuration" in capsys.readouterr().err


def test_run_rejects_bad_config_file(tmp_path: Path) -> None:
    path = _input(tmp_path, "1")
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("unknown: 1\n", encoding="utf-8")
    assert run(["--input", str(path), "--config", str(cfg)]) == EXIT_CONFIG_ERROR


def test_run_reports_missing_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["--input", str(tmp_path / "missing.txt")]) == EXIT_INPUT_ERROR
    assert "i/o error" in capsys.readouterr().err


def test_main_delegates_to_run(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _input(tmp_path, "5", "4", "18")
    assert main(["--input", str(path), "--window-length", "3"]) == 0
    assert capsys.readouterr().out == "tunnel is safe (checked 3 steps)\n"


def test_run_drops_undecodable_input_lines(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # Invalid UTF-8 bytes make that line unparsable; the scan carries on without it.
    path = tmp_path / "steps.txt"
    path.write_bytes(b"5\n4\n\xff\xfe\n9\n")
    assert run(["--input", str(path), "--window-length", "2"]) == 0
    assert capsys.readouterr().out == "tunnel is safe (checked 3 steps)\n"


def test_run_reports_undecodable_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"5\n\xff\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert run(["--input", "-", "--window-length", "2"]) == EXIT_INPUT_ERROR
    assert "i/o error" in capsys.readouterr().err


def test_run_reports_missing_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _input(tmp_path, "1")
    assert run(["--input", str(path), "--config", str(tmp_path / "nope.yml")]) == EXIT_CONFIG_ERROR
    assert "invalid configuration" in capsys.readouterr().err


def test_run_reports_unwritable_log_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    # A regular file cannot hold the log directory.
    path = _input(tmp_path, "5", "4", "9")
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(
        "\n".join(["logging:", "  sink: jsonl", f"  path: {blocker / 'sub' / 'log.jsonl'}"]),
        encoding="utf-8",
    )
    assert run(["--input", str(path), "--config", str(cfg)]) == EXIT_INPUT_ERROR
    assert "i/o error" in capsys.readouterr().err
