"""Tests for the demo entry point."""

import json

from main import build_parser, resolve_config, run_demo
from quicklog.config import QuicklogConfig


class TestResolveConfig:
    def test_cli_overrides(self, monkeypatch):
        monkeypatch.delenv("QUICKLOG_CAPACITY", raising=False)
        args = build_parser().parse_args(["--capacity", "7", "--timezone", "Europe/Berlin", "--exact-time"])
        cfg = resolve_config(args)
        assert cfg.capacity == 7
        assert cfg.timezone == "Europe/Berlin"
        assert cfg.exact_time is True

    def test_config_file(self, tmp_path):
        path = tmp_path / "ql.yaml"
        path.write_text("quicklog:\n  capacity: 3\n")
        cfg = resolve_config(build_parser().parse_args(["--config", str(path)]))
        assert cfg.capacity == 3


class TestRunDemo:
    def test_text_output(self, capsys):
        run_demo(QuicklogConfig())
        out = capsys.readouterr().out
        assert "== g1" in out
        assert "- [WARN] test [x2]" in out
        assert "- [INFO] hi" in out
        assert "[WARN] disk usage at 91%" in out
        assert "[WARN] retrying job job-42 [x2]" in out

    def test_json_output(self, capsys):
        run_demo(QuicklogConfig(), as_json=True)
        snap = json.loads(capsys.readouterr().out)
        assert set(snap) == {"g1", "g2", "demo.worker"}
        assert len(snap["g1"]) == 3

    def test_disabled_prints_nothing(self, capsys):
        run_demo(QuicklogConfig(enabled=False))
        assert capsys.readouterr().out == ""
