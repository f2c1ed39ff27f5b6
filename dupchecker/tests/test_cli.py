#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the command line entry point.
"""

import json
from unittest.mock import patch

import pytest

from dupchecker.errors import StorageFatalError
from dupchecker.main import create_parser, main
from dupchecker.scanning.pipeline import PipelineResult
from dupchecker.tests.fixtures.sample_images import make_copy, make_pattern_jpeg


def _last_json(out: str) -> dict:
    lines = [line for line in out.splitlines() if line.strip()]
    return json.loads(lines[-1])


class TestParser:

    def test_run_defaults(self):
        args = create_parser().parse_args(["run", "--source", "/photos"])
        assert args.db == "images.db"
        assert args.dest is None
        assert args.extensions is None
        assert not args.keep_corrupt

    def test_repeatable_ext(self):
        args = create_parser().parse_args(["run", "--source", "/p", "--ext", "png", "--ext", "jpg"])
        assert args.extensions == ["png", "jpg"]

    @pytest.mark.parametrize("flag, value", [("--workers", "0"), ("--workers", "-3"),
                                             ("--hash-size", "1"), ("--workers", "many")])
    def test_out_of_range_numbers_are_usage_errors(self, flag, value, capsys):
        with pytest.raises(SystemExit) as excinfo:
            create_parser().parse_args(["run", "--source", "/p", flag, value])
        assert excinfo.value.code == 2
        assert flag in capsys.readouterr().err

    def test_main_rejects_zero_workers(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["--db", str(tmp_path / "images.db"), "run", "--source", str(tmp_path),
                  "--workers", "0"])
        assert excinfo.value.code == 2


class TestMain:

    def test_run_then_stats(self, tmp_path, capsys):
        root = tmp_path / "root"
        a = make_pattern_jpeg(root / "a.jpg", "horizontal")
        make_copy(a, root / "b.jpg")
        db = tmp_path / "images.db"

        code = main(["--json", "--db", str(db), "run", "--source", str(root),
                     "--workers", "1", "--no-progress"])
        assert code == 0
        payload = _last_json(capsys.readouterr().out)
        assert payload["result"] == "success"
        assert payload["data"]["inserted"] == 1
        assert payload["data"]["duplicates"] == 1
        assert payload["data"]["migration"] is None

        code = main(["--json", "--db", str(db), "stats", "--detailed"])
        assert code == 0
        stats = _last_json(capsys.readouterr().out)["data"]
        assert stats["entries"] == 1
        assert stats["present_on_disk"] == 1

    def test_migrate_command(self, tmp_path, capsys):
        root = tmp_path / "root"
        make_pattern_jpeg(root / "a.jpg", "vertical")
        db = tmp_path / "images.db"
        dest = tmp_path / "dest"

        assert main(["--db", str(db), "run", "--source", str(root), "--no-progress"]) == 0
        assert main(["--json", "--db", str(db), "migrate", "--dest", str(dest)]) == 0
        report = _last_json(capsys.readouterr().out)["data"]
        assert report["moved"] == 1
        assert (dest / "a.jpg").exists()

    def test_unavailable_index_exits_nonzero(self, tmp_path, capsys):
        db = tmp_path / "missing" / "images.db"
        code = main(["--json", "--db", str(db), "run", "--source", str(tmp_path)])
        assert code == 1
        payload = _last_json(capsys.readouterr().out)
        assert payload["result"] == "error"

    def test_interrupted_json_run_exits_130(self, tmp_path, capsys):
        db = tmp_path / "images.db"
        with patch("dupchecker.commands.run.PipelineCoordinator.run",
                   return_value=PipelineResult(interrupted=True)):
            code = main(["--json", "--db", str(db), "run", "--source", str(tmp_path),
                         "--no-progress"])
        assert code == 130
        payload = _last_json(capsys.readouterr().out)
        assert payload["result"] == "success"
        assert payload["data"]["interrupted"] is True

    def test_commit_failure_exits_nonzero(self, tmp_path, capsys):
        root = tmp_path / "root"
        make_pattern_jpeg(root / "a.jpg", "checker")
        db = tmp_path / "images.db"
        with patch("dupchecker.database.manager.DedupIndex.commit_batch",
                   side_effect=StorageFatalError("disk full")):
            code = main(["--json", "--db", str(db), "run", "--source", str(root),
                         "--workers", "1", "--no-progress"])
        assert code == 1
        payload = _last_json(capsys.readouterr().out)
        assert payload["result"] == "error"
        assert "disk full" in payload["error"]
