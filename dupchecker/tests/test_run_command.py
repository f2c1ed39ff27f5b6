#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
End-to-end tests for a full dedup run.
"""

import pytest

from dupchecker.commands.run import RunCommand
from dupchecker.config import RunConfig
from dupchecker.database.manager import DedupIndex
from dupchecker.errors import StorageFatalError
from dupchecker.tests.fixtures.sample_images import (
    make_copy, make_pattern_jpeg, make_truncated_jpeg,
)


def run_once(config: RunConfig):
    command = RunCommand(config)
    try:
        return command.execute()
    finally:
        command.close()


class TestRunCommand:

    @pytest.fixture
    def config_for(self, tmp_path):
        def build(root, destination=None, **kwargs):
            return RunConfig(root=root, db_path=tmp_path / "images.db", destination=destination,
                             workers=2, show_progress=False, **kwargs)
        return build

    def test_duplicate_pair_and_ignored_text(self, tmp_path, config_for):
        root = tmp_path / "root"
        a = make_pattern_jpeg(root / "a.jpg", "vertical")
        b = make_copy(a, root / "b.jpg")
        (root / "c.txt").write_text("not an image")
        dest = tmp_path / "dest"

        summary = run_once(config_for(root, dest))

        assert summary.discovered == 2
        assert summary.processed == 2
        assert summary.errors == 0
        assert summary.inserted == 1
        assert summary.duplicates == 1
        assert summary.migration.moved == 1

        with DedupIndex(tmp_path / "images.db") as index:
            assert index.count() == 1

        moved = [p.name for p in dest.iterdir()]
        assert len(moved) == 1 and moved[0] in {"a.jpg", "b.jpg"}
        left_behind = b if moved[0] == "a.jpg" else a
        assert left_behind.exists()
        assert (root / "c.txt").exists()

    def test_truncated_file_is_deleted(self, tmp_path, config_for):
        root = tmp_path / "root"
        corrupt = make_truncated_jpeg(root / "corrupt.jpg")

        summary = run_once(config_for(root))

        assert summary.errors == 1
        assert summary.deleted == 1
        assert summary.inserted == 0
        assert not corrupt.exists()
        with DedupIndex(tmp_path / "images.db") as index:
            assert index.count() == 0

    def test_keep_corrupt(self, tmp_path, config_for):
        root = tmp_path / "root"
        corrupt = make_truncated_jpeg(root / "corrupt.jpg")
        summary = run_once(config_for(root, delete_corrupt=False))
        assert summary.errors == 1
        assert summary.deleted == 0
        assert corrupt.exists()

    def test_second_run_inserts_nothing(self, tmp_path, config_for):
        root = tmp_path / "root"
        for pattern in ("vertical", "horizontal", "checker"):
            make_pattern_jpeg(root / f"{pattern}.jpg", pattern)

        first = run_once(config_for(root))
        second = run_once(config_for(root))

        assert first.inserted == 3
        assert second.inserted == 0
        assert second.duplicates == 3

    def test_hashed_files_survive_next_to_corrupt_ones(self, tmp_path, config_for):
        root = tmp_path / "root"
        good = make_pattern_jpeg(root / "good.jpg", "diagonal")
        dup = make_copy(good, root / "sub" / "dup.jpg")
        make_truncated_jpeg(root / "bad.jpg")

        summary = run_once(config_for(root))

        assert summary.processed == summary.discovered == 3
        assert summary.errors == 1
        assert good.exists() and dup.exists()

    def test_survivors_from_several_images(self, tmp_path, config_for):
        root = tmp_path / "root"
        for pattern in ("vertical", "horizontal"):
            make_pattern_jpeg(root / "x" / f"{pattern}.jpg", pattern)
        make_copy(root / "x" / "vertical.jpg", root / "y" / "vertical.jpg")
        dest = tmp_path / "dest"

        summary = run_once(config_for(root, dest))

        assert summary.migration.moved == 2
        assert sorted(p.name for p in dest.iterdir()) == ["horizontal.jpg", "vertical.jpg"]

    def test_unavailable_index_fails_before_scanning(self, tmp_path):
        root = tmp_path / "root"
        img = make_truncated_jpeg(root / "corrupt.jpg")
        config = RunConfig(root=root, db_path=tmp_path / "missing" / "images.db",
                           show_progress=False)
        with pytest.raises(StorageFatalError):
            RunCommand(config)
        assert img.exists()

    def test_invalid_worker_count(self, tmp_path):
        with pytest.raises(ValueError):
            RunConfig(root=tmp_path, workers=0)
