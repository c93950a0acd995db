"""Tests for workflows/touch.py -- backdating files."""

import os
from datetime import datetime

from complex_renamer.config import RunConfig
from complex_renamer.models import Workflow
from complex_renamer.workflows.touch import run


def _make_config(source, **kwargs):
    return RunConfig(_env_file=None, source=source, workflow=Workflow.TOUCH, **kwargs)


class TestTouch:
    def test_all_files_share_one_timestamp(self, tmp_path):
        for name in ["a.jpg", "b.jpg", "c.jpg"]:
            (tmp_path / name).write_text(name)
        now = datetime(2026, 10, 16, 9, 0, 0)

        result = run(_make_config(tmp_path), now=now)

        expected = datetime(2025, 10, 16, 9, 0, 0).timestamp()
        assert result.completed == 3
        for name in ["a.jpg", "b.jpg", "c.jpg"]:
            st = os.stat(tmp_path / name)
            assert st.st_mtime == expected
            assert st.st_atime == expected

    def test_dry_run_keeps_mtime(self, tmp_path):
        f = tmp_path / "a.jpg"
        f.write_text("x")
        before = os.stat(f).st_mtime
        run(_make_config(tmp_path, dry_run=True))
        assert os.stat(f).st_mtime == before

    def test_recurse(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "deep.jpg").write_text("x")
        now = datetime(2026, 1, 1)
        run(_make_config(tmp_path), now=now)
        assert os.stat(tmp_path / "sub" / "deep.jpg").st_mtime != datetime(2025, 1, 1).timestamp()
        run(_make_config(tmp_path, recurse=True), now=now)
        assert os.stat(tmp_path / "sub" / "deep.jpg").st_mtime == datetime(2025, 1, 1).timestamp()
