from __future__ import annotations

import pytest
import typer

from cli import _execute


def _tree(root):
    for name in ("lessons", "guides", "resources"):
        (root / name).mkdir()
    return root


def test_execute_reports_missing_directory(tmp_path, capsys):
    with pytest.raises(typer.Exit) as excinfo:
        _execute(tmp_path, color=False, detailed_log=False)

    assert excinfo.value.exit_code == 1
    captured = capsys.readouterr()
    assert "No such file or directory" in captured.out
    assert "Learning Path" not in captured.out


def test_execute_succeeds_with_empty_tree(tmp_path, capsys):
    _tree(tmp_path)

    with pytest.raises(typer.Exit) as excinfo:
        _execute(tmp_path, color=False, detailed_log=False)

    assert excinfo.value.exit_code == 0
    captured = capsys.readouterr()
    assert "Total Files: 2" in captured.out
    assert "Estimated Learning Time: 0 hours" in captured.out


def test_execute_lets_write_errors_propagate(tmp_path, monkeypatch):
    _tree(tmp_path)

    def closed_pipe(self, lines):
        raise BrokenPipeError(32, "Broken pipe")

    monkeypatch.setattr("explorer.tui.ReportWriter.write", closed_pipe)

    with pytest.raises(BrokenPipeError):
        _execute(tmp_path, color=False, detailed_log=False)
