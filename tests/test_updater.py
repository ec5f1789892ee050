import pytest

from build_sources.core.errors import ToolInvocationError
from build_sources.core.resources.models import (
    Archive,
    GitRepository,
    SubversionRepository,
)
from build_sources.core.resources.updater import update_resource


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_run_tool(cmd, cwd=None, silent=False):
        recorded.append((list(cmd), cwd))

    monkeypatch.setattr("build_sources.core.resources.updater.run_tool", fake_run_tool)
    return recorded


def test_archive_update_is_noop_for_any_destination(calls, tmp_path):
    archive = Archive(url="https://example.org/src.tar.gz")
    file_dest = tmp_path / "file"
    file_dest.write_text("x")

    update_resource(archive, tmp_path / "missing")
    update_resource(archive, file_dest)
    update_resource(archive, tmp_path)

    assert calls == []


def test_git_update_pulls_in_place(calls, tmp_path):
    update_resource(GitRepository(url="https://github.com/o/r"), tmp_path)
    assert calls == [(["git", "pull"], tmp_path)]


def test_svn_update_in_place(calls, tmp_path):
    update_resource(SubversionRepository(url="http://llvm.org/svn/x/trunk"), str(tmp_path))
    assert calls == [(["svn", "update"], tmp_path)]


def test_update_failure_is_returned_as_is(monkeypatch, tmp_path):
    err = ToolInvocationError("git", ["git", "pull"], 1)

    def failing(cmd, cwd=None, silent=False):
        raise err

    monkeypatch.setattr("build_sources.core.resources.updater.run_tool", failing)
    with pytest.raises(ToolInvocationError) as info:
        update_resource(GitRepository(url="https://github.com/o/r"), tmp_path)
    assert info.value is err
