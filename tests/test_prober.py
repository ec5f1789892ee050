"""Testes da sonda Git (sem rede e sem git de verdade).

`run_tool` é substituído por um gravador que registra os comandos e o
diretório de trabalho, e que pode simular falhas em comandos específicos.
"""

from pathlib import Path

import pytest

from build_sources.core.config import ToolConfig
from build_sources.core.errors import ToolInvocationError
from build_sources.core.resources.prober import GitRemoteProber


class Recorder:
    def __init__(self, fail_on=None, status=128):
        self.fail_on = fail_on
        self.status = status
        self.calls = []

    def __call__(self, cmd, cwd=None, silent=False):
        self.calls.append((list(cmd), Path(cwd), silent))
        assert Path(cwd).is_dir()
        if self.fail_on and cmd[1] == self.fail_on:
            raise ToolInvocationError(cmd[0], cmd, self.status)


def test_listing_success_is_git(monkeypatch):
    rec = Recorder()
    monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)

    assert GitRemoteProber().is_git_remote("https://code.example.org/p") is True

    cmds = [c for c, _, _ in rec.calls]
    assert cmds == [
        ["git", "init"],
        ["git", "remote", "add", "origin", "https://code.example.org/p"],
        ["git", "ls-remote", "origin"],
    ]
    assert all(silent for _, _, silent in rec.calls)


def test_listing_failure_is_not_git(monkeypatch):
    rec = Recorder(fail_on="ls-remote")
    monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)

    assert GitRemoteProber().is_git_remote("https://svn.example.org/p") is False


def test_probe_directory_is_removed_on_every_path(monkeypatch):
    for fail_on in (None, "ls-remote", "init"):
        rec = Recorder(fail_on=fail_on)
        monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)
        try:
            GitRemoteProber().is_git_remote("https://code.example.org/p")
        except ToolInvocationError:
            assert fail_on == "init"
        workdirs = {cwd for _, cwd, _ in rec.calls}
        assert len(workdirs) == 1
        assert not workdirs.pop().exists()


def test_init_failure_is_raised(monkeypatch):
    rec = Recorder(fail_on="init", status=1)
    monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)

    with pytest.raises(ToolInvocationError) as info:
        GitRemoteProber().is_git_remote("https://code.example.org/p")
    assert info.value.status == 1


def test_listing_launch_failure_is_raised(monkeypatch):
    rec = Recorder(fail_on="ls-remote", status=None)
    monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)

    with pytest.raises(ToolInvocationError) as info:
        GitRemoteProber().is_git_remote("https://code.example.org/p")
    assert info.value.launched is False


def test_custom_tools_are_used(monkeypatch):
    rec = Recorder()
    monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)
    tools = ToolConfig(git="/opt/git/bin/git", probe_remote="upstream")

    GitRemoteProber(tools).is_git_remote("https://code.example.org/p")

    assert rec.calls[0][0] == ["/opt/git/bin/git", "init"]
    assert rec.calls[2][0] == ["/opt/git/bin/git", "ls-remote", "upstream"]
    assert rec.calls[0][1].name.startswith(tools.probe_dir_prefix)


def test_default_probe_directory_name_is_separated(monkeypatch):
    rec = Recorder()
    monkeypatch.setattr("build_sources.core.resources.prober.run_tool", rec)

    GitRemoteProber().is_git_remote("https://code.example.org/p")

    assert rec.calls[0][1].name.startswith("build-sources-detect-git-")
