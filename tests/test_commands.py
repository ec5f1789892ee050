import sys
from pathlib import Path

import pytest

from build_sources.core.errors import ToolInvocationError
from build_sources.core.resources.commands import run_tool


def test_zero_exit_returns(tmp_path):
    run_tool([sys.executable, "-c", "pass"], cwd=tmp_path, silent=True)


def test_non_zero_exit_carries_status():
    with pytest.raises(ToolInvocationError) as info:
        run_tool([sys.executable, "-c", "raise SystemExit(3)"], silent=True)
    assert info.value.status == 3
    assert info.value.launched is True
    assert info.value.args_list == [sys.executable, "-c", "raise SystemExit(3)"]
    assert info.value.tool == Path(sys.executable).name


def test_missing_executable_is_launch_failure():
    with pytest.raises(ToolInvocationError) as info:
        run_tool(["definitely-not-a-real-tool-xyz", "--version"])
    assert info.value.status is None
    assert info.value.launched is False
    assert info.value.tool == "definitely-not-a-real-tool-xyz"


def test_missing_working_directory_is_launch_failure(tmp_path):
    with pytest.raises(ToolInvocationError) as info:
        run_tool([sys.executable, "-c", "pass"], cwd=tmp_path / "gone")
    assert info.value.launched is False
