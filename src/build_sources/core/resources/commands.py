"""Run external tools (git, svn, tar) and turn failures into exceptions."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from build_sources.core.errors import ToolInvocationError

logger = logging.getLogger(__name__)


def run_tool(
    cmd: Sequence[str], cwd: Optional[Path] = None, silent: bool = False
) -> None:
    """Run `cmd` to completion, raising `ToolInvocationError` unless it exits 0.

    With `silent=True` stdout and stderr are discarded; otherwise the child
    inherits the caller's streams so clone/checkout progress stays visible.
    """
    args = [str(a) for a in cmd]
    tool = Path(args[0]).name
    logger.debug("Running %s (cwd=%s)", " ".join(args), cwd or ".")
    stream = subprocess.DEVNULL if silent else None
    try:
        proc = subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            stdout=stream,
            stderr=stream,
            check=False,
        )
    except OSError as exc:
        raise ToolInvocationError(tool, args, None, detail=str(exc)) from exc

    if proc.returncode != 0:
        raise ToolInvocationError(tool, args, proc.returncode)
