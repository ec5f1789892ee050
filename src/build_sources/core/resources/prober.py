"""Git remote-listing probe used when a URL says nothing about its kind.

    git init
    git remote add origin <url>
    git ls-remote        # fails for a Subversion server

Some Git hosts also speak the Subversion protocol, but Subversion servers do
not answer `ls-remote`, so only the Git side is probed.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from build_sources.core.config import ToolConfig
from build_sources.core.errors import ToolInvocationError
from build_sources.core.interfaces import RemoteProber
from build_sources.core.resources.commands import run_tool

logger = logging.getLogger(__name__)


class GitRemoteProber(RemoteProber):
    """Probe a URL with a throwaway Git repository."""

    def __init__(self, tools: ToolConfig | None = None):
        self.tools = tools or ToolConfig()

    def is_git_remote(self, url: str) -> bool:
        git = self.tools.git
        logger.info("Try access with git to %s", url)
        # TemporaryDirectory apaga o diretório em qualquer saída do bloco
        with tempfile.TemporaryDirectory(prefix=self.tools.probe_dir_prefix) as tmp:
            workdir = Path(tmp)
            run_tool([git, "init"], cwd=workdir, silent=True)
            run_tool(
                [git, "remote", "add", self.tools.probe_remote, url],
                cwd=workdir,
                silent=True,
            )
            try:
                run_tool(
                    [git, "ls-remote", self.tools.probe_remote],
                    cwd=workdir,
                    silent=True,
                )
            except ToolInvocationError as exc:
                if not exc.launched:
                    raise
                logger.info("Git access failed (status=%s)", exc.status)
                return False
        logger.info("Git access succeeds")
        return True
