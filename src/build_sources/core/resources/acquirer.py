"""First fetch of a classified resource into a local directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from build_sources.core.config import ToolConfig
from build_sources.core.errors import FilesystemError
from build_sources.core.resources.commands import run_tool
from build_sources.core.resources.downloader import Downloader
from build_sources.core.resources.fetcher import Fetcher
from build_sources.core.resources.models import (
    Archive,
    GitRepository,
    Resource,
    SubversionRepository,
)

logger = logging.getLogger(__name__)


def prepare_destination(dest: Path) -> None:
    """Create `dest` (with parents) if missing and make sure it is a directory."""
    if not dest.exists():
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(dest, f"cannot create {dest}: {exc}") from exc
    if not dest.is_dir():
        raise FilesystemError(
            dest, f"Download destination must be a directory: {dest}"
        )


class Acquirer:
    """Fetch a resource for the first time.

    A partially populated destination left by a failed call is not cleaned
    up; retry against a fresh directory.
    """

    def __init__(
        self, tools: ToolConfig | None = None, downloader: Downloader | None = None
    ):
        self.tools = tools or ToolConfig()
        self.downloader = downloader or Downloader(
            Fetcher(user_agent=self.tools.user_agent)
        )

    def acquire(self, resource: Resource, destination: Union[str, Path]) -> None:
        dest = Path(destination)
        prepare_destination(dest)

        if isinstance(resource, SubversionRepository):
            logger.info("SVN checkout %s", resource.url)
            run_tool(
                [self.tools.svn, "checkout", "-r", "HEAD", resource.url, str(dest)]
            )
        elif isinstance(resource, GitRepository):
            logger.info("Git clone %s", resource.url)
            cmd = [self.tools.git, "clone", "--depth", "1"]
            if resource.branch:
                cmd += ["-b", resource.branch]
            cmd += [resource.url, str(dest)]
            run_tool(cmd)
        elif isinstance(resource, Archive):
            path = self.downloader.transfer(resource.url, dest)
            logger.info("Extract %s into %s", path.name, dest)
            run_tool([self.tools.tar, "xf", path.name], cwd=dest)
        else:
            raise TypeError(f"unsupported resource: {resource!r}")
