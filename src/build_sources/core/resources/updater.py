from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from build_sources.core.config import ToolConfig
from build_sources.core.resources.commands import run_tool
from build_sources.core.resources.models import (
    Archive,
    GitRepository,
    Resource,
    SubversionRepository,
)

logger = logging.getLogger(__name__)


def update_resource(
    resource: Resource,
    existing_path: Union[str, Path],
    tools: ToolConfig | None = None,
) -> None:
    """Refresh an already fetched resource in place.

    Archives have nothing to refresh; fetching them again is the only way.
    """
    tools = tools or ToolConfig()
    path = Path(existing_path)

    if isinstance(resource, SubversionRepository):
        logger.info("SVN update %s", path)
        run_tool([tools.svn, "update"], cwd=path)
    elif isinstance(resource, GitRepository):
        logger.info("Git pull %s", path)
        run_tool([tools.git, "pull"], cwd=path)
    elif isinstance(resource, Archive):
        logger.debug("Archive %s has no in-place update", resource.url)
    else:
        raise TypeError(f"unsupported resource: {resource!r}")
