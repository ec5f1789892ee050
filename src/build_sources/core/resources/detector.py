"""Detect resource kind from a URL.

Heuristics, in order: file extension of the last path segment, well-known Git
hosts, llvm.org path prefixes and finally a Git probe over the network.
"""

from __future__ import annotations

import logging
from typing import Optional

from build_sources.core.errors import UrlParseError
from build_sources.core.interfaces import RemoteProber
from build_sources.core.resources.downloader import parse_url, terminal_segment
from build_sources.core.resources.models import (
    Archive,
    GitRepository,
    Resource,
    SubversionRepository,
)
from build_sources.core.resources.prober import GitRemoteProber

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSIONS = (".tar.gz", ".tar.xz", ".tar.bz2", ".tar.Z", ".tgz", ".taz")

GIT_HOSTING_SERVICES = ("github.com", "gitlab.com")


def _kind_from_filename(url: str) -> Optional[Resource]:
    try:
        filename = terminal_segment(url)
    except UrlParseError:
        return None

    for ext in ARCHIVE_EXTENSIONS:
        if filename.endswith(ext):
            logger.info("Find archive extension '%s' at the end of URL", ext)
            return Archive(url=url)

    if filename.endswith("trunk"):
        logger.info("Find 'trunk' at the end of URL")
        return SubversionRepository(url=url)

    if filename.endswith(".git"):
        logger.info("Find '.git' extension")
        return GitRepository(url=url)

    return None


def _kind_from_host(url: str) -> Optional[Resource]:
    parts = parse_url(url)
    host = parts.hostname

    if host in GIT_HOSTING_SERVICES:
        logger.info("URL is a cloud git service: %s", host)
        return GitRepository(url=url)

    if host == "llvm.org":
        if parts.path.startswith("/svn"):
            logger.info("URL is LLVM SVN repository")
            return SubversionRepository(url=url)
        if parts.path.startswith("/git"):
            logger.info("URL is LLVM Git repository")
            return GitRepository(url=url)

    return None


def classify(url: str, prober: RemoteProber | None = None) -> Resource:
    """Classify `url` into an `Archive`, `GitRepository` or `SubversionRepository`.

    The prober is only consulted when no static rule matched. A refused Git
    listing is read as a Subversion server, which also catches unreachable or
    private Git remotes.
    """
    resource = _kind_from_filename(url)
    if resource is not None:
        return resource

    resource = _kind_from_host(url)
    if resource is not None:
        return resource

    if prober is None:
        prober = GitRemoteProber()

    if prober.is_git_remote(url):
        return GitRepository(url=url)
    logger.info("Git access failed. Regarded as a SVN repository.")
    return SubversionRepository(url=url)
