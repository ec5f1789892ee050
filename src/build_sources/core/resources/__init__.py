"""Resource identification and acquisition primitives.

This package contains small, well-tested building blocks: Fetcher,
Downloader, the URL classifier, the Git prober, Acquirer and the updater,
plus Prefect task wrappers.
"""

from .acquirer import Acquirer
from .detector import classify
from .downloader import Downloader, terminal_segment
from .fetcher import Fetcher
from .models import Archive, GitRepository, Resource, SubversionRepository
from .prefect_tasks import acquire_task, classify_task, update_task
from .prober import GitRemoteProber
from .updater import update_resource

__all__ = [
    "Archive",
    "GitRepository",
    "SubversionRepository",
    "Resource",
    "classify",
    "GitRemoteProber",
    "Acquirer",
    "update_resource",
    "Fetcher",
    "Downloader",
    "terminal_segment",
    "classify_task",
    "acquire_task",
    "update_task",
]
