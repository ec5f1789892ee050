"""HTTP fetcher backing archive downloads.

Provides a small `Fetcher` object exposing `stream_get`. No retry
policy is mounted and no timeout is applied by default: a stalled transfer
blocks until the caller decides otherwise.
"""

from __future__ import annotations

from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from build_sources.core.config import DEFAULT_USER_AGENT


class Fetcher:
    """Small HTTP client shared by the downloader.

    Usage:
        f = Fetcher()
        resp = f.stream_get(url)
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.timeout = timeout
        self.session = requests.Session()
        # max_retries=0: uma falha de conexão sobe direto para quem chamou
        adapter = HTTPAdapter(max_retries=0)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.user_agent = user_agent

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": self.user_agent}
        if headers:
            base.update(headers)
        return base

    def stream_get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        # Streamed GET for downloading large archives
        return self.session.get(
            url,
            headers=self._headers(headers),
            timeout=self.timeout,
            stream=True,
            **kwargs,
        )
