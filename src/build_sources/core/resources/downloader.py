"""
Downloader (explicação para leigos)

Este arquivo baixa um único arquivo da internet (normalmente um tarball com
código-fonte) e grava no disco. A ideia principal é:

- baixar o arquivo em pedaços (stream), para não ocupar muita memória;
- nomear o arquivo pelo último pedaço do caminho da URL
    (ex: `.../6.0.1/llvm-6.0.1.src.tar.xz` -> `llvm-6.0.1.src.tar.xz`);
- garantir que tudo foi gravado no disco (fsync) antes de devolver o caminho;
- calcular um hash (SHA-256) durante o download para registrar no log.

Não há retentativas nem download parcial/retomado: se algo falhar, a exceção
sobe para quem chamou.
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from typing import Union
from urllib.parse import SplitResult, urlsplit

import requests

from build_sources.core.errors import (
    TransferConnectionError,
    TransferWriteError,
    UrlParseError,
)
from build_sources.core.resources.fetcher import Fetcher

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

# Esquemas que sempre têm um host (http:// sozinho não é URL válida)
HOST_SCHEMES = ("http", "https", "git", "ssh", "svn", "svn+ssh", "ftp")


def parse_url(url: str) -> SplitResult:
    """Split `url`, rejecting a missing scheme, a bad host or a bad port."""
    try:
        parts = urlsplit(url)
        host = parts.hostname
        # .port raises ValueError for a non-numeric or out-of-range port
        parts.port
    except ValueError as exc:
        raise UrlParseError(url, str(exc)) from exc
    if not parts.scheme:
        raise UrlParseError(url, "relative URL without a scheme")
    if not host and (parts.netloc or parts.scheme.lower() in HOST_SCHEMES):
        raise UrlParseError(url, "empty host")
    if host and any(c.isspace() for c in host):
        raise UrlParseError(url, "invalid character in host")
    return parts


def terminal_segment(url: str) -> str:
    """Return the last path segment of `url`, verbatim.

    Exemplos:
    - http://releases.llvm.org/6.0.1/llvm-6.0.1.src.tar.xz -> 'llvm-6.0.1.src.tar.xz'
    - http://example.org/ -> UrlParseError (não há nome de arquivo)
    """
    parts = parse_url(url)
    if not parts.netloc and not parts.path.startswith("/"):
        # mailto:, urn: e afins não têm caminho hierárquico
        raise UrlParseError(url, "URL has no path segments")
    name = parts.path.rsplit("/", 1)[-1]
    if not name:
        raise UrlParseError(url, "URL path has no terminal segment")
    return name


class Downloader:
    """Baixa uma URL inteira para um arquivo local.

    A classe recebe opcionalmente um `Fetcher` (que encapsula as requisições
    HTTP). Isso facilita testes: podemos injetar um `Fetcher` falso que
    devolve respostas controladas.
    """

    def __init__(self, fetcher: Fetcher | None = None):
        self.fetcher = fetcher or Fetcher()

    def transfer(self, url: str, destination: Union[str, Path]) -> Path:
        """Fetch `url` into `destination` and return the written file path.

        If `destination` is a directory the file is created inside it, named
        after `terminal_segment(url)`; otherwise `destination` is the file.
        """
        dest = Path(destination)
        out_path = dest / terminal_segment(url) if dest.is_dir() else dest

        logger.info("Download: %s", url)
        try:
            resp = self.fetcher.stream_get(url)
        except requests.RequestException as exc:
            raise TransferConnectionError(url, f"could not fetch {url}: {exc}") from exc

        hasher = hashlib.sha256()
        total = 0
        with resp as r:
            try:
                r.raise_for_status()
            except requests.HTTPError as exc:
                raise TransferConnectionError(
                    url,
                    f"server answered {r.status_code} for {url}",
                    status_code=r.status_code,
                ) from exc

            try:
                fh = open(out_path, "wb")
            except OSError as exc:
                raise TransferWriteError(
                    url, out_path, f"cannot create {out_path}: {exc}"
                ) from exc

            with fh:
                # RequestException herda de OSError: precisa vir primeiro
                try:
                    for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        hasher.update(chunk)
                        total += len(chunk)
                    fh.flush()
                    os.fsync(fh.fileno())
                except requests.RequestException as exc:
                    raise TransferConnectionError(
                        url, f"connection lost while reading {url}: {exc}"
                    ) from exc
                except OSError as exc:
                    raise TransferWriteError(
                        url, out_path, f"cannot write {out_path}: {exc}"
                    ) from exc

        logger.info(
            "Saved %s (size=%d bytes, sha256=%s)", out_path, total, hasher.hexdigest()
        )
        return out_path
