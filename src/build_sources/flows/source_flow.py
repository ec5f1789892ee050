"""
Fluxo de aquisição de código-fonte (explicado para leigos)

Este arquivo define um "flow" do Prefect que recebe uma URL qualquer (um
tarball, um repositório Git ou um repositório Subversion) e um diretório
local, e deixa nesse diretório a versão mais recente do código.

Visão geral simplificada do que o fluxo faz:

1. Valida a configuração do job (nome, URL de origem, diretório de destino).
2. Descobre que tipo de recurso a URL representa (classificação).
3. Se um branch foi pedido e o recurso é Git, usa esse branch.
4. Decide entre buscar pela primeira vez (aquisição) ou atualizar uma cópia
    que já existe no destino.

O fluxo não lê nem grava nenhum arquivo de registro: lembrar qual URL foi
parar em qual diretório é responsabilidade de quem chama.
"""

from __future__ import annotations

from pathlib import Path

from prefect import flow, get_run_logger

from build_sources.core.config import SourceJobConfig
from build_sources.core.resources.models import GitRepository
from build_sources.core.resources.prefect_tasks import (
    acquire_task,
    classify_task,
    update_task,
)


def has_existing_checkout(destination: str) -> bool:
    """True when `destination` is a directory that already has content."""
    path = Path(destination)
    return path.is_dir() and any(path.iterdir())


@flow(name="Fetch Source", log_prints=True)
def fetch_source_flow(config_dict: dict) -> dict:
    """Classify `source_url` then acquire or update it under `destination_path`.

    config_dict: must conform to `SourceJobConfig`.
    """
    logger = get_run_logger()
    try:
        config = SourceJobConfig(**config_dict)
        logger.info("Config valid for job: %s", config.job_name)
    except Exception as e:
        logger.error("Invalid config: %s", e)
        raise

    resource = classify_task(config.source_url, config.tools)

    if config.branch:
        if isinstance(resource, GitRepository):
            resource = resource.with_branch(config.branch)
        else:
            logger.warning(
                "Branch %s ignored: %s is not a Git repository",
                config.branch,
                config.source_url,
            )

    action = config.mode
    if action == "auto":
        action = (
            "update" if has_existing_checkout(config.destination_path) else "acquire"
        )

    try:
        if action == "update":
            update_task(resource, config.destination_path, config.tools)
        else:
            acquire_task(resource, config.destination_path, config.tools)
    except Exception as exc:
        logger.error("%s of %s failed: %s", action, config.source_url, exc)
        raise

    logger.info(
        "Job %s completed: %s %s into %s",
        config.job_name,
        action,
        resource.kind,
        config.destination_path,
    )
    return {
        "job": config.job_name,
        "url": config.source_url,
        "kind": resource.kind,
        "action": action,
        "destination": config.destination_path,
    }


if __name__ == "__main__":
    payload = {
        "job_name": "llvm_6_0_1",
        "source_url": "http://releases.llvm.org/6.0.1/llvm-6.0.1.src.tar.xz",
        "destination_path": "data/llvm-6.0.1",
    }
    fetch_source_flow(payload)
