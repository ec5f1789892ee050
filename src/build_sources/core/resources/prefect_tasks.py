"""Tarefas Prefect que usam os componentes de aquisição.

Este arquivo adapta as funções "baixas" (classificador, aquisição,
atualização) para o modelo de execução do Prefect, adicionando logs.

Diferente das tarefas de download HTTP comuns, aqui não há retries: uma falha
de clone/checkout/download deve aparecer imediatamente para quem chamou, e o
destino parcialmente preenchido não deve ser reutilizado numa nova tentativa.
"""

from __future__ import annotations

from prefect import get_run_logger, task

from build_sources.core.config import ToolConfig
from build_sources.core.resources.acquirer import Acquirer
from build_sources.core.resources.detector import classify
from build_sources.core.resources.models import Resource
from build_sources.core.resources.prober import GitRemoteProber
from build_sources.core.resources.updater import update_resource


@task(name="classify_url", retries=0)
def classify_task(url: str, tools: ToolConfig | None = None) -> Resource:
    logger = get_run_logger()
    logger.info("Classifying URL: %s", url)
    resource = classify(url, prober=GitRemoteProber(tools))
    logger.info("Classified %s as %s", url, resource.kind)
    return resource


@task(name="acquire_resource", retries=0)
def acquire_task(
    resource: Resource, destination: str, tools: ToolConfig | None = None
) -> str:
    logger = get_run_logger()
    logger.info("Acquiring %s (%s) into %s", resource.url, resource.kind, destination)
    Acquirer(tools).acquire(resource, destination)
    logger.info("Acquired %s", destination)
    return destination


@task(name="update_resource", retries=0)
def update_task(
    resource: Resource, destination: str, tools: ToolConfig | None = None
) -> str:
    logger = get_run_logger()
    logger.info("Updating %s (%s) in %s", resource.url, resource.kind, destination)
    update_resource(resource, destination, tools)
    logger.info("Updated %s", destination)
    return destination
