# src/serverless_parent/core/service/effective.py
"""
Saída do `serverless.yml` efetivo para inspeção humana.

Apenas as seções de topo relevantes são exibidas, nesta ordem:
    custom, functions, package, provider, resources, service

Seções ausentes ou vazias são omitidas.

Garantias:
- NÃO altera o documento.
- NÃO resolve variáveis.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, Dict, Mapping

import yaml  # PyYAML

from .context import ServiceContext


EFFECTIVE_SECTIONS = ("custom", "functions", "package", "provider", "resources", "service")
EFFECTIVE_HEADER = "Effective serverless.yml:\n"


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, Sized) and len(value) == 0


def effective_config(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Extrai as seções exibíveis do documento efetivo."""
    return {
        name: document[name]
        for name in EFFECTIVE_SECTIONS
        if name in document and not _is_empty(document[name])
    }


def render_effective_config(document: Mapping[str, Any]) -> str:
    """Serializa as seções exibíveis em YAML, precedidas do cabeçalho."""
    body = yaml.safe_dump(
        effective_config(document),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return EFFECTIVE_HEADER + body


def print_effective_config(ctx: ServiceContext) -> str:
    """
    Renderiza o documento ativo do serviço e registra a saída no event log.

    Returns:
        str: Texto exibido (cabeçalho + YAML).
    """
    text = render_effective_config(ctx.config)
    ctx.log(step_id="parent.effective", level="INFO", message=text)
    return text
