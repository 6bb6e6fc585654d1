# src/serverless_parent/__init__.py
"""
serverless-parent — herança de configuração entre serviços.

Um serviço declara (ou descobre) um `serverless.yml` parent e recebe um
documento efetivo resultante do deep-merge entre parent e child.

Arquitetura em alto nível:
    - core.config  → ParentReference, localização, loader, merge, hashing
    - core.service → ServiceContext, merge_parent_configuration, saída efetiva
    - core.errors  → ErrorPayload e catálogo de tipos de erro

Limites explícitos:
    - Não implementa o ciclo de vida de plugins do host
    - Não resolve variáveis `${...}`
    - Não valida o documento efetivo contra schema
"""
from .core.config import (
    ConfigError,
    ParentDiscoveryError,
    ParentLoadError,
    ParentReference,
    deep_merge,
    load_document,
    locate_parent_config,
    merge_configurations,
)
from .core.service import (
    ServiceContext,
    merge_parent_configuration,
    print_effective_config,
    render_effective_config,
)

__all__ = [
    "ConfigError",
    "ParentDiscoveryError",
    "ParentLoadError",
    "ParentReference",
    "ServiceContext",
    "deep_merge",
    "load_document",
    "locate_parent_config",
    "merge_configurations",
    "merge_parent_configuration",
    "print_effective_config",
    "render_effective_config",
]
