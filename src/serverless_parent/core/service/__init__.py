# src/serverless_parent/core/service/__init__.py
"""
Camada de serviço do serverless-parent.

Conecta a camada de configuração ao documento de um serviço concreto:

    - ServiceContext            → documento ativo + log estruturado
    - merge_parent_configuration → localizar, carregar e mesclar o parent
    - print_effective_config     → exibir o serverless.yml efetivo

Limites explícitos:
    - Não implementa o ciclo de vida de plugins do host
    - Não resolve variáveis (ver `on_config_changed`)
"""

from .context import ServiceContext
from .effective import (
    EFFECTIVE_SECTIONS,
    effective_config,
    print_effective_config,
    render_effective_config,
)
from .parent import merge_parent_configuration

__all__ = [
    "EFFECTIVE_SECTIONS",
    "ServiceContext",
    "effective_config",
    "merge_parent_configuration",
    "print_effective_config",
    "render_effective_config",
]
