# src/serverless_parent/core/config/__init__.py

"""
Camada de configuração do serverless-parent.

Este pacote contém as estruturas e utilitários responsáveis por localizar,
carregar e mesclar o `serverless.yml` parent com o documento do serviço.

Responsabilidades do pacote:
    - Decodificação de `custom.parent` (ParentReference)
    - Localização do parent (caminho explícito ou descoberta ascendente)
    - Carregamento de documentos YAML/JSON
    - Deep-merge com direção de override configurável
    - Hash canônico do documento efetivo

Princípios fundamentais:
    - Nenhuma heurística implícita durante merge
    - A mesma entrada sempre produz o mesmo documento efetivo
    - Falhas são tipadas e fatais

Limites explícitos:
    - Não valida semântica do documento
    - Não resolve variáveis ou referências cruzadas
    - Não busca parents remotos
"""

from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    InvalidParentReferenceError,
    ParentDiscoveryError,
    ParentLoadError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_document
from .locator import locate_parent_config
from .merge import deep_merge, merge_configurations
from .reference import (
    CONFIG_FILENAME,
    DEFAULT_MAX_LEVELS,
    HARD_MAX_LEVELS,
    ParentReference,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_MAX_LEVELS",
    "HARD_MAX_LEVELS",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigTypeConflictError",
    "InvalidConfigRootTypeError",
    "InvalidParentReferenceError",
    "ParentDiscoveryError",
    "ParentLoadError",
    "ParentReference",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_document",
    "locate_parent_config",
    "merge_configurations",
]
