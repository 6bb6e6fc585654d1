"""
serverless-parent — Canonical Error Structures (v1)

Este módulo define o payload canônico de erro registrado no event log do
`ServiceContext` quando a resolução do parent falha.

Erros devem ser:

- explícitos
- serializáveis
- acionáveis

O payload nunca substitui a exceção: ela continua sendo propagada ao
chamador sem modificação.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .config.errors import (
    ConfigError,
    InvalidParentReferenceError,
    ParentDiscoveryError,
    ParentLoadError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do serverless-parent.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao usuário (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

PARENT_REFERENCE_INVALID = "PARENT_REFERENCE_INVALID"
PARENT_NOT_DISCOVERED = "PARENT_NOT_DISCOVERED"
PARENT_LOAD_FAILED = "PARENT_LOAD_FAILED"
CONFIG_ERROR = "CONFIG_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def parent_reference_invalid(
    *,
    reason: str,
    hint: str = "Corrija o bloco custom.parent do serverless.yml do serviço (path: string, maxLevels: inteiro positivo, overwriteServiceConfig: booleano).",
) -> ErrorPayload:
    return ErrorPayload(
        type=PARENT_REFERENCE_INVALID,
        message="Bloco custom.parent inválido",
        details={"reason": reason},
        hint=hint,
    )


def parent_not_discovered(
    *,
    start_dir: Optional[str],
    probed: List[str],
    hint: str = "Declare custom.parent.path ou aumente custom.parent.maxLevels para alcançar o serverless.yml parent.",
) -> ErrorPayload:
    return ErrorPayload(
        type=PARENT_NOT_DISCOVERED,
        message="Não foi possível descobrir o serverless.yml parent",
        details={"start_dir": start_dir, "probed": list(probed)},
        hint=hint,
    )


def parent_load_failed(
    *,
    path: Optional[str],
    exc_type: str,
    exc_message: str,
    hint: str = "Verifique se o arquivo parent existe e contém um mapa YAML/JSON válido.",
) -> ErrorPayload:
    return ErrorPayload(
        type=PARENT_LOAD_FAILED,
        message="Falha ao carregar o documento parent",
        details={"path": path, "exc_type": exc_type, "exc_message": exc_message},
        hint=hint,
    )


def exception_to_error(exc: Exception) -> ErrorPayload:
    """Converte exceções da camada de configuração em ErrorPayload."""
    if isinstance(exc, InvalidParentReferenceError):
        return parent_reference_invalid(reason=str(exc))

    if isinstance(exc, ParentDiscoveryError):
        return parent_not_discovered(start_dir=exc.start_dir, probed=exc.probed)

    if isinstance(exc, ParentLoadError):
        return parent_load_failed(
            path=exc.path,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )

    if isinstance(exc, ConfigError):
        return ErrorPayload(
            type=CONFIG_ERROR,
            message=str(exc),
            details={"exc_type": type(exc).__name__},
        )

    return parent_load_failed(
        path=None,
        exc_type=type(exc).__name__,
        exc_message=str(exc),
    )
