# src/serverless_parent/core/config/reference.py
"""
Referência ao parent declarada no documento child.

O documento de serviço pode declarar, em `custom.parent`, como o parent
deve ser encontrado e mesclado:

    custom:
      parent:
        path: ../shared              # arquivo ou diretório (opcional)
        maxLevels: 3                 # limite da busca ascendente
        overwriteServiceConfig: true # o parent vence conflitos

Este módulo decodifica esse bloco uma única vez em um `ParentReference`
imutável, com defaults explícitos.

Invariantes:
    - A decodificação acontece sobre o child original, antes de qualquer
      merge (o merge pode sobrescrever o próprio flag de direção)
    - Tipos inválidos são erro explícito, sem coerção
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import InvalidParentReferenceError


CONFIG_FILENAME = "serverless.yml"
DEFAULT_MAX_LEVELS = 3
HARD_MAX_LEVELS = 10
PARENT_REFERENCE_KEYS: Tuple[str, ...] = ("custom", "parent")


@dataclass(frozen=True)
class ParentReference:
    """
    Opções de resolução do parent, já decodificadas.

    Campos:
    - path: localização explícita do parent (arquivo ou diretório)
    - max_levels: limite de níveis na descoberta automática
    - overwrite_service_config: True se o parent vence conflitos
    """

    path: Optional[str] = None
    max_levels: int = DEFAULT_MAX_LEVELS
    overwrite_service_config: bool = True

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "ParentReference":
        """
        Lê `custom.parent` do documento child.

        Blocos ausentes (ou `null`) resultam nos defaults.

        Raises:
            InvalidParentReferenceError: Se o bloco ou algum campo
                tiver tipo inválido.
        """
        block = _parent_block(document)
        if block is None:
            return cls()

        return cls(
            path=_decode_path(block.get("path")),
            max_levels=_decode_max_levels(block.get("maxLevels")),
            overwrite_service_config=_decode_overwrite(
                block.get("overwriteServiceConfig")
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "maxLevels": self.max_levels,
            "overwriteServiceConfig": self.overwrite_service_config,
        }


def _parent_block(document: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    node: Any = document
    walked = []
    for key in PARENT_REFERENCE_KEYS:
        walked.append(key)
        if node is None:
            return None
        if not isinstance(node, Mapping):
            raise InvalidParentReferenceError(
                f"'{'.'.join(walked[:-1]) or '<root>'}' deve ser um mapa, "
                f"recebido: {type(node).__name__}"
            )
        node = node.get(key)

    if node is None:
        return None
    if not isinstance(node, Mapping):
        raise InvalidParentReferenceError(
            f"'{'.'.join(PARENT_REFERENCE_KEYS)}' deve ser um mapa, "
            f"recebido: {type(node).__name__}"
        )
    return node


def _decode_path(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise InvalidParentReferenceError(
            f"custom.parent.path deve ser string não vazia, recebido: {value!r}"
        )
    return value


def _decode_max_levels(value: Any) -> int:
    if value is None:
        return DEFAULT_MAX_LEVELS
    # bool é subclasse de int
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidParentReferenceError(
            f"custom.parent.maxLevels deve ser inteiro positivo, recebido: {value!r}"
        )
    return value


def _decode_overwrite(value: Any) -> bool:
    if value is None:
        return True
    if not isinstance(value, bool):
        raise InvalidParentReferenceError(
            "custom.parent.overwriteServiceConfig deve ser booleano, "
            f"recebido: {value!r}"
        )
    return value
