# src/serverless_parent/core/config/merge.py
"""
Deep-merge canônico entre documentos de serviço parent e child.

Política de merge:
    - dict + dict → merge recursivo por chave
    - qualquer outro caso → o valor do lado vencedor substitui
      integralmente o do lado perdedor (listas não são mescladas
      elemento a elemento)
    - chaves presentes em apenas um lado são preservadas

Direção do override:
    - `overwrite_service_config=True` (padrão): o parent vence conflitos
    - `overwrite_service_config=False`: o child vence conflitos

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - A direção é decidida a partir do child original (pré-merge)

Limites explícitos:
    - Não carrega arquivos
    - Não valida semântica do documento
    - Não resolve variáveis nem referências cruzadas
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários.

    Produz uma nova estrutura sem mutar nenhum dos inputs. Quando ambos
    os lados possuem um dicionário na mesma chave, o merge é recursivo;
    nos demais casos o valor de `override` substitui o de `base`.

    Args:
        base (Dict[str, Any]): Documento base.
        override (Dict[str, Any]): Documento cujos valores vencem conflitos.

    Returns:
        Dict[str, Any]: Novo documento resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se algum dos operandos raiz não for dict.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        base_value = result.get(key)

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # lista, escalar ou troca de tipo -> sobrescrita total
        result[key] = deepcopy(override_value)

    return result


def merge_configurations(
    child: Dict[str, Any],
    parent: Dict[str, Any],
    overwrite_service_config: bool = True,
) -> Dict[str, Any]:
    """
    Combina o documento parent com o documento child do serviço.

    A resolução acontece em duas passadas sobre os documentos originais:
        1. parent sobre o child (o parent vence todos os conflitos)
        2. se `overwrite_service_config` for False, o child original é
           aplicado novamente sobre o candidato (o child vence)

    A segunda passada usa sempre o child recebido, nunca o candidato da
    primeira, caso contrário o parent venceria sempre.

    Invariantes:
        - `merge_configurations(a, a) == a`
        - chaves disjuntas resultam na união dos dois documentos
        - `child` e `parent` não são mutados

    Args:
        child (Dict[str, Any]): Documento do serviço (pré-merge).
        parent (Dict[str, Any]): Documento parent carregado do disco.
        overwrite_service_config (bool): Direção do override.

    Returns:
        Dict[str, Any]: Documento efetivo.
    """

    candidate = deep_merge(child, parent)

    if not overwrite_service_config:
        candidate = deep_merge(candidate, child)

    return candidate
