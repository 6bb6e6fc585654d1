# src/serverless_parent/core/config/locator.py
"""
Localização do `serverless.yml` parent no filesystem.

Duas estratégias, nesta ordem de precedência:

1. Caminho explícito (`custom.parent.path`):
    - diretório → `<path>/serverless.yml`
    - arquivo .yml/.yaml/.json → usado como está
    - nenhuma verificação de existência é feita aqui; a falha, se houver,
      vem do loader

2. Descoberta automática ascendente:
    - começa no diretório pai do diretório de serviço (canônico)
    - sobe um nível por vez até encontrar `serverless.yml`
    - para no home do usuário, em `maxLevels` níveis, no teto rígido de
      10 níveis ou na raiz do filesystem, o que vier primeiro

Invariantes:
    - `maxLevels = N` ⇒ no máximo N diretórios verificados
    - `maxLevels = 1` ainda verifica o diretório pai imediato
    - O home é verificado, mas nunca ultrapassado
    - Symlinks são resolvidos antes da comparação com o home

Limites explícitos:
    - Somente leitura do filesystem
    - Não carrega nem interpreta o documento
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from .errors import ParentDiscoveryError
from .loader import JSON_SUFFIXES, YAML_SUFFIXES
from .reference import CONFIG_FILENAME, HARD_MAX_LEVELS, ParentReference


PathLike = Union[str, Path]


def locate_parent_config(
    start_dir: PathLike,
    reference: ParentReference,
    *,
    home_dir: Optional[PathLike] = None,
) -> Path:
    """
    Determina o caminho do documento parent.

    Args:
        start_dir: Diretório do serviço child.
        reference: Opções decodificadas de `custom.parent`.
        home_dir: Diretório home do usuário (default: `Path.home()`).

    Returns:
        Path: Caminho do documento parent.

    Raises:
        ParentDiscoveryError: Se a descoberta automática não encontrar
            nenhum `serverless.yml` dentro dos limites.
    """
    if reference.path is not None:
        return explicit_parent_path(start_dir, reference.path)

    return discover_parent_config(
        start_dir,
        max_levels=reference.max_levels,
        home_dir=home_dir,
    )


def explicit_parent_path(start_dir: PathLike, path: str) -> Path:
    """Resolve `custom.parent.path` relativo ao diretório do serviço."""
    candidate = Path(start_dir) / Path(path).expanduser()

    if candidate.suffix.lower() not in YAML_SUFFIXES | JSON_SUFFIXES:
        candidate = candidate / CONFIG_FILENAME

    return candidate


def discover_parent_config(
    start_dir: PathLike,
    *,
    max_levels: int,
    home_dir: Optional[PathLike] = None,
) -> Path:
    """
    Busca `serverless.yml` nos diretórios ancestrais de `start_dir`.

    O limite é contado em segmentos de diretório, nunca pelo tamanho do
    caminho relativo acumulado.
    """
    start = Path(start_dir).resolve()
    home = Path(home_dir if home_dir is not None else Path.home()).resolve()
    limit = min(max_levels, HARD_MAX_LEVELS)

    probed: List[str] = []
    candidate = start.parent
    level = 1

    while True:
        probe = candidate / CONFIG_FILENAME
        probed.append(str(probe))
        if probe.is_file():
            return probe

        if candidate.resolve() == home:
            break
        if level >= limit:
            break
        if candidate.parent == candidate:
            break

        candidate = candidate.parent
        level += 1

    raise ParentDiscoveryError(
        f"Não foi possível descobrir o {CONFIG_FILENAME} parent "
        f"(a partir de {start}, {len(probed)} nível(is) verificado(s))",
        start_dir=str(start),
        probed=probed,
    )
