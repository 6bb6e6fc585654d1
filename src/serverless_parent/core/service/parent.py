# src/serverless_parent/core/service/parent.py
"""
Resolução do parent de um serviço: localizar → carregar → mesclar.

Fluxo:
    1. `ParentReference` é decodificado do documento child original
    2. O caminho do parent é localizado (explícito ou descoberta)
    3. O loader lê o documento parent
    4. `merge_configurations` produz o documento efetivo
    5. O documento ativo do contexto é substituído in-place
    6. `on_config_changed` é chamado, se fornecido

Pós-condição:
    Quem resolve variáveis `${...}` no host precisa reprocessar o
    documento após o merge. Este módulo apenas chama o callback
    fornecido pelo chamador; ele não conhece o mecanismo de variáveis.

Falhas:
    - Qualquer exceção é registrada no event log como ErrorPayload e
      propagada sem modificação
    - O documento do serviço permanece intocado em caso de falha
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from serverless_parent.core.config.hashing import compute_config_hash
from serverless_parent.core.config.loader import load_document
from serverless_parent.core.config.locator import locate_parent_config
from serverless_parent.core.config.merge import merge_configurations
from serverless_parent.core.config.reference import ParentReference
from serverless_parent.core.errors import exception_to_error

from .context import ServiceContext


Loader = Callable[[Path], Dict[str, Any]]
ConfigChangedHook = Callable[[Dict[str, Any]], Any]


def merge_parent_configuration(
    ctx: ServiceContext,
    *,
    loader: Loader = load_document,
    home_dir: Optional[Union[str, Path]] = None,
    on_config_changed: Optional[ConfigChangedHook] = None,
) -> Dict[str, Any]:
    """
    Mescla o `serverless.yml` parent no documento ativo do serviço.

    Args:
        ctx: Contexto do serviço (o documento em `ctx.config` é o child).
        loader: Leitor de documentos (default: `load_document`).
        home_dir: Home do usuário usado como limite da descoberta.
        on_config_changed: Callback chamado com o documento efetivo após
            a substituição (ex.: reprocessar variáveis no host).

    Returns:
        Dict[str, Any]: O documento efetivo (o próprio `ctx.config`).

    Raises:
        InvalidParentReferenceError: `custom.parent` com tipos inválidos.
        ParentDiscoveryError: Nenhum parent encontrado na busca.
        ParentLoadError: O parent não pôde ser lido ou interpretado.
    """
    step_id = "parent.locate"
    try:
        reference = ParentReference.from_document(ctx.config)
        if reference.path is not None and _declares_max_levels(ctx.config):
            ctx.add_warning(
                step_id=step_id,
                message="custom.parent.maxLevels ignorado: custom.parent.path está definido",
            )

        parent_path = locate_parent_config(ctx.service_dir, reference, home_dir=home_dir)
        ctx.log(
            step_id=step_id,
            level="INFO",
            message="parent localizado",
            path=str(parent_path),
            reference=reference.to_dict(),
        )

        step_id = "parent.load"
        parent = loader(parent_path)
        ctx.log(
            step_id=step_id,
            level="INFO",
            message="parent carregado",
            path=str(parent_path),
            keys=[str(key) for key in parent],
        )

        step_id = "parent.merge"
        effective = merge_configurations(
            ctx.config,
            parent,
            overwrite_service_config=reference.overwrite_service_config,
        )
        config_hash = compute_config_hash(effective)
    except Exception as exc:
        ctx.log(
            step_id=step_id,
            level="ERROR",
            message=str(exc),
            error=exception_to_error(exc).to_dict(),
        )
        raise

    ctx.replace_config(effective)
    ctx.log(
        step_id=step_id,
        level="INFO",
        message="configuração do parent mesclada no serviço",
        overwrite_service_config=reference.overwrite_service_config,
        config_hash=config_hash,
    )

    if on_config_changed is not None:
        on_config_changed(ctx.config)

    return ctx.config


def _declares_max_levels(document: Dict[str, Any]) -> bool:
    block = (document.get("custom") or {}).get("parent") or {}
    return block.get("maxLevels") is not None
