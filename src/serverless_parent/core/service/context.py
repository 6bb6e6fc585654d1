# src/serverless_parent/core/service/context.py
"""
Contexto explícito de um serviço durante a resolução do parent.

Este módulo define o `ServiceContext`, a estrutura que substitui o estado
global do host: o documento do serviço (child) é passado explicitamente
a quem precisa dele, junto com o diretório do serviço e o log
estruturado da resolução.

Responsabilidades do módulo:
    - Manter o diretório e o documento ativo do serviço
    - Substituir o documento ativo in-place após o merge
    - Registrar eventos de log estruturados
    - Coletar warnings não fatais

Invariantes:
    - `config` é sempre o mesmo objeto dict (referências externas
      continuam válidas após o merge)
    - Logs sempre incluem `service_dir` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não localiza nem carrega o parent
    - Não persiste dados automaticamente
    - Não é thread-safe: um contexto por serviço, um merge por processo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class ServiceContext:
    """
    Contexto de um serviço cujo documento será mesclado com o parent.

    Campos canônicos:
    - service_dir: diretório do `serverless.yml` do serviço
    - config: documento ativo do serviço (child, mutável)
    - meta: metadados livres do host (ex.: stage, cli options)
    - events: log estruturado de eventos
    - warnings: warnings por step_id
    """

    service_dir: Path
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.service_dir = Path(self.service_dir)

    # -----------------------------
    # Documento ativo
    # -----------------------------

    def replace_config(self, document: Dict[str, Any]) -> None:
        """Substitui o conteúdo do documento ativo mantendo a identidade do dict."""
        if document is self.config:
            return
        self.config.clear()
        self.config.update(document)

    # -----------------------------
    # Logging & warnings
    # -----------------------------

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "service_dir": str(self.service_dir),
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)
