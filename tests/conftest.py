# tests/conftest.py
"""
Fixtures compartilhados para testes do serverless-parent.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos parent/child mínimos e determinísticos
- uma árvore de diretórios de serviços em `tmp_path`
- um ServiceContext controlado

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - O home do usuário é sempre injetado (nunca o home real)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture acessa diretórios fora de `tmp_path`
    - Nenhuma fixture contém lógica de merge
"""

from pathlib import Path

import pytest


@pytest.fixture
def parent_yaml() -> str:
    """
    YAML de um `serverless.yml` parent compartilhado entre serviços.

    Returns:
        str: Conteúdo YAML do parent.
    """
    return """\
provider:
  name: aws
  runtime: nodejs18.x
  stage: prod
  region: us-east-1
package:
  exclude:
    - node_modules/**
"""


@pytest.fixture
def child_yaml() -> str:
    """
    YAML do `serverless.yml` de um serviço child.

    Returns:
        str: Conteúdo YAML do child.
    """
    return """\
service: orders
provider:
  stage: dev
functions:
  create:
    handler: handler.create
"""


@pytest.fixture
def service_tree(tmp_path: Path) -> dict:
    """
    Árvore de diretórios com home, workspace e serviço.

        <tmp>/home/
        <tmp>/home/workspace/
        <tmp>/home/workspace/services/
        <tmp>/home/workspace/services/orders/   ← serviço child

    Nenhum `serverless.yml` é criado; cada teste escreve o que precisa.

    Returns:
        dict: Caminhos `home`, `workspace`, `services` e `service`.
    """
    home = tmp_path / "home"
    workspace = home / "workspace"
    services = workspace / "services"
    service = services / "orders"
    service.mkdir(parents=True)
    return {
        "home": home,
        "workspace": workspace,
        "services": services,
        "service": service,
    }


@pytest.fixture
def service_ctx(service_tree):
    """
    ServiceContext do serviço `orders` com documento child mínimo.

    Returns:
        ServiceContext: Contexto isolado e previsível para testes.
    """
    from serverless_parent.core.service.context import ServiceContext

    return ServiceContext(
        service_dir=service_tree["service"],
        config={
            "service": "orders",
            "provider": {"stage": "dev"},
        },
        meta={"source": "pytest"},
    )
