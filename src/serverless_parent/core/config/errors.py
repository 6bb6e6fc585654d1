# src/serverless_parent/core/config/errors.py
"""
Exceções canônicas da camada de configuração do serverless-parent.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura da referência ao parent, a descoberta do `serverless.yml`
parent, o carregamento do documento e o deep-merge.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de descoberta e de carregamento são fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Hierarquia:
    ConfigError
    ├── InvalidParentReferenceError
    ├── ConfigTypeConflictError
    ├── ParentDiscoveryError
    └── ParentLoadError
        ├── ConfigNotFoundError
        ├── UnsupportedConfigFormatError
        ├── ConfigParseError
        └── InvalidConfigRootTypeError

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do host nem da camada de serviço
"""

from typing import Optional, Sequence


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração de serviço.

    Todas as exceções levantadas durante descoberta, carregamento e
    merge devem herdar desta classe, permitindo captura genérica.
    """


class InvalidParentReferenceError(ConfigError):
    """
    Exceção levantada quando o bloco `custom.parent` do documento child
    existe mas não respeita os tipos esperados.

    Exemplos:
        - custom.parent: "../shared"        (não é mapa)
        - custom.parent.maxLevels: 0        (não é inteiro positivo)
        - custom.parent.overwriteServiceConfig: "no"  (não é booleano)

    Limites explícitos:
        - Não tenta coerção de tipos
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando o deep-merge recebe operandos raiz que
    não são dicionários.

    Conflitos de tipo em chaves internas NÃO são erro: o lado vencedor
    substitui integralmente o valor do lado perdedor.
    """


class ParentDiscoveryError(ConfigError):
    """
    Exceção levantada quando nenhum `serverless.yml` parent é encontrado
    dentro do limite de busca ascendente.

    Decisões arquiteturais:
        - A busca nunca ultrapassa o diretório home do usuário
        - A busca nunca ultrapassa `maxLevels` níveis (teto rígido de 10)
        - Não existe retry: a falha é terminal

    Atributos:
        start_dir: diretório de serviço a partir do qual a busca começou
        probed: caminhos verificados, na ordem da busca
    """

    def __init__(
        self,
        message: str,
        *,
        start_dir: Optional[str] = None,
        probed: Sequence[str] = (),
    ):
        super().__init__(message)
        self.start_dir = start_dir
        self.probed = list(probed)


class ParentLoadError(ConfigError):
    """
    Exceção base para falhas ao ler ou interpretar o documento parent.

    Atributos:
        path: caminho do documento que falhou
    """

    def __init__(self, message: str, *, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(ParentLoadError):
    """
    Exceção levantada quando o documento não existe no caminho indicado.

    Com `custom.parent.path` explícito, esta é a falha que aparece
    (a descoberta automática nunca é acionada).
    """


class UnsupportedConfigFormatError(ParentLoadError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados:
        - YAML (.yml, .yaml)
        - JSON (.json)
    """


class ConfigParseError(ParentLoadError):
    """Exceção levantada quando o conteúdo do arquivo não é YAML/JSON válido."""


class InvalidConfigRootTypeError(ParentLoadError):
    """
    Exceção levantada quando o conteúdo raiz do documento não é um
    dicionário (`dict`).

    Listas ou escalares no root são inválidos: um documento de serviço é
    sempre um mapa chave-valor.
    """
