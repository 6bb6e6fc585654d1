# src/serverless_parent/core/config/loader.py
"""
Loader canônico de documentos de serviço.

Este módulo lê um documento de configuração (tipicamente o
`serverless.yml` parent) do disco e valida sua estrutura mínima.

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON
    - Converter falhas de leitura/parse em exceções tipadas
    - Garantir que o root do documento é um dicionário

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Arquivos vazios são interpretados como dicionários vazios
    - Toda falha é uma subclasse de `ParentLoadError`

Limites explícitos:
    - Não localiza o parent (ver `locator`)
    - Não realiza merge
    - Não resolve variáveis `${...}`
"""

from pathlib import Path
from typing import Any, Dict, Union
import json

import yaml  # PyYAML

from .errors import (
    ConfigNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    ParentLoadError,
    UnsupportedConfigFormatError,
)


YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega um documento de configuração e valida sua estrutura básica.

    Formatos suportados:
        - YAML (.yaml, .yml) via `yaml.safe_load`
        - JSON (.json)

    Args:
        path (Union[str, Path]): Caminho do documento.

    Returns:
        Dict[str, Any]: Conteúdo do documento.

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o conteúdo não puder ser interpretado
            (incluindo bytes que não são UTF-8).
        InvalidConfigRootTypeError: Se o root não for um dicionário.
        ParentLoadError: Se o arquivo existir mas não puder ser lido
            (ex.: permissão negada).
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigNotFoundError(
            f"Documento de configuração não encontrado: {path}", path=str(path)
        )

    suffix = path.suffix.lower()

    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix or '<sem extensão>'}", path=str(path)
        )

    text = _read_text(path)

    if suffix in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(
                f"YAML inválido em {path}: {e}", path=str(path)
            ) from e

    else:
        try:
            data = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as e:
            raise ConfigParseError(
                f"JSON inválido em {path}: {e}", path=str(path)
            ) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Root do documento deve ser dict, recebido: {type(data).__name__}",
            path=str(path),
        )

    return data


def _read_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ConfigParseError(
            f"Documento não está em UTF-8 válido: {path}: {e}", path=str(path)
        ) from e
    except OSError as e:
        raise ParentLoadError(
            f"Não foi possível ler {path}: {e}", path=str(path)
        ) from e
