# src/serverless_parent/core/config/hashing.py
"""
Hashing canônico do documento efetivo.

O hash representa a identidade estrutural do documento resultante do
merge e é registrado no event log do `ServiceContext`, permitindo
comparar execuções e detectar mudanças no parent.

Política:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Valores não JSON (ex.: datas do YAML) serializados via `str`
    - Chaves de qualquer tipo (int, data, ...) convertidas para `str`
    - SHA-256 em hexadecimal

Invariantes:
    - Documentos estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""


import json
import hashlib
from typing import Dict, Any


def _stringify_keys(value: Any) -> Any:
    # YAML aceita chaves int, bool e datas no mesmo mapa; JSON não
    if isinstance(value, dict):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(v) for v in value]
    return value


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um documento de serviço.

    Args:
        config (Dict[str, Any]): Documento (tipicamente o efetivo).

    Returns:
        str: Hash SHA-256 hexadecimal do documento.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        _stringify_keys(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
