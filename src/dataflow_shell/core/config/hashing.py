"""
Identidade de snapshots de configuração.

Cada `execute` grava em `pipeline.jars` uma lista completa; o hash do
dicionário resultante entra no Event Log e permite ver, entre duas
submissões do mesmo environment, se algo além do job mudou.

O hash é total: valores que o JSON não representa (ex.: `date` vindo do
YAML) entram pela forma `str`, e chaves não textuais (`{1: ...}`) são
convertidas para texto antes da ordenação.
"""

import hashlib
import json
from typing import Any, Dict


def _stringify_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(v) for v in value]
    return value


def canonical_json(config: Dict[str, Any]) -> str:
    return json.dumps(
        _stringify_keys(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """SHA-256 (hex) da forma canônica de `config`. Só aceita `dict`."""
    if not isinstance(config, dict):
        raise TypeError(f"compute_config_hash espera dict, recebido {type(config).__name__}")
    digest = hashlib.sha256()
    digest.update(canonical_json(config).encode("utf-8"))
    return digest.hexdigest()
