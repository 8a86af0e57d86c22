# src/dataflow_shell/core/config/loader.py
"""
Leitura das camadas de configuração do shell.

Ordem de precedência (menor → maior):

    1. defaults   obrigatório, ex.: `shell.defaults.yaml`
    2. local      opcional; ignorado se o arquivo não existir
    3. overrides  dict já materializado pela CLI (ex.: `--attached false`)

Exemplo de defaults:

    execution:
      target: remote
      attached: true
    rest:
      address: jobmanager.local
      port: 8081

O loader só lê e combina. O significado das chaves fica em `options.py`
e a checagem de modo attached fica no builder de dependências.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TextIO

import yaml

from .errors import DefaultsNotFoundError, InvalidConfigRootTypeError, UnsupportedConfigFormatError
from .merge import merge_layers

_PARSERS: Dict[str, Callable[[TextIO], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Lê uma camada YAML/JSON. Arquivo vazio vale `{}`.

    Raises:
        DefaultsNotFoundError: arquivo inexistente.
        UnsupportedConfigFormatError: extensão desconhecida.
        InvalidConfigRootTypeError: raiz que não é mapeamento.
    """
    if not path.is_file():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix or '(sem extensão)'} (use {', '.join(sorted(_PARSERS))})"
        )

    with path.open("r", encoding="utf-8") as fh:
        data = parser(fh)

    data = {} if data is None else data
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(f"{path.name}: raiz deve ser mapeamento, recebido {type(data).__name__}")
    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    layers: List[Dict[str, Any]] = [read_config_file(Path(defaults_path))]

    if local_path is not None and Path(local_path).exists():
        layers.append(read_config_file(Path(local_path)))

    if overrides:
        layers.append(overrides)

    return merge_layers(layers)
