# src/dataflow_shell/core/config/merge.py
"""
Combinação de camadas de configuração.

Regras, aplicadas chave a chave:
    - mapeamento + mapeamento → combinação recursiva
    - mapeamento + não-mapeamento (ou o inverso) → `ConfigTypeConflictError`
    - qualquer outro par → o valor da camada posterior substitui o anterior

Listas caem na última regra: `pipeline.jars` de uma camada nunca é
concatenado ao de outra. Escalares de tipos diferentes também são
substituídos (ex.: `attached: "false"` vindo da CLI sobre `attached: true`);
a interpretação fica com `Configuration.get_boolean`.

As entradas nunca são mutadas; o resultado não compartilha objetos com elas.
"""

from copy import deepcopy
from typing import Any, Dict, Iterable, List

from .errors import ConfigTypeConflictError


def _merge_into(target: Dict[str, Any], layer: Dict[str, Any], trail: List[str]) -> None:
    for key, incoming in layer.items():
        here = trail + [str(key)]
        existing = target.get(key)

        if isinstance(existing, dict) and isinstance(incoming, dict):
            _merge_into(existing, incoming, here)
            continue

        if key in target and isinstance(existing, dict) != isinstance(incoming, dict):
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{'.'.join(here)}': "
                f"{type(existing).__name__} vs {type(incoming).__name__}"
            )

        target[key] = deepcopy(incoming)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Novo dicionário com `override` aplicado sobre `base`.

    Raises:
        ConfigTypeConflictError: algum dos lados não é dict, ou uma chave é
            mapeamento de um lado e escalar/lista do outro.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Merge requer dicts na raiz, recebido {type(base).__name__} e {type(override).__name__}"
        )

    merged = deepcopy(base)
    _merge_into(merged, override, [])
    return merged


def merge_layers(layers: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Camadas posteriores têm precedência."""
    result: Dict[str, Any] = {}
    for layer in layers:
        result = deep_merge(result, layer)
    return result
