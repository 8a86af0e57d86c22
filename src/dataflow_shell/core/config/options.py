# src/dataflow_shell/core/config/options.py
"""
Opções tipadas e objeto `Configuration` do shell.

A configuração de submissão é um mapa chave-valor aninhado (o resultado
do loader). Opções são endereçadas por chave pontilhada
(`execution.attached`, `pipeline.jars`), aceitando tanto a forma aninhada

    execution:
      attached: true

quanto a forma plana, comum em arquivos de configuração de clusters:

    execution.attached: true

Responsabilidades do módulo:
    - Declarar as opções conhecidas pela ponte (`DeploymentOptions`,
      `PipelineOptions`, `RestOptions`)
    - Oferecer leitura tipada (`get_boolean`) e escrita (`set`) por opção
    - Codificar coleções em opções de lista (`encode_collection`)

Invariantes:
    - `Configuration.to_dict()` retorna sempre uma cópia profunda
    - Escrita nunca atravessa silenciosamente um valor não-dict

Limites explícitos:
    - Não valida o modo de submissão (ver `dependencies.builder`)
    - Não carrega arquivos (ver `loader.py`)
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from .errors import ConfigTypeConflictError, InvalidOptionValueError
from .loader import load_config

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class ConfigOption:
    """Opção de configuração endereçada por chave pontilhada."""

    key: str
    default: Any = None

    @property
    def path(self) -> List[str]:
        return self.key.split(".")


class DeploymentOptions:
    TARGET = ConfigOption("execution.target")
    ATTACHED = ConfigOption("execution.attached", default=False)


class PipelineOptions:
    JARS = ConfigOption("pipeline.jars", default=[])
    CLASSPATHS = ConfigOption("pipeline.classpaths", default=[])


class RestOptions:
    ADDRESS = ConfigOption("rest.address")
    PORT = ConfigOption("rest.port", default=8081)


class Configuration:
    """
    Configuração de submissão mutável, endereçada por `ConfigOption`.

    O objeto é dono do dicionário interno; `from_dict` copia a entrada,
    de forma que mutações por submissão nunca vazam para o chamador.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = deepcopy(data) if data else {}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Configuration":
        if not isinstance(data, dict):
            raise ConfigTypeConflictError(
                f"Configuration requer dict, recebido: {type(data).__name__}"
            )
        return cls(data)

    @classmethod
    def from_file(
        cls,
        *,
        defaults_path: str,
        local_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> "Configuration":
        return cls(load_config(defaults_path=defaults_path, local_path=local_path, overrides=overrides))

    # -----------------------------
    # Leitura
    # -----------------------------
    def _lookup(self, option: ConfigOption) -> Any:
        if option.key in self._data:
            return self._data[option.key]

        node: Any = self._data
        for part in option.path:
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def contains(self, option: ConfigOption) -> bool:
        return self._lookup(option) is not _MISSING

    def get(self, option: ConfigOption, default: Any = _MISSING) -> Any:
        value = self._lookup(option)
        if value is _MISSING:
            return deepcopy(option.default if default is _MISSING else default)
        return deepcopy(value)

    def get_boolean(self, option: ConfigOption) -> bool:
        value = self.get(option)
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
            return value.strip().lower() == "true"
        raise InvalidOptionValueError(
            f"Opção '{option.key}' deve ser booleana, recebido: {value!r}"
        )

    # -----------------------------
    # Escrita
    # -----------------------------
    def set(self, option: ConfigOption, value: Any) -> None:
        if option.key in self._data:
            self._data[option.key] = deepcopy(value)
            return

        node = self._data
        *parents, leaf = option.path
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise ConfigTypeConflictError(
                    f"Conflito de tipo na chave '{part}' ao escrever '{option.key}': "
                    f"{type(child).__name__} vs dict"
                )
            node = child
        node[leaf] = deepcopy(value)

    def encode_collection(
        self,
        option: ConfigOption,
        values: Iterable[T],
        encoder: Callable[[T], Any],
    ) -> None:
        """Grava `values` codificados como lista, sobrescrevendo o valor anterior."""
        self.set(option, [encoder(v) for v in values])

    # -----------------------------
    # Snapshot
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        return deepcopy(self._data)

    def copy(self) -> "Configuration":
        return Configuration(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Configuration({self._data!r})"
