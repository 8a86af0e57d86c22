# src/dataflow_shell/core/config/__init__.py

"""
Camada de configuração do dataflow-shell.

Este pacote carrega, mescla, identifica (hash) e expõe de forma tipada a
configuração de submissão usada pelos environments de execução.

A configuração no shell é:
    - declarativa
    - determinística
    - materializada antes de qualquer environment ser criado

Responsabilidades do pacote:
    - Carregamento de arquivos (defaults + overrides locais)
    - Resolução via deep-merge determinístico
    - Hash canônico de snapshots para o Event Log de submissões
    - Opções tipadas (`execution.attached`, `pipeline.jars`, ...)

Limites explícitos:
    - Não valida o modo de submissão
    - Não interage com sessão, engine ou guard
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidOptionValueError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge, merge_layers
from .options import (
    ConfigOption,
    Configuration,
    DeploymentOptions,
    PipelineOptions,
    RestOptions,
)

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidOptionValueError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "deep_merge",
    "merge_layers",
    "ConfigOption",
    "Configuration",
    "DeploymentOptions",
    "PipelineOptions",
    "RestOptions",
]
