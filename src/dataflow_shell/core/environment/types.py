"""
Contratos dos colaboradores externos e resultado de submissão.

A ponte não reimplementa o engine nem o compilador da sessão interativa;
ela os consome por protocolos mínimos, verificados por duck typing
(`@runtime_checkable`), no mesmo espírito do protocolo de Steps.

Colaboradores:
    - JobSubmitter    → caminho de submissão do cluster (bloqueante)
    - CompiledSession → sessão REPL que materializa o código compilado em um jar

Limites explícitos:
    - Nenhum formato de rede ou transporte é definido aqui
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    import os

    from dataflow_shell.core.config import Configuration
    from dataflow_shell.core.dependencies import ArchiveReference


@dataclass(frozen=True)
class JobExecutionResult:
    """Resultado de um job submetido em modo attached."""

    job_id: str
    job_name: str
    net_runtime_ms: int = 0
    accumulators: Dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class JobSubmitter(Protocol):
    """
    Caminho de submissão do engine.

    A chamada é bloqueante: retorna apenas quando o cluster conclui o job
    (modo attached) ou levanta o erro do engine, que a ponte propaga sem
    alteração.
    """

    def submit(self, job_name: str, configuration: "Configuration") -> Any:
        ...


@runtime_checkable
class CompiledSession(Protocol):
    """
    Sessão interativa capaz de escrever seu código compilado em um jar.

    Deve aceitar chamadas repetidas; cada chamada reflete o estado da sessão
    naquele instante.
    """

    def flush_compiled_artifacts_to_jar(self) -> Union[str, "os.PathLike[str]", "ArchiveReference"]:
        ...
