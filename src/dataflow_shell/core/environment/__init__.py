"""
Environments de execução do dataflow-shell.

Este pacote reúne a família fechada de environments e o guard do processo:

    - base    → `ExecutionEnvironment`: configuração, submissão e Event Log
    - local   → `LocalEnvironment`: alvo local, attached
    - remote  → `RemoteEnvironment`: host/porta REST + jars fixos
    - session → `SessionExecutionEnvironment`: jar fresco da sessão a cada submissão
    - guard   → `ContextEnvironmentGuard`: no máximo um environment padrão por processo
    - types   → contratos dos colaboradores (`JobSubmitter`, `CompiledSession`)

Princípios fundamentais:
    - Um único nível de especialização (hook `_prepare_submission`)
    - Toda falha é propagada ao chamador imediato
    - O único estado compartilhado entre threads é o guard
"""

from .base import ExecutionEnvironment
from .guard import (
    ContextEnvironmentGuard,
    GuardState,
    are_explicit_environments_allowed,
    disable_all_other_environments,
    get_execution_environment,
    initialize_context_environment,
    process_guard,
    reset_context_environments,
)
from .local import LocalEnvironment
from .remote import RemoteEnvironment
from .session import SessionExecutionEnvironment
from .types import CompiledSession, JobExecutionResult, JobSubmitter

__all__ = [
    "ExecutionEnvironment",
    "LocalEnvironment",
    "RemoteEnvironment",
    "SessionExecutionEnvironment",
    "ContextEnvironmentGuard",
    "GuardState",
    "are_explicit_environments_allowed",
    "disable_all_other_environments",
    "get_execution_environment",
    "initialize_context_environment",
    "process_guard",
    "reset_context_environments",
    "CompiledSession",
    "JobExecutionResult",
    "JobSubmitter",
]
