# src/dataflow_shell/__init__.py
"""
dataflow-shell — ponte entre uma sessão interativa (REPL) e um cluster de dataflow.

O usuário define um programa de dataflow incrementalmente em uma sessão
viva; o compilador da sessão produz artefatos à medida que o usuário
digita. Ao executar um job, o shell:

    - empacota tudo o que a sessão compilou até aquele instante em um jar
    - junta esse jar às dependências explícitas informadas pelo usuário
    - grava a lista completa em `pipeline.jars` da configuração de submissão
    - submete em modo ATTACHED pelo caminho de submissão do engine

Arquitetura em alto nível:
    - core.config       → carregamento, merge, hash e opções tipadas
    - core.dependencies → resolver de jars e builder da lista de submissão
    - core.environment  → família de environments e guard do processo
    - core.traceability → Event Log de submissões
    - session           → adapter de referência para sessões em diretório
    - shell             → ciclo de vida do environment do shell

Limites explícitos:
    - Não implementa o engine (planner, scheduler, runtime)
    - Não implementa o compilador da sessão
    - Não define transporte de rede até o cluster
"""

from .core.environment import (
    JobExecutionResult,
    LocalEnvironment,
    RemoteEnvironment,
    SessionExecutionEnvironment,
    disable_all_other_environments,
    reset_context_environments,
)
from .shell import ShellEnvironmentScope

__all__ = [
    "JobExecutionResult",
    "LocalEnvironment",
    "RemoteEnvironment",
    "SessionExecutionEnvironment",
    "ShellEnvironmentScope",
    "disable_all_other_environments",
    "reset_context_environments",
]

__version__ = "0.1.0"
