# src/dataflow_shell/shell.py
"""
Ciclo de vida do environment do shell interativo.

Ao abrir o shell:
    1. o `SessionExecutionEnvironment` é criado (o guard ainda está UNSET)
    2. o guard do processo é travado: nenhum outro environment padrão pode
       ser instalado enquanto o shell estiver aberto

Ao fechar o shell, o guard volta para UNSET, permitindo que uma nova
sessão instale o seu próprio environment.

Uso:

    with ShellEnvironmentScope(config, session, "libs/a.jar", submitter=client) as env:
        env.execute("wordcount")
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from dataflow_shell.core.config import Configuration
from dataflow_shell.core.dependencies import ArchiveValidator, validate_archive
from dataflow_shell.core.environment import (
    CompiledSession,
    JobSubmitter,
    SessionExecutionEnvironment,
    disable_all_other_environments,
    reset_context_environments,
)


class ShellEnvironmentScope:
    """Context manager que cria o environment da sessão e trava o guard do processo."""

    def __init__(
        self,
        configuration: Union[Configuration, Dict[str, Any]],
        session: CompiledSession,
        *jar_files: Any,
        submitter: JobSubmitter,
        validator: ArchiveValidator = validate_archive,
    ):
        self._configuration = configuration
        self._session = session
        self._jar_files = jar_files
        self._submitter = submitter
        self._validator = validator
        self.environment: Optional[SessionExecutionEnvironment] = None

    def __enter__(self) -> SessionExecutionEnvironment:
        self.environment = SessionExecutionEnvironment(
            self._configuration,
            self._session,
            *self._jar_files,
            submitter=self._submitter,
            validator=self._validator,
        )
        disable_all_other_environments()
        return self.environment

    def __exit__(self, exc_type, exc, tb) -> bool:
        reset_context_environments()
        return False
