"""
Environment vinculado à sessão interativa.

Versão especial de `ExecutionEnvironment` que mantém uma referência à
sessão REPL. A cada `execute`, o código compilado até aquele instante é
escrito em um jar novo e enviado junto com as dependências explícitas do
usuário. Código adicionado à sessão entre duas execuções entra na próxima
submissão sem que o usuário precise registrá-lo de novo.

Fluxo de `execute(job_name)`:
    1. `require_attached_mode` (antes de qualquer efeito colateral)
    2. `session.flush_compiled_artifacts_to_jar()` → archive fresco
    3. `[*dependency_archives, archive_fresco]`
    4. grava a lista em `pipeline.jars` (snapshot completo, sem acúmulo)
    5. submissão herdada da base; resultado devolvido sem alteração

Decisões arquiteturais:
    - O archive da sessão é reempacotado em TODA submissão, inclusive após
      falha do engine; nunca é reaproveitado
    - Passos 2–5 rodam sob um lock da instância, para que duas submissões
      concorrentes não intercalem escritas em `pipeline.jars`
    - Falhas da sessão viram `ArtifactPackagingFailed` com a causa encadeada

Invariantes:
    - `dependency_archives` é imutável após a construção
    - A configuração declara `execution.attached: true` na construção
"""

from __future__ import annotations

import os
import threading
from typing import Any, Dict, Tuple, Union

from dataflow_shell.core.config import Configuration
from dataflow_shell.core.dependencies import (
    ArchiveReference,
    ArchiveValidator,
    build_submission_dependencies,
    encode_dependency_list,
    require_attached_mode,
    resolve_dependencies,
    validate_archive,
)
from dataflow_shell.core.errors import artifact_packaging_failed
from dataflow_shell.core.exceptions import (
    ArtifactPackagingFailed,
    ConstructionError,
    UnsupportedSubmissionMode,
)

from .base import ExecutionEnvironment
from .remote import ensure_explicit_environments_allowed
from .types import CompiledSession, JobSubmitter


class SessionExecutionEnvironment(ExecutionEnvironment):
    """Environment do shell: empacota a sessão e submete em modo attached."""

    variant = "session"

    def __init__(
        self,
        configuration: Union[Configuration, Dict[str, Any]],
        session: CompiledSession,
        *jar_files: Any,
        submitter: JobSubmitter,
        validator: ArchiveValidator = validate_archive,
    ):
        ensure_explicit_environments_allowed(self.variant)

        if configuration is None:
            raise ConstructionError(message="Configuração obrigatória para o environment da sessão", details={})
        if session is None:
            raise ConstructionError(message="Sessão interativa obrigatória", details={})

        super().__init__(configuration, submitter=submitter)

        try:
            require_attached_mode(self.configuration)
        except UnsupportedSubmissionMode as exc:
            raise ConstructionError(
                message="Only ATTACHED mode is supported by the interactive shell.",
                details=dict(exc.details),
                hint=exc.hint,
            ) from exc

        self.session = session
        self.dependency_archives: Tuple[ArchiveReference, ...] = tuple(
            resolve_dependencies(jar_files, validator=validator)
        )
        self._submission_lock = threading.Lock()

        self.log("environment_created", target="session")
        self.log("dependencies_resolved", dependencies=[a.location for a in self.dependency_archives])

    def execute(self, job_name: str) -> Any:
        with self._submission_lock:
            return super().execute(job_name)

    def _prepare_submission(self, submission_id: str) -> None:
        require_attached_mode(self.configuration)

        fresh = self._package_session()
        self.log("session_archive_packaged", submission_id=submission_id, location=fresh.location)

        merged = build_submission_dependencies(self.dependency_archives, fresh)
        encode_dependency_list(self.configuration, merged)

    def _package_session(self) -> ArchiveReference:
        try:
            location = self.session.flush_compiled_artifacts_to_jar()
        except Exception as exc:
            raise self._packaging_error(exc) from exc

        if isinstance(location, ArchiveReference):
            location = location.location

        try:
            if not isinstance(os.fspath(location), str):
                raise TypeError(f"caminho do jar da sessão deve ser texto, recebido {type(location).__name__}")
            return ArchiveReference.from_path(location)
        except (TypeError, ValueError) as exc:
            raise self._packaging_error(exc) from exc

    @staticmethod
    def _packaging_error(exc: BaseException) -> ArtifactPackagingFailed:
        payload = artifact_packaging_failed(exc)
        return ArtifactPackagingFailed(message=payload.message, details=payload.details, hint=payload.hint)
