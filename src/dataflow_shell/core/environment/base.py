"""
Environment de execução base.

O `ExecutionEnvironment` é dono da configuração de submissão, do caminho
de submissão (`JobSubmitter`) e do Event Log de submissões. Variantes
(local, remota, sessão) especializam apenas o passo de preparação que
antecede a submissão, via `_prepare_submission`; não há hierarquia além
desse único nível.

Fluxo de `execute(job_name)`:
    1. abre a submissão no Event Log
    2. `_prepare_submission` (hook da variante) e snapshot de
       `pipeline.jars` e do hash da configuração
    3. `submitter.submit(job_name, configuration)` (bloqueante)
    4. registra sucesso ou falha e devolve o resultado sem alteração

Erros:
    - Qualquer falha é registrada em `submission_failed` e propagada intacta
    - Nenhum retry: resubmissão é decisão do chamador
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from dataflow_shell.core.config import Configuration, PipelineOptions, compute_config_hash
from dataflow_shell.core.errors import to_error_payload
from dataflow_shell.core.traceability import (
    SubmissionEventLog,
    add_event,
    create_event_log,
    submission_failed,
    submission_finished,
    submission_started,
)

from .types import JobSubmitter


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ExecutionEnvironment:
    """Base comum das variantes de environment."""

    variant = "base"

    def __init__(
        self,
        configuration: Union[Configuration, Dict[str, Any], None],
        *,
        submitter: JobSubmitter,
    ):
        if submitter is None:
            raise TypeError("submitter must not be None")

        if configuration is None:
            configuration = Configuration()
        elif isinstance(configuration, dict):
            configuration = Configuration.from_dict(configuration)

        self.configuration: Configuration = configuration
        self.submitter: JobSubmitter = submitter
        self.environment_id: str = uuid.uuid4().hex
        self.event_log: SubmissionEventLog = create_event_log(
            environment_id=self.environment_id,
            variant=self.variant,
            created_at=_now(),
        )

    def log(self, event_type: str, *, level: str = "INFO", submission_id: Optional[str] = None, **payload: Any) -> None:
        add_event(
            self.event_log,
            event_type=event_type,
            ts=_now(),
            level=level,
            submission_id=submission_id,
            payload=payload or None,
        )

    def get_configuration(self) -> Configuration:
        return self.configuration

    def _prepare_submission(self, submission_id: str) -> None:
        """Hook das variantes; a base submete a configuração como está."""

    def execute(self, job_name: str) -> Any:
        submission_id = submission_started(self.event_log, job_name=job_name, ts=_now())

        try:
            self._prepare_submission(submission_id)
            # snapshot do que vai ao cluster; após o submit nada mais pode levantar
            dependencies = list(self.configuration.get(PipelineOptions.JARS) or [])
            config_hash = compute_config_hash(self.configuration.to_dict())
            result = self.submitter.submit(job_name, self.configuration)
        except Exception as exc:
            submission_failed(
                self.event_log,
                submission_id=submission_id,
                ts=_now(),
                error=to_error_payload(exc, job_name=job_name).to_dict(),
            )
            raise

        submission_finished(
            self.event_log,
            submission_id=submission_id,
            ts=_now(),
            job_id=getattr(result, "job_id", None),
            dependencies=dependencies,
            config_hash=config_hash,
        )
        return result
