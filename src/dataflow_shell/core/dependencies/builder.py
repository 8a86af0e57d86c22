"""
Submission Configuration Builder.

Monta a lista de dependências de uma submissão e a grava na configuração.

Regras:
- O archive fresco da sessão vem sempre DEPOIS das dependências explícitas:
  o código da sessão pode referenciar símbolos definidos nelas, e a ordem
  de class loading no cluster segue a ordem da lista.
- Cada submissão grava uma lista completa em `pipeline.jars`; nunca há
  acúmulo entre submissões.
- Apenas o modo ATTACHED é suportado. A checagem acontece na construção e
  em toda submissão, pois a configuração pode ter sido alterada no meio.
"""

from __future__ import annotations

from typing import List, Sequence

from dataflow_shell.core.config import Configuration, DeploymentOptions, InvalidOptionValueError, PipelineOptions
from dataflow_shell.core.errors import unsupported_submission_mode
from dataflow_shell.core.exceptions import UnsupportedSubmissionMode

from .archive import ArchiveReference


def build_submission_dependencies(
    resolved: Sequence[ArchiveReference],
    fresh_session_archive: ArchiveReference,
) -> List[ArchiveReference]:
    """Retorna uma nova lista `[*resolved, fresh_session_archive]` sem mutar as entradas."""
    merged = list(resolved)
    merged.append(fresh_session_archive)
    return merged


def require_attached_mode(configuration: Configuration) -> None:
    """Levanta `UnsupportedSubmissionMode` se `execution.attached` não for verdadeiro."""
    try:
        attached = configuration.get_boolean(DeploymentOptions.ATTACHED)
    except InvalidOptionValueError:
        attached = False

    if not attached:
        payload = unsupported_submission_mode(attached=configuration.get(DeploymentOptions.ATTACHED))
        raise UnsupportedSubmissionMode(
            message=payload.message,
            details=payload.details,
            hint=payload.hint,
        )


def encode_dependency_list(configuration: Configuration, archives: Sequence[ArchiveReference]) -> None:
    """Sobrescreve `pipeline.jars` com as localizações de `archives`, na ordem."""
    configuration.encode_collection(PipelineOptions.JARS, archives, lambda a: a.location)
