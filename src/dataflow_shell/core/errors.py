"""
Catálogo de erros do dataflow-shell.

`ShellErrorPayload` é a forma serializável de qualquer falha da ponte
sessão → cluster. É o que vai para o Event Log de submissões (evento
`submission_failed`) e o que a CLI mostra ao usuário do shell.

Cada exceção de `core/exceptions.py` tem um código estável no catálogo.
Exceções de fora (engine, cliente REST, colaboradores) viram
`ENGINE_SUBMISSION_ERROR` com classe e mensagem originais em `details`;
stack traces nunca entram no payload.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .exceptions import (
    ArtifactPackagingFailed,
    ConstructionError,
    EnvironmentAlreadyDefined,
    EnvironmentNotDefined,
    InvalidDependencyArchive,
    InvalidDependencyPath,
    ShellException,
    UnsupportedSubmissionMode,
)


@dataclass(frozen=True)
class ShellErrorPayload:
    """`type` é sempre um código do catálogo abaixo, nunca texto livre."""

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Códigos
# ---------------------------------------------------------------------------

ENVIRONMENT_CONSTRUCTION_ERROR = "ENVIRONMENT_CONSTRUCTION_ERROR"
ENVIRONMENT_NOT_DEFINED = "ENVIRONMENT_NOT_DEFINED"
ENVIRONMENT_ALREADY_DEFINED = "ENVIRONMENT_ALREADY_DEFINED"

INVALID_DEPENDENCY_PATH = "INVALID_DEPENDENCY_PATH"
INVALID_DEPENDENCY_ARCHIVE = "INVALID_DEPENDENCY_ARCHIVE"

UNSUPPORTED_SUBMISSION_MODE = "UNSUPPORTED_SUBMISSION_MODE"
ARTIFACT_PACKAGING_FAILED = "ARTIFACT_PACKAGING_FAILED"
ENGINE_SUBMISSION_ERROR = "ENGINE_SUBMISSION_ERROR"


# subclasses antes das bases
_TYPE_BY_EXCEPTION = (
    (EnvironmentNotDefined, ENVIRONMENT_NOT_DEFINED),
    (ConstructionError, ENVIRONMENT_CONSTRUCTION_ERROR),
    (EnvironmentAlreadyDefined, ENVIRONMENT_ALREADY_DEFINED),
    (InvalidDependencyPath, INVALID_DEPENDENCY_PATH),
    (InvalidDependencyArchive, INVALID_DEPENDENCY_ARCHIVE),
    (UnsupportedSubmissionMode, UNSUPPORTED_SUBMISSION_MODE),
    (ArtifactPackagingFailed, ARTIFACT_PACKAGING_FAILED),
)


def describe_cause(exc: BaseException) -> Dict[str, str]:
    return {"exc_type": exc.__class__.__name__, "exc_message": str(exc)}


# ---------------------------------------------------------------------------
# Fábricas
# ---------------------------------------------------------------------------

def unsupported_submission_mode(*, attached: Any) -> ShellErrorPayload:
    return ShellErrorPayload(
        type=UNSUPPORTED_SUBMISSION_MODE,
        message="Apenas o modo ATTACHED é suportado pelo shell interativo",
        details={"execution.attached": attached},
        hint="Declare `execution.attached: true` na configuração do shell antes de submeter.",
    )


def artifact_packaging_failed(cause: BaseException) -> ShellErrorPayload:
    return ShellErrorPayload(
        type=ARTIFACT_PACKAGING_FAILED,
        message="Falha ao empacotar os artefatos compilados da sessão",
        details=describe_cause(cause),
        hint="Verifique o diretório de saída da sessão e o estado do compilador. Nenhum retry é aplicado.",
    )


def engine_submission_error(cause: BaseException, *, job_name: Optional[str] = None) -> ShellErrorPayload:
    return ShellErrorPayload(
        type=ENGINE_SUBMISSION_ERROR,
        message="Falha na submissão do job ao cluster",
        details={"job_name": job_name, **describe_cause(cause)},
        hint="Resubmeter é decisão do chamador; confira o estado do job no cluster antes.",
    )


def to_error_payload(exc: BaseException, *, job_name: Optional[str] = None) -> ShellErrorPayload:
    if not isinstance(exc, ShellException):
        return engine_submission_error(exc, job_name=job_name)

    code = next((code for cls, code in _TYPE_BY_EXCEPTION if isinstance(exc, cls)), exc.__class__.__name__)
    return ShellErrorPayload(type=code, message=exc.message, details=dict(exc.details or {}), hint=exc.hint)
