"""
Exceções tipadas do dataflow-shell.

Todas derivam de `ShellException` e têm a mesma forma: `message` curta,
`details` com dados serializáveis e `hint` opcional para o usuário do shell.
`core/errors.py` converte cada classe em um código estável de
`ShellErrorPayload`.

Quando a falha vem de um colaborador (sessão, filesystem, validador de
archive), a exceção original é encadeada com `raise ... from exc`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ShellException(Exception):
    """Base imutável; `str(exc)` devolve apenas `message`."""

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Construção de environments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConstructionError(ShellException):
    """Environment não pode ser criado (modo não suportado ou contexto pré-definido)."""


@dataclass(frozen=True)
class EnvironmentNotDefined(ConstructionError):
    """Nenhuma factory de environment instalada no guard do processo."""


# ---------------------------------------------------------------------------
# Dependências
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DependencyResolutionError(ShellException):
    """Base para falhas do Dependency Resolver."""


@dataclass(frozen=True)
class InvalidDependencyPath(DependencyResolutionError):
    """Caminho de dependência malformado ou inexistente."""


@dataclass(frozen=True)
class InvalidDependencyArchive(DependencyResolutionError):
    """Caminho existe, mas não é um archive carregável."""


# ---------------------------------------------------------------------------
# Submissão
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnsupportedSubmissionMode(ShellException):
    """Configuração não declara o modo attached."""


@dataclass(frozen=True)
class ArtifactPackagingFailed(ShellException):
    """Sessão interativa não conseguiu produzir um archive fresco."""


# ---------------------------------------------------------------------------
# Guard do processo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EnvironmentAlreadyDefined(ShellException):
    """Tentativa de instalar environment com o guard já ocupado ou travado."""
