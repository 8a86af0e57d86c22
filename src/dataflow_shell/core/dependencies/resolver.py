"""
Dependency Resolver.

Transforma a lista de caminhos de dependência informada pelo usuário do
shell (ex.: `--addclasspath a.jar:b.jar`, já materializada) em uma lista
ordenada de `ArchiveReference` validados.

Política de resolução (v1):
    - `None` ou lista vazia → nenhuma dependência explícita
    - cada caminho é convertido para absoluto e normalizado
    - caminho malformado ou inexistente → `InvalidDependencyPath`
    - caminho existente mas não carregável → `InvalidDependencyArchive`
    - a primeira falha aborta toda a resolução (nunca lista parcial)

Invariantes:
    - A ordem de saída é a ordem de entrada
    - Nenhum efeito colateral além de leituras no filesystem

Limites explícitos:
    - Não copia nem baixa archives
    - Não deduplica caminhos repetidos
"""

from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import Any, Iterable, List, Optional

from dataflow_shell.core.exceptions import InvalidDependencyArchive, InvalidDependencyPath

from .archive import ArchiveReference, ArchiveValidator, validate_archive


def _to_absolute(raw: Any) -> Path:
    """Normaliza a entrada para um caminho absoluto ou levanta `InvalidDependencyPath`."""
    if not isinstance(raw, (str, os.PathLike)):
        raise InvalidDependencyPath(
            message="Caminho de dependência inválido",
            details={"path": repr(raw), "reason": f"tipo não suportado: {type(raw).__name__}"},
        )

    text = os.fspath(raw)
    if not isinstance(text, str) or not text.strip():
        raise InvalidDependencyPath(
            message="Caminho de dependência inválido",
            details={"path": repr(raw), "reason": "caminho vazio"},
        )

    if "\x00" in text:
        raise InvalidDependencyPath(
            message="Caminho de dependência inválido",
            details={"path": repr(raw), "reason": "caractere NUL no caminho"},
        )

    absolute = Path(os.path.abspath(text))
    if not absolute.exists():
        raise InvalidDependencyPath(
            message=f"Arquivo de dependência não encontrado: {text}",
            details={"path": text, "absolute_path": str(absolute), "reason": "arquivo inexistente"},
            hint="Corrija o caminho informado ao shell; nenhuma dependência foi registrada.",
        )

    return absolute


def resolve_dependency(raw: Any, *, validator: ArchiveValidator = validate_archive) -> ArchiveReference:
    absolute = _to_absolute(raw)

    try:
        validator(absolute)
    except (OSError, zipfile.BadZipFile, ValueError) as exc:
        raise InvalidDependencyArchive(
            message=f"Problema com o arquivo jar {os.fspath(raw)}",
            details={
                "path": os.fspath(raw),
                "absolute_path": str(absolute),
                "exc_type": exc.__class__.__name__,
                "exc_message": str(exc),
            },
            hint="Garanta que o caminho aponta para um jar legível e íntegro.",
        ) from exc

    return ArchiveReference.from_path(absolute)


def resolve_dependencies(
    paths: Optional[Iterable[Any]],
    *,
    validator: ArchiveValidator = validate_archive,
) -> List[ArchiveReference]:
    """
    Resolve todos os caminhos, na ordem recebida.

    Args:
        paths: Caminhos informados pelo usuário; `None` significa nenhum.
        validator: Colaborador de validação de archives.

    Returns:
        List[ArchiveReference]: Referências validadas, mesma ordem da entrada.

    Raises:
        InvalidDependencyPath: Caminho malformado ou inexistente.
        InvalidDependencyArchive: Caminho existente mas não carregável.
    """
    if paths is None:
        return []
    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]
    return [resolve_dependency(p, validator=validator) for p in paths]
