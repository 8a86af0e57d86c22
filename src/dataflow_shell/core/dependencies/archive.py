"""
Referências a archives (jars) e validação de carregabilidade.

Um `ArchiveReference` é a forma canônica de um archive dentro da ponte:
um caminho absoluto e normalizado no filesystem local, acompanhado de um
flag de validade. Referências são imutáveis e só são criadas a partir
de entradas já verificadas (Dependency Resolver) ou da saída da sessão
interativa.

`validate_archive` é o validador padrão: verifica que o caminho aponta
para um arquivo regular, legível e estruturalmente um zip/jar. Ele
levanta exceções de baixo nível (`OSError`, `zipfile.BadZipFile`), que o
resolver encapsula em `InvalidDependencyArchive` preservando a causa.
"""

from __future__ import annotations

import os
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

PathInput = Union[str, "os.PathLike[str]"]

ArchiveValidator = Callable[[Path], None]


@dataclass(frozen=True)
class ArchiveReference:
    """Archive localizável: caminho absoluto + flag de validade."""

    location: str
    valid: bool = True

    @classmethod
    def from_path(cls, path: PathInput, *, valid: bool = True) -> "ArchiveReference":
        return cls(location=os.path.abspath(os.fspath(path)), valid=valid)

    @property
    def path(self) -> Path:
        return Path(self.location)

    @property
    def uri(self) -> str:
        return self.path.as_uri()

    def __str__(self) -> str:
        return self.location


def validate_archive(path: Path) -> None:
    """
    Verifica que `path` é um archive carregável.

    Raises:
        IsADirectoryError: Se o caminho for um diretório.
        PermissionError: Se o arquivo não puder ser lido.
        zipfile.BadZipFile: Se o conteúdo não for um zip/jar válido.
    """
    if path.is_dir():
        raise IsADirectoryError(f"Esperado arquivo, encontrado diretório: {path}")

    if not os.access(path, os.R_OK):
        raise PermissionError(f"Sem permissão de leitura: {path}")

    with zipfile.ZipFile(path) as archive:
        # abrir o diretório central já valida a estrutura; nada mais é lido
        archive.namelist()
