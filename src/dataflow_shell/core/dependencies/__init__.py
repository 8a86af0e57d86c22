"""
Dependências de submissão do shell.

Componentes:
    - archive  → `ArchiveReference` e validador padrão de jars
    - resolver → caminhos do usuário → referências validadas, na ordem
    - builder  → merge com o archive fresco da sessão e escrita em `pipeline.jars`

Resolver e builder são puros por chamada: nenhum estado é mantido entre
submissões.
"""

from .archive import ArchiveReference, ArchiveValidator, validate_archive
from .builder import build_submission_dependencies, encode_dependency_list, require_attached_mode
from .resolver import resolve_dependencies, resolve_dependency

__all__ = [
    "ArchiveReference",
    "ArchiveValidator",
    "validate_archive",
    "build_submission_dependencies",
    "encode_dependency_list",
    "require_attached_mode",
    "resolve_dependencies",
    "resolve_dependency",
]
