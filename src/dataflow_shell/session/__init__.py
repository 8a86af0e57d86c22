"""
Adapters de sessão interativa.

O shell consome a sessão apenas pelo contrato `CompiledSession`
(`flush_compiled_artifacts_to_jar()`); este pacote oferece um adapter
de referência baseado em diretório.
"""

from .directory import DirectorySession

__all__ = ["DirectorySession"]
