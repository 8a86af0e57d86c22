"""
Sessão baseada em diretório de artefatos compilados.

Adapter de referência do contrato `CompiledSession`: o compilador da
sessão escreve classes e recursos em `artifacts_dir`; cada chamada a
`flush_compiled_artifacts_to_jar()` empacota o conteúdo ATUAL desse
diretório em um jar novo, numerado, em `output_dir`.

Layout do jar gerado:
    META-INF/MANIFEST.MF
    <caminho relativo de cada arquivo de artifacts_dir>

Decisões arquiteturais:
    - Um jar novo por chamada; jars anteriores não são sobrescritos
    - A ordem das entradas é determinística (caminhos ordenados)
    - `output_dir` aninhado em `artifacts_dir` e jars `{prefix}-N.jar` da
      própria sessão ficam fora do jar
    - Erros de I/O propagam; o environment os converte em `ArtifactPackagingFailed`
"""

from __future__ import annotations

import itertools
import os
import re
import threading
import zipfile
from pathlib import Path
from typing import Union

MANIFEST_PATH = "META-INF/MANIFEST.MF"
MANIFEST_CONTENT = "Manifest-Version: 1.0\nCreated-By: dataflow-shell\n"


class DirectorySession:
    """Empacota um diretório de artefatos compilados em jars sucessivos."""

    def __init__(
        self,
        artifacts_dir: Union[str, "os.PathLike[str]"],
        output_dir: Union[str, "os.PathLike[str]"],
        *,
        prefix: str = "shell-session",
    ):
        self.artifacts_dir = Path(artifacts_dir)
        self.output_dir = Path(output_dir)
        self.prefix = prefix
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def _next_jar_path(self) -> Path:
        with self._lock:
            while True:
                candidate = self.output_dir / f"{self.prefix}-{next(self._counter)}.jar"
                if not candidate.exists():
                    return candidate

    def _is_own_output(self, file: Path) -> bool:
        """Jars desta sessão (ou qualquer arquivo de `output_dir` aninhado) não entram no próximo jar."""
        resolved = file.resolve()
        out = self.output_dir.resolve()
        if out != self.artifacts_dir.resolve() and out in resolved.parents:
            return True
        return resolved.parent == out and re.fullmatch(rf"{re.escape(self.prefix)}-\d+\.jar", file.name) is not None

    def flush_compiled_artifacts_to_jar(self) -> Path:
        if not self.artifacts_dir.is_dir():
            raise FileNotFoundError(f"Diretório de artefatos da sessão não encontrado: {self.artifacts_dir}")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        jar_path = self._next_jar_path()

        files = sorted(p for p in self.artifacts_dir.rglob("*") if p.is_file() and not self._is_own_output(p))
        with zipfile.ZipFile(jar_path, "w", compression=zipfile.ZIP_DEFLATED) as jar:
            jar.writestr(MANIFEST_PATH, MANIFEST_CONTENT)
            for file in files:
                arcname = file.relative_to(self.artifacts_dir).as_posix()
                if arcname == MANIFEST_PATH:
                    continue
                jar.write(file, arcname)

        return jar_path.absolute()
