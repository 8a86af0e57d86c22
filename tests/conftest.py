# tests/conftest.py
"""
Fixtures compartilhados para testes do dataflow-shell.

Este módulo fornece:
- configurações mínimas e determinísticas (attached / não attached)
- fábrica de jars válidos em `tmp_path`
- colaboradores falsos: sessão interativa e caminho de submissão
- reset automático do guard do processo antes e depois de cada teste

Decisões arquiteturais:
    - Colaboradores falsos usam duck typing, sem herança de protocolos
    - O submitter captura um snapshot de `pipeline.jars` no momento da
      submissão, pois a configuração é mutada a cada execute
    - O guard é estado global do processo; nenhum teste pode vazá-lo

Limites explícitos:
    - Não sobe cluster nem compilador reais
"""

import zipfile

import pytest


# =====================================================
# Guard do processo
# =====================================================

@pytest.fixture(autouse=True)
def clean_process_guard():
    """Garante guard UNSET em todo teste (antes e depois)."""
    from dataflow_shell.core.environment import reset_context_environments

    reset_context_environments()
    yield
    reset_context_environments()


# =====================================================
# Configuração
# =====================================================

@pytest.fixture
def attached_config() -> dict:
    return {
        "execution": {"target": "remote", "attached": True},
        "rest": {"address": "jobmanager.local", "port": 8081},
    }


@pytest.fixture
def detached_config() -> dict:
    return {
        "execution": {"target": "remote", "attached": False},
    }


# =====================================================
# Jars
# =====================================================

def write_jar(path, entries=None):
    """Escreve um jar mínimo (zip com MANIFEST) em `path` e retorna o caminho."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as jar:
        jar.writestr("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n")
        for name, content in (entries or {}).items():
            jar.writestr(name, content)
    return path


@pytest.fixture
def make_jar(tmp_path):
    """Fábrica de jars válidos sob `tmp_path`."""

    def _make(relative: str, entries=None):
        return write_jar(tmp_path / relative, entries)

    return _make


# =====================================================
# Colaboradores falsos
# =====================================================

class FakeSession:
    """
    Sessão interativa falsa.

    Retorna, a cada flush, o próximo item de `locations`. Se o item for
    uma exceção, ela é levantada (simula falha de escrita do compilador).
    """

    def __init__(self, *locations):
        self._locations = list(locations)
        self.flush_calls = 0

    def flush_compiled_artifacts_to_jar(self):
        self.flush_calls += 1
        if not self._locations:
            raise AssertionError("FakeSession sem localizações restantes")
        item = self._locations.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class RecordingSubmitter:
    """Caminho de submissão falso que registra cada chamada."""

    def __init__(self, *, error=None):
        self.error = error
        self.calls = []

    def submit(self, job_name, configuration):
        from dataflow_shell.core.config import PipelineOptions
        from dataflow_shell.core.environment import JobExecutionResult

        self.calls.append(
            {
                "job_name": job_name,
                "configuration": configuration,
                "jars": configuration.get(PipelineOptions.JARS),
            }
        )
        if self.error is not None:
            raise self.error
        return JobExecutionResult(job_id=f"job-{len(self.calls)}", job_name=job_name)

    @property
    def submitted_jars(self):
        return [c["jars"] for c in self.calls]


@pytest.fixture
def submitter():
    return RecordingSubmitter()


@pytest.fixture
def fake_session_cls():
    return FakeSession


@pytest.fixture
def submitter_cls():
    return RecordingSubmitter
