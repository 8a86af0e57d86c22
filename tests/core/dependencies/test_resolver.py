# tests/core/dependencies/test_resolver.py
"""
Testes do Dependency Resolver.

Os testes asseguram que:
- a saída preserva tamanho e ordem da entrada, com caminhos absolutos
- ausência de dependências produz lista vazia
- caminhos malformados/inexistentes levantam `InvalidDependencyPath`
- arquivos que não são jars levantam `InvalidDependencyArchive` com a causa
- a primeira falha aborta toda a resolução
"""

import os
import zipfile

import pytest

from dataflow_shell.core.dependencies import ArchiveReference, resolve_dependencies
from dataflow_shell.core.exceptions import (
    DependencyResolutionError,
    InvalidDependencyArchive,
    InvalidDependencyPath,
)


def test_resolve_preserves_order_and_length(make_jar):
    paths = [make_jar("libs/b.jar"), make_jar("libs/a.jar"), make_jar("other/c.jar")]

    resolved = resolve_dependencies([str(p) for p in paths])

    assert len(resolved) == len(paths)
    assert [r.location for r in resolved] == [str(p) for p in paths]
    assert all(os.path.isabs(r.location) for r in resolved)
    assert all(r.valid for r in resolved)


def test_resolve_accepts_pathlike(make_jar):
    jar = make_jar("libs/a.jar")

    (ref,) = resolve_dependencies([jar])

    assert ref == ArchiveReference(location=str(jar), valid=True)
    assert ref.uri.startswith("file://")


def test_relative_paths_become_absolute(make_jar, tmp_path, monkeypatch):
    make_jar("libs/a.jar")
    monkeypatch.chdir(tmp_path)

    (ref,) = resolve_dependencies(["libs/../libs/a.jar"])

    assert ref.location == os.path.join(os.getcwd(), "libs", "a.jar")


@pytest.mark.parametrize("paths", [None, [], ()])
def test_no_dependencies(paths):
    assert resolve_dependencies(paths) == []


def test_single_string_is_one_dependency(make_jar):
    jar = make_jar("libs/a.jar")
    assert [r.location for r in resolve_dependencies(str(jar))] == [str(jar)]


def test_missing_file_raises_invalid_path_naming_it(tmp_path):
    missing = str(tmp_path / "libs" / "missing.jar")

    with pytest.raises(InvalidDependencyPath) as ei:
        resolve_dependencies([missing])

    assert ei.value.details["path"] == missing
    assert missing in str(ei.value)


@pytest.mark.parametrize("bad", ["", "   ", "libs/\x00a.jar", 42, None])
def test_malformed_paths_raise_invalid_path(bad):
    with pytest.raises(InvalidDependencyPath):
        resolve_dependencies([bad])


def test_not_a_zip_raises_invalid_archive_with_cause(tmp_path):
    fake = tmp_path / "libs" / "fake.jar"
    fake.parent.mkdir(parents=True)
    fake.write_text("definitely not a jar", encoding="utf-8")

    with pytest.raises(InvalidDependencyArchive) as ei:
        resolve_dependencies([str(fake)])

    assert ei.value.details["path"] == str(fake)
    assert ei.value.details["exc_type"] == "BadZipFile"
    assert isinstance(ei.value.__cause__, zipfile.BadZipFile)


def test_directory_raises_invalid_archive(tmp_path):
    d = tmp_path / "classes"
    d.mkdir()

    with pytest.raises(InvalidDependencyArchive) as ei:
        resolve_dependencies([str(d)])

    assert isinstance(ei.value.__cause__, IsADirectoryError)


def test_first_failure_aborts_whole_resolution(make_jar, tmp_path):
    """Nenhuma lista parcial é devolvida, mesmo com entradas válidas antes da falha."""
    good = make_jar("libs/a.jar")
    seen = []

    def validator(path):
        seen.append(path)

    with pytest.raises(DependencyResolutionError):
        resolve_dependencies([str(good), str(tmp_path / "missing.jar"), str(good)], validator=validator)

    assert len(seen) == 1


def test_custom_validator_failure_is_wrapped(make_jar):
    jar = make_jar("libs/a.jar")

    def validator(path):
        raise PermissionError(f"denied: {path}")

    with pytest.raises(InvalidDependencyArchive) as ei:
        resolve_dependencies([str(jar)], validator=validator)

    assert isinstance(ei.value.__cause__, PermissionError)
