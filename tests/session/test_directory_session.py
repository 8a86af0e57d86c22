# tests/session/test_directory_session.py
"""
Testes do adapter de sessão baseado em diretório.

Os testes asseguram que:
- cada flush produz um jar novo, válido e absoluto
- o jar reflete o conteúdo do diretório no instante do flush
- falhas de I/O propagam (o environment as converte)
"""

import zipfile

import pytest

from dataflow_shell.core.dependencies import validate_archive
from dataflow_shell.session import DirectorySession
from dataflow_shell.session.directory import MANIFEST_PATH


def _names(jar_path):
    with zipfile.ZipFile(jar_path) as jar:
        return sorted(jar.namelist())


def test_each_flush_is_a_fresh_jar_reflecting_current_state(tmp_path):
    classes = tmp_path / "classes"
    (classes / "line1").mkdir(parents=True)
    (classes / "line1" / "WordCount.class").write_bytes(b"\xca\xfe\xba\xbe")
    session = DirectorySession(classes, tmp_path / "out")

    first = session.flush_compiled_artifacts_to_jar()

    (classes / "line2").mkdir()
    (classes / "line2" / "Tokenizer.class").write_bytes(b"\xca\xfe\xba\xbe")
    second = session.flush_compiled_artifacts_to_jar()

    assert first != second
    assert first.is_absolute() and second.is_absolute()
    assert _names(first) == [MANIFEST_PATH, "line1/WordCount.class"]
    assert _names(second) == [MANIFEST_PATH, "line1/WordCount.class", "line2/Tokenizer.class"]
    validate_archive(first)
    validate_archive(second)


def test_existing_jars_are_not_overwritten(tmp_path):
    classes = tmp_path / "classes"
    classes.mkdir()
    out = tmp_path / "out"
    out.mkdir()
    (out / "shell-session-1.jar").write_bytes(b"previous run")

    jar = DirectorySession(classes, out).flush_compiled_artifacts_to_jar()

    assert jar.name == "shell-session-2.jar"
    assert (out / "shell-session-1.jar").read_bytes() == b"previous run"


def test_missing_artifacts_dir_raises(tmp_path):
    session = DirectorySession(tmp_path / "nope", tmp_path / "out")

    with pytest.raises(FileNotFoundError):
        session.flush_compiled_artifacts_to_jar()


def test_nested_output_dir_is_not_packaged_again(tmp_path):
    classes = tmp_path / "classes"
    classes.mkdir()
    (classes / "Line1.class").write_bytes(b"\xca\xfe\xba\xbe")
    session = DirectorySession(classes, classes / "out")

    first = session.flush_compiled_artifacts_to_jar()
    second = session.flush_compiled_artifacts_to_jar()

    assert _names(first) == [MANIFEST_PATH, "Line1.class"]
    assert _names(second) == [MANIFEST_PATH, "Line1.class"]


def test_output_dir_equal_to_artifacts_dir_skips_own_jars_only(tmp_path):
    classes = tmp_path / "classes"
    classes.mkdir()
    (classes / "Line1.class").write_bytes(b"\xca\xfe\xba\xbe")
    session = DirectorySession(classes, classes)

    session.flush_compiled_artifacts_to_jar()
    second = session.flush_compiled_artifacts_to_jar()

    assert _names(second) == [MANIFEST_PATH, "Line1.class"]
