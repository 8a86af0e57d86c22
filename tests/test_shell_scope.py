# tests/test_shell_scope.py
"""
Testes do ciclo de vida do environment do shell.
"""

import pytest

from dataflow_shell import ShellEnvironmentScope
from dataflow_shell.core.environment import (
    GuardState,
    RemoteEnvironment,
    SessionExecutionEnvironment,
    initialize_context_environment,
    process_guard,
)
from dataflow_shell.core.exceptions import ConstructionError, EnvironmentAlreadyDefined


def test_scope_locks_guard_while_open_and_resets_on_exit(attached_config, fake_session_cls, submitter):
    with ShellEnvironmentScope(attached_config, fake_session_cls("/tmp/s.jar"), submitter=submitter) as env:
        assert isinstance(env, SessionExecutionEnvironment)
        assert process_guard().state is GuardState.LOCKED

        with pytest.raises(EnvironmentAlreadyDefined):
            initialize_context_environment(lambda: "rogue")
        with pytest.raises(ConstructionError):
            RemoteEnvironment("jm", 8081, submitter=submitter)

        env.execute("job1")

    assert process_guard().state is GuardState.UNSET
    assert submitter.submitted_jars == [["/tmp/s.jar"]]


def test_scope_resets_guard_even_when_body_raises(attached_config, fake_session_cls, submitter):
    with pytest.raises(RuntimeError):
        with ShellEnvironmentScope(attached_config, fake_session_cls(), submitter=submitter):
            raise RuntimeError("user interrupted")

    assert process_guard().state is GuardState.UNSET


def test_scope_does_not_lock_when_construction_fails(detached_config, fake_session_cls, submitter):
    with pytest.raises(ConstructionError):
        with ShellEnvironmentScope(detached_config, fake_session_cls(), submitter=submitter):
            pass

    assert process_guard().state is GuardState.UNSET
