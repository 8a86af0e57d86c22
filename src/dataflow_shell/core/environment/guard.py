"""
Guard de environment do processo.

Este módulo define o `ContextEnvironmentGuard`, o único ponto do processo
que pode instalar a factory "padrão" de environments de execução. Em um
processo interativo (shell), o environment da sessão deve ser o único
caminho de submissão: qualquer outro trecho de código que tente instalar
seu próprio environment deve falhar de forma explícita, em vez de
sobrescrever silenciosamente o alvo do cluster e a lista de dependências.

Máquina de estados:

    UNSET  --initialize-->  SET
    SET    --reset------->  UNSET
    *      --disable----->  LOCKED
    LOCKED --initialize-->  EnvironmentAlreadyDefined
    LOCKED --reset------->  UNSET

Decisões arquiteturais:
    - Toda leitura-modificação-escrita ocorre sob um único `threading.Lock`
    - O estado LOCKED instala uma factory que sempre falha
    - A factory instalada é chamada FORA da seção crítica

Invariantes:
    - No máximo uma factory não-LOCKED instalada por vez
    - Dois instaladores concorrentes sobre UNSET: exatamente um vence
    - `disable_all_other_environments()` é idempotente

Limites explícitos:
    - Não cria environments por conta própria (sem fallback local implícito)
    - Não conhece variantes concretas de environment
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Optional

from dataflow_shell.core.exceptions import EnvironmentAlreadyDefined, EnvironmentNotDefined

EnvironmentFactory = Callable[[], Any]


class GuardState(str, Enum):
    """Estados do guard do processo."""

    UNSET = "unset"
    SET = "set"
    LOCKED = "locked"


def _locked_factory() -> Any:
    raise EnvironmentAlreadyDefined(
        message="Execution Environment is already defined for this shell.",
        details={"guard_state": GuardState.LOCKED.value},
        hint="Use o environment fornecido pelo shell em vez de criar um novo.",
    )


class ContextEnvironmentGuard:
    """Slot protegido por lock com a factory de environment ativa no processo."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = GuardState.UNSET
        self._factory: Optional[EnvironmentFactory] = None

    @property
    def state(self) -> GuardState:
        with self._lock:
            return self._state

    def initialize(self, factory: EnvironmentFactory) -> None:
        if not callable(factory):
            raise TypeError("factory must be callable")

        with self._lock:
            if self._state is not GuardState.UNSET:
                raise EnvironmentAlreadyDefined(
                    message="Já existe um environment de execução definido neste processo",
                    details={"guard_state": self._state.value},
                    hint="Chame reset_context_environments() ao encerrar o contexto anterior.",
                )
            self._factory = factory
            self._state = GuardState.SET

    def disable(self) -> None:
        with self._lock:
            if self._state is GuardState.LOCKED:
                return
            self._factory = _locked_factory
            self._state = GuardState.LOCKED

    def reset(self) -> None:
        with self._lock:
            self._factory = None
            self._state = GuardState.UNSET

    def explicit_environments_allowed(self) -> bool:
        with self._lock:
            return self._state is GuardState.UNSET

    def create_environment(self) -> Any:
        with self._lock:
            factory = self._factory

        if factory is None:
            raise EnvironmentNotDefined(
                message="Nenhum environment de execução definido neste processo",
                details={"guard_state": GuardState.UNSET.value},
                hint="Crie um environment explicitamente ou instale uma factory via initialize_context_environment().",
            )
        return factory()


_GUARD = ContextEnvironmentGuard()


def process_guard() -> ContextEnvironmentGuard:
    return _GUARD


def initialize_context_environment(factory: EnvironmentFactory) -> None:
    _GUARD.initialize(factory)


def disable_all_other_environments() -> None:
    """Trava o guard: instalações futuras falham com `EnvironmentAlreadyDefined`."""
    _GUARD.disable()


def reset_context_environments() -> None:
    """Volta o guard para UNSET, inclusive a partir de LOCKED."""
    _GUARD.reset()


def are_explicit_environments_allowed() -> bool:
    return _GUARD.explicit_environments_allowed()


def get_execution_environment() -> Any:
    return _GUARD.create_environment()
