"""
Rastreabilidade de submissões do dataflow-shell.

O shell não usa um logger global: cada environment registra eventos
estruturados em seu próprio `SubmissionEventLog`, que pode ser inspecionado
em memória ou persistido em JSON ao final da sessão.
"""

from .event_log import (
    SubmissionEventLog,
    add_event,
    create_event_log,
    load_event_log,
    save_event_log,
    submission_failed,
    submission_finished,
    submission_started,
)

__all__ = [
    "SubmissionEventLog",
    "add_event",
    "create_event_log",
    "load_event_log",
    "save_event_log",
    "submission_failed",
    "submission_finished",
    "submission_started",
]
