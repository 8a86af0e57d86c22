# src/dataflow_shell/core/traceability/event_log.py
"""
Event Log de submissões — rastreabilidade de um environment de execução.

Cada environment mantém um `SubmissionEventLog` que consolida:
    - metadados do environment (id, variante, criação)
    - Event Log ordenado de eventos explícitos
    - estado de cada submissão (status, jars enviados, hash da config, erro)

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - A ordem do Event Log reflete a ordem real das chamadas
    - O log é serializável e reconstruível (round-trip JSON)
    - Falhas são registradas e depois propagadas; nunca engolidas

Decisões arquiteturais:
    - UTC é o timezone canônico para todos os timestamps
    - Submissões são numeradas sequencialmente (`submission_id`), pois o
      mesmo `job_name` pode ser submetido várias vezes na mesma sessão

Limites explícitos:
    - Não executa submissões
    - Não decide retry
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence


def _utc_iso(dt: datetime) -> str:
    """Normaliza para UTC timezone-aware (naive é assumido UTC) e formata em ISO-8601."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


def _ms_between(start_iso: str, end: datetime) -> int:
    start = datetime.fromisoformat(start_iso)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)
    return max(0, int((end - start).total_seconds() * 1000))


@dataclass
class SubmissionEventLog:
    """
    Registro ordenado de eventos e submissões de um environment.

    Campos:
        - environment: metadados (environment_id, variant, created_at)
        - submissions: estado por `submission_id`
        - events: Event Log ordenado
    """

    environment: Dict[str, Any]
    submissions: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "environment": dict(self.environment),
            "submissions": {k: dict(v) for k, v in self.submissions.items()},
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubmissionEventLog":
        return cls(
            environment=dict(data.get("environment", {})),
            submissions={k: dict(v) for k, v in (data.get("submissions", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )

    def events_of(self, event_type: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("event_type") == event_type]


def create_event_log(*, environment_id: str, variant: str, created_at: datetime) -> SubmissionEventLog:
    """
    Cria o Event Log inicial de um environment.

    Esta função não emite eventos; o log inicia vazio e só é preenchido
    por `add_event` e pelos helpers de submissão.
    """
    return SubmissionEventLog(
        environment={
            "environment_id": environment_id,
            "variant": variant,
            "created_at": _utc_iso(created_at),
        },
    )


def add_event(
    log: SubmissionEventLog,
    *,
    event_type: str,
    ts: datetime,
    level: str = "INFO",
    submission_id: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """Adiciona exatamente um evento ao final do Event Log."""
    event: Dict[str, Any] = {
        "event_type": event_type,
        "level": level,
        "timestamp": _utc_iso(ts),
    }
    if submission_id is not None:
        event["submission_id"] = submission_id
    if payload is not None:
        event["payload"] = payload
    log.events.append(event)


def submission_started(log: SubmissionEventLog, *, job_name: str, ts: datetime) -> str:
    """Abre uma nova submissão e retorna seu `submission_id`."""
    submission_id = str(len(log.submissions) + 1)
    log.submissions[submission_id] = {
        "job_name": job_name,
        "status": "running",
        "started_at": _utc_iso(ts),
    }
    add_event(
        log,
        event_type="submission_started",
        ts=ts,
        submission_id=submission_id,
        payload={"job_name": job_name},
    )
    return submission_id


def submission_finished(
    log: SubmissionEventLog,
    *,
    submission_id: str,
    ts: datetime,
    job_id: Optional[str],
    dependencies: Sequence[str],
    config_hash: str,
) -> None:
    state = log.submissions[submission_id]
    state.update(
        {
            "status": "success",
            "finished_at": _utc_iso(ts),
            "duration_ms": _ms_between(state["started_at"], ts),
            "job_id": job_id,
            "dependencies": list(dependencies),
            "config_hash": config_hash,
        }
    )
    add_event(
        log,
        event_type="submission_finished",
        ts=ts,
        submission_id=submission_id,
        payload={"job_id": job_id, "config_hash": config_hash},
    )


def submission_failed(
    log: SubmissionEventLog,
    *,
    submission_id: str,
    ts: datetime,
    error: Dict[str, Any],
) -> None:
    """
    Marca a submissão como falha e registra o payload de erro.

    O chamador continua responsável por propagar a exceção original.
    """
    state = log.submissions[submission_id]
    state.update(
        {
            "status": "failed",
            "finished_at": _utc_iso(ts),
            "duration_ms": _ms_between(state["started_at"], ts),
            "error": dict(error),
        }
    )
    add_event(
        log,
        event_type="submission_failed",
        ts=ts,
        level="ERROR",
        submission_id=submission_id,
        payload={"error": dict(error)},
    )


def save_event_log(log: SubmissionEventLog, path: Path) -> None:
    """Persiste o Event Log em JSON determinístico (chaves ordenadas)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log.to_dict(), ensure_ascii=False, indent=2, sort_keys=True), encoding="utf-8")


def load_event_log(path: Path) -> SubmissionEventLog:
    return SubmissionEventLog.from_dict(json.loads(path.read_text(encoding="utf-8")))
