"""
Environment remoto: submete para um cluster identificado por host e porta REST.

Diferente do environment da sessão, a lista de jars é fixa: ela é resolvida
uma vez na construção e gravada em `pipeline.jars` imediatamente. Jars e
classpaths globais são os mesmos em todas as submissões.

Construção é recusada quando o processo já possui um environment
pré-definido (ex.: dentro do shell interativo), pois um segundo alvo de
cluster criado em paralelo passaria a receber jobs que o usuário espera
ver no environment da sessão.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Union

from dataflow_shell.core.config import (
    Configuration,
    DeploymentOptions,
    PipelineOptions,
    RestOptions,
)
from dataflow_shell.core.dependencies import (
    ArchiveValidator,
    encode_dependency_list,
    resolve_dependencies,
    validate_archive,
)
from dataflow_shell.core.exceptions import ConstructionError

from .base import ExecutionEnvironment
from .guard import are_explicit_environments_allowed
from .types import JobSubmitter


def ensure_explicit_environments_allowed(variant: str) -> None:
    if not are_explicit_environments_allowed():
        raise ConstructionError(
            message=(
                f"The {variant} environment cannot be instantiated when running in a pre-defined context "
                "(such as Command Line Client, interactive shell, or TestEnvironment)"
            ),
            details={"variant": variant},
            hint="Use o environment já fornecido pelo contexto atual.",
        )


class RemoteEnvironment(ExecutionEnvironment):

    variant = "remote"

    def __init__(
        self,
        host: str,
        port: int,
        *jar_files: Any,
        configuration: Union[Configuration, Dict[str, Any], None] = None,
        global_classpaths: Iterable[str] = (),
        submitter: JobSubmitter,
        validator: ArchiveValidator = validate_archive,
    ):
        ensure_explicit_environments_allowed(self.variant)

        if not isinstance(host, str) or not host.strip():
            raise ConstructionError(message="Host do cluster inválido", details={"host": repr(host)})
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConstructionError(message="Porta do cluster inválida", details={"port": repr(port)})

        super().__init__(configuration, submitter=submitter)

        self.jar_files = tuple(resolve_dependencies(jar_files, validator=validator))
        self.global_classpaths = tuple(global_classpaths)

        self.configuration.set(DeploymentOptions.TARGET, "remote")
        self.configuration.set(RestOptions.ADDRESS, host)
        self.configuration.set(RestOptions.PORT, port)
        if not self.configuration.contains(DeploymentOptions.ATTACHED):
            self.configuration.set(DeploymentOptions.ATTACHED, True)
        encode_dependency_list(self.configuration, self.jar_files)
        self.configuration.set(PipelineOptions.CLASSPATHS, list(self.global_classpaths))

        self.log("environment_created", target="remote", address=host, port=port)
        self.log("dependencies_resolved", dependencies=[j.location for j in self.jar_files])
