"""Environment local: submete para um mini-cluster no próprio processo, em modo attached."""

from __future__ import annotations

from typing import Any, Dict, Union

from dataflow_shell.core.config import Configuration, DeploymentOptions

from .base import ExecutionEnvironment
from .types import JobSubmitter


class LocalEnvironment(ExecutionEnvironment):

    variant = "local"

    def __init__(
        self,
        configuration: Union[Configuration, Dict[str, Any], None] = None,
        *,
        submitter: JobSubmitter,
    ):
        super().__init__(configuration, submitter=submitter)
        self.configuration.set(DeploymentOptions.TARGET, "local")
        self.configuration.set(DeploymentOptions.ATTACHED, True)
        self.log("environment_created", target="local")
