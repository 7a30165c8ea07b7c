"""Host-side environment object model produced by the converter."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from urllib.parse import SplitResult

_DC_KW = {"frozen": True, "kw_only": True, "slots": True} if sys.version_info >= (3, 10) else {"frozen": True}


@dataclass(frozen=True)
class CommandRunConfiguration:
    """An executable plus its arguments."""

    executable: str
    args: tuple[str, ...] = ()


@dataclass(**_DC_KW)
class PythonEnvironmentExecInfo:
    """
    How the host runs, activates and deactivates an environment.

    ``activation``, ``shell_activation`` and ``deactivation`` are ``None`` when the environment has no activation
    concept, which is distinct from an empty sequence.
    """

    run: CommandRunConfiguration
    activation: Sequence[CommandRunConfiguration] | None = None
    shell_activation: Mapping[str, Sequence[CommandRunConfiguration]] | None = None
    deactivation: Sequence[CommandRunConfiguration] | None = None


@dataclass(**_DC_KW)
class EnvironmentGroupInfo:
    name: str
    description: str | None = None
    tooltip: str | None = None


@dataclass(**_DC_KW)
class PythonEnvironmentInfo:
    """Everything the host needs to materialize an environment item."""

    name: str
    display_name: str
    short_display_name: str
    display_path: str
    version: str
    environment_path: SplitResult
    description: str
    tooltip: str
    exec_info: PythonEnvironmentExecInfo
    sys_prefix: str
    group: EnvironmentGroupInfo | None = None


@dataclass(**_DC_KW)
class EnvironmentManagerInfo:
    """Owner handle used to group environments on the host, it carries no behavior."""

    name: str
    display_name: str
    preferred_package_manager_id: str
    description: str


@dataclass(**_DC_KW)
class PythonEnvironment:
    env_id: str
    manager_id: str
    info: PythonEnvironmentInfo

    @property
    def environment_path(self) -> str:
        return self.info.environment_path.geturl()


@runtime_checkable
class PythonEnvironmentApi(Protocol):
    """The host capability that turns environment info into the host's own environment item."""

    def create_python_environment_item(
        self,
        info: PythonEnvironmentInfo,
        manager: EnvironmentManagerInfo,
    ) -> PythonEnvironment: ...


class DefaultPythonEnvironmentApi(PythonEnvironmentApi):
    """In-process factory building plain :class:`PythonEnvironment` values."""

    def create_python_environment_item(  # noqa: PLR6301
        self,
        info: PythonEnvironmentInfo,
        manager: EnvironmentManagerInfo,
    ) -> PythonEnvironment:
        return PythonEnvironment(
            env_id=info.environment_path.geturl(),
            manager_id=manager.name,
            info=info,
        )


WSL_MANAGER = EnvironmentManagerInfo(
    name="wsl",
    display_name="WSL",
    preferred_package_manager_id="ms-python.python:pip",
    description="Windows Subsystem for Linux Python environments",
)

__all__ = [
    "WSL_MANAGER",
    "CommandRunConfiguration",
    "DefaultPythonEnvironmentApi",
    "EnvironmentGroupInfo",
    "EnvironmentManagerInfo",
    "PythonEnvironment",
    "PythonEnvironmentApi",
    "PythonEnvironmentExecInfo",
    "PythonEnvironmentInfo",
]
