"""Convert persisted WSL records into host environments, including how to run and activate them."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final
from urllib.parse import urlsplit

from ._environment import (
    CommandRunConfiguration,
    EnvironmentGroupInfo,
    PythonEnvironmentExecInfo,
    PythonEnvironmentInfo,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from urllib.parse import SplitResult

    from ._environment import EnvironmentManagerInfo, PythonEnvironment, PythonEnvironmentApi
    from ._record import EnvironmentRecord

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
WSL_LAUNCHER: Final[str] = "wsl.exe"


class ActivationScript(Enum):
    """Flavours of the activation scripts a virtual environment ships in its ``bin`` folder."""

    POSIX = ("source", "activate")
    FISH = ("source", "activate.fish")
    POWERSHELL = (".", "Activate.ps1")

    def __init__(self, command: str, script: str) -> None:
        self.command = command
        self.script = script

    def run_config(self, venv_path: str) -> CommandRunConfiguration:
        return CommandRunConfiguration(self.command, (f"{venv_path}/bin/{self.script}",))


class Shell(Enum):
    """Shells with their own activation entry, the value is the key the host looks up."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    PWSH = "pwsh"
    UNKNOWN = "unknown"


# unknown shells get the POSIX script
SHELL_ACTIVATION_SCRIPTS: Final[Mapping[Shell, ActivationScript]] = MappingProxyType({
    Shell.BASH: ActivationScript.POSIX,
    Shell.ZSH: ActivationScript.POSIX,
    Shell.FISH: ActivationScript.FISH,
    Shell.PWSH: ActivationScript.POWERSHELL,
    Shell.UNKNOWN: ActivationScript.POSIX,
})


def parse_environment_uri(key: str) -> SplitResult:
    """
    Interpret an identity key such as ``wsl:Ubuntu:/usr/bin/python3`` as a URI, scheme ``wsl``.

    The key must survive parsing unchanged, so keys holding characters the URI parser drops are rejected.
    """
    uri = urlsplit(key)
    if not uri.scheme or not uri.path or uri.geturl() != key:
        msg = f"environment key {key!r} is not a valid URI"
        raise ValueError(msg)
    return uri


def _launch(distro: str, *args: str) -> CommandRunConfiguration:
    return CommandRunConfiguration(WSL_LAUNCHER, ("-d", distro, "--", *args))


def build_exec_info(record: EnvironmentRecord) -> PythonEnvironmentExecInfo:
    distro = record["distro"]
    run = _launch(distro, record["wslPath"])
    if record["type"] != "venv":
        return PythonEnvironmentExecInfo(run=run)

    venv_path = record["venvPath"]
    activate_script = f"{venv_path}/bin/{ActivationScript.POSIX.script}"
    return PythonEnvironmentExecInfo(
        run=run,
        activation=[_launch(distro, "bash", "-c", f'source "{activate_script}"')],
        shell_activation={
            shell.value: [script.run_config(venv_path)] for shell, script in SHELL_ACTIVATION_SCRIPTS.items()
        },
        deactivation=[CommandRunConfiguration("deactivate")],
    )


def build_environment_info(record: EnvironmentRecord, key: str) -> PythonEnvironmentInfo:
    distro, wsl_path, name = record["distro"], record["wslPath"], record["name"]
    workspace = record.get("workspacePath") or "N/A"
    return PythonEnvironmentInfo(
        name=name,
        display_name=f"{name} (WSL: {distro})",
        short_display_name=name,
        display_path=wsl_path,
        version=record.get("pythonVersion") or "Unknown",
        environment_path=parse_environment_uri(key),
        description=f"WSL {record['type']} environment in {distro}",
        tooltip=f"WSL Path: {wsl_path}\nDistro: {distro}\nWorkspace: {workspace}",
        exec_info=build_exec_info(record),
        sys_prefix=record["sysPrefix"],
        group=EnvironmentGroupInfo(
            name="WSL",
            description=f"Windows Subsystem for Linux ({distro})",
            tooltip="Python environments running in WSL",
        ),
    )


class WslEnvironmentConverter:
    """Turn :class:`EnvironmentRecord` values into host environments owned by ``manager``."""

    def __init__(self, api: PythonEnvironmentApi, manager: EnvironmentManagerInfo) -> None:
        self._api = api
        self._manager = manager

    def convert(self, record: EnvironmentRecord, key: str) -> PythonEnvironment | None:
        """Return the host environment for ``record``, or ``None`` if it cannot be built."""
        try:
            info = build_environment_info(record, key)
            return self._api.create_python_environment_item(info, self._manager)
        except Exception:  # noqa: BLE001
            _LOGGER.exception("failed to convert WSL environment %s", key)
            return None


__all__ = [
    "SHELL_ACTIVATION_SCRIPTS",
    "WSL_LAUNCHER",
    "ActivationScript",
    "Shell",
    "WslEnvironmentConverter",
    "build_environment_info",
    "build_exec_info",
    "parse_environment_uri",
]
