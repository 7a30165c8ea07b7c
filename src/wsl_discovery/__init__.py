"""Read-only discovery of WSL Python environments recorded in a shared persistence file."""

from __future__ import annotations

from importlib.metadata import version

from ._compat import normalize_path
from ._convert import ActivationScript, Shell, WslEnvironmentConverter
from ._discovery import WslEnvironmentDiscovery
from ._environment import (
    WSL_MANAGER,
    CommandRunConfiguration,
    DefaultPythonEnvironmentApi,
    EnvironmentGroupInfo,
    EnvironmentManagerInfo,
    PythonEnvironment,
    PythonEnvironmentApi,
    PythonEnvironmentExecInfo,
    PythonEnvironmentInfo,
)
from ._persistence import WslPersistenceStore, default_store_path
from ._record import SUPPORTED_VERSION, EnvironmentRecord, PersistenceDocument, env_key

__version__ = version("wsl-discovery")

__all__ = [
    "SUPPORTED_VERSION",
    "WSL_MANAGER",
    "ActivationScript",
    "CommandRunConfiguration",
    "DefaultPythonEnvironmentApi",
    "EnvironmentGroupInfo",
    "EnvironmentManagerInfo",
    "EnvironmentRecord",
    "PersistenceDocument",
    "PythonEnvironment",
    "PythonEnvironmentApi",
    "PythonEnvironmentExecInfo",
    "PythonEnvironmentInfo",
    "Shell",
    "WslEnvironmentConverter",
    "WslEnvironmentDiscovery",
    "WslPersistenceStore",
    "__version__",
    "default_store_path",
    "env_key",
    "normalize_path",
]
