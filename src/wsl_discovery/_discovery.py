"""Discover WSL Python environments recorded in the shared persistence file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from ._convert import WslEnvironmentConverter
from ._environment import WSL_MANAGER, DefaultPythonEnvironmentApi
from ._record import env_key

if TYPE_CHECKING:
    from ._environment import EnvironmentManagerInfo, PythonEnvironment, PythonEnvironmentApi
    from ._persistence import WslPersistenceStore

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)


class WslEnvironmentDiscovery:
    """
    Read-only discovery of WSL environments.

    Each record is converted on its own: a record that fails to convert is logged and skipped so the remaining ones
    are still reported, and a failure to load the store yields an empty result.
    """

    def __init__(
        self,
        store: WslPersistenceStore,
        api: PythonEnvironmentApi | None = None,
        manager: EnvironmentManagerInfo = WSL_MANAGER,
    ) -> None:
        self._store = store
        self._converter = WslEnvironmentConverter(api or DefaultPythonEnvironmentApi(), manager)

    def discover_environments(self) -> list[PythonEnvironment]:
        try:
            records = self._store.get_all_environments()
        except Exception:  # noqa: BLE001
            _LOGGER.exception("failed to discover WSL environments from %s", self._store.get_store_path())
            return []
        _LOGGER.debug("found %d WSL environment(s) in %s", len(records), self._store.get_store_path())
        environments: list[PythonEnvironment] = []
        for key, record in records.items():
            if (environment := self._converter.convert(record, key)) is not None:
                environments.append(environment)
            else:
                _LOGGER.info("skipped WSL environment %s", key)
        _LOGGER.info("discovered %d WSL environment(s)", len(environments))
        return environments

    def get_workspace_environments(self, workspace_path: str) -> list[PythonEnvironment]:
        try:
            records = self._store.get_workspace_environments(workspace_path)
        except Exception:  # noqa: BLE001
            _LOGGER.exception("failed to get WSL environments for workspace %s", workspace_path)
            return []
        environments: list[PythonEnvironment] = []
        for record in records:
            try:
                key = env_key(record)
            except (KeyError, TypeError):
                _LOGGER.error("skipped unidentifiable WSL environment in %s", workspace_path)  # noqa: TRY400
                continue
            if (environment := self._converter.convert(record, key)) is not None:
                environments.append(environment)
            else:
                _LOGGER.info("skipped WSL environment %s", key)
        _LOGGER.info("found %d WSL environment(s) for workspace %s", len(environments), workspace_path)
        return environments


__all__ = [
    "WslEnvironmentDiscovery",
]
