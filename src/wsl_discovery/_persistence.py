"""Read-only access to the WSL environment persistence file shared with the producer."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import TYPE_CHECKING, Final

from platformdirs import user_data_path

from ._compat import normalize_path
from ._record import SUPPORTED_VERSION, empty_document, validate_document

if TYPE_CHECKING:
    from ._record import EnvironmentRecord, PersistenceDocument

_LOGGER: Final[logging.Logger] = logging.getLogger(__name__)
APP_NAME: Final[str] = "vscode-python"
STORE_FILE_NAME: Final[str] = "wsl-environments.json"


def default_store_path() -> Path:
    """
    Location of the persistence file when the host does not supply one.

    ``%APPDATA%\\vscode-python`` on Windows, ``~/Library/Application Support/vscode-python`` on macOS and
    ``$XDG_DATA_HOME/vscode-python`` elsewhere.
    """
    return user_data_path(APP_NAME, appauthor=False, roaming=True) / STORE_FILE_NAME


class WslPersistenceStore:
    """
    Cached, read-only view of the persistence file.

    The file is owned by an external producer; this class never writes it. The parsed document is cached on first use
    and kept until :meth:`clear_cache` is called.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            self._path = default_store_path()
            _LOGGER.info("using fallback persistence file %s", self._path)
        else:
            self._path = Path(path)
        self._cache: PersistenceDocument | None = None

    @classmethod
    def from_storage_dir(cls, folder: Path | str) -> WslPersistenceStore:
        """Store backed by ``wsl-environments.json`` inside the host's global storage folder."""
        return cls(Path(folder) / STORE_FILE_NAME)

    @property
    def store_path(self) -> Path:
        return self._path

    def get_store_path(self) -> str:
        return str(self._path)

    def get_all_environments(self) -> dict[str, EnvironmentRecord]:
        return {key: deepcopy(record) for key, record in self._load()["environments"].items()}

    def get_workspace_environments(self, workspace_path: str) -> list[EnvironmentRecord]:
        data = self._load()
        normalized = normalize_path(workspace_path)
        env_keys = data["workspaceMapping"].get(normalized)
        if not isinstance(env_keys, list):
            env_keys = []
        _LOGGER.debug("workspace %s normalized to %s maps %d environment(s)", workspace_path, normalized, len(env_keys))
        environments: list[EnvironmentRecord] = []
        for key in env_keys:
            if isinstance(key, str) and (record := data["environments"].get(key)) is not None:
                environments.append(deepcopy(record))
            else:
                _LOGGER.debug("environment %s listed for workspace %s is not recorded", key, normalized)
        return environments

    def get_environment(self, key: str) -> EnvironmentRecord | None:
        record = self._load()["environments"].get(key)
        return None if record is None else deepcopy(record)

    def has_environment(self, key: str) -> bool:
        return key in self._load()["environments"]

    def clear_cache(self) -> None:
        self._cache = None

    def _load(self) -> PersistenceDocument:
        if self._cache is not None:
            return self._cache
        try:
            document = self._read()
        except (OSError, ValueError, RecursionError):
            _LOGGER.error("failed to load persistence file %s", self._path, exc_info=True)  # noqa: G201
            return empty_document()
        if document is None:
            return empty_document()
        self._cache = document
        _LOGGER.info("loaded %d WSL environment(s) from %s", len(document["environments"]), self._path)
        return document

    def _read(self) -> PersistenceDocument | None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            _LOGGER.info("persistence file %s does not exist", self._path)
            return None
        document = validate_document(json.loads(self._path.read_text(encoding="utf-8")))
        if document["version"] != SUPPORTED_VERSION:
            _LOGGER.info(
                "persistence file %s has version %r, expected %r, ignoring it",
                self._path,
                document["version"],
                SUPPORTED_VERSION,
            )
            return None
        return document


__all__ = [
    "APP_NAME",
    "STORE_FILE_NAME",
    "WslPersistenceStore",
    "default_store_path",
]
