from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from wsl_discovery import SUPPORTED_VERSION, WslPersistenceStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from wsl_discovery import EnvironmentRecord


def _make_record(**kwargs: Any) -> EnvironmentRecord:
    record: dict[str, Any] = {
        "distro": "Ubuntu-22.04",
        "wslPath": "/mnt/c/w/.venv/bin/python",
        "venvPath": "/mnt/c/w/.venv",
        "workspacePath": "c:\\w",
        "name": ".venv",
        "type": "venv",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "lastUsed": "2024-05-02T10:00:00.000Z",
        "pythonVersion": "3.11.4",
        "sysPrefix": "/mnt/c/w/.venv",
    }
    record.update(kwargs)
    return record  # type: ignore[return-value]


@pytest.fixture
def make_record() -> Callable[..., EnvironmentRecord]:
    return _make_record


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    return tmp_path / "storage" / "wsl-environments.json"


@pytest.fixture
def write_store(store_file: Path) -> Callable[..., Path]:
    def _write(
        environments: dict[str, Any],
        workspace_mapping: dict[str, list[str]] | None = None,
        version: str = SUPPORTED_VERSION,
    ) -> Path:
        store_file.parent.mkdir(parents=True, exist_ok=True)
        content = {"version": version, "environments": environments, "workspaceMapping": workspace_mapping or {}}
        store_file.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return store_file

    return _write


@pytest.fixture
def store(store_file: Path) -> WslPersistenceStore:
    return WslPersistenceStore(store_file)
