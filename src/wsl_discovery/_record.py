"""Wire shapes of the shared WSL environment persistence file."""

from __future__ import annotations

from typing import Final, Literal, TypedDict

ENV_KEY_NAMESPACE: Final[str] = "wsl"
SUPPORTED_VERSION: Final[str] = "1.0"

EnvironmentType = Literal["venv", "system", "other"]


class _RequiredRecordFields(TypedDict):
    distro: str
    wslPath: str  # noqa: N815
    venvPath: str  # noqa: N815
    name: str
    type: EnvironmentType
    createdAt: str  # noqa: N815
    lastUsed: str  # noqa: N815
    sysPrefix: str  # noqa: N815


class EnvironmentRecord(_RequiredRecordFields, total=False):
    """
    A WSL interpreter as recorded by the producer.

    Keys mirror the JSON written by the producer; ``wslPath``, ``venvPath`` and ``sysPrefix`` use the distribution's
    POSIX path syntax (e.g. ``/mnt/c/workspace/.venv/bin/python``) while ``workspacePath`` is a Windows path.
    """

    workspacePath: str  # noqa: N815
    pythonVersion: str  # noqa: N815


class PersistenceDocument(TypedDict):
    """Top level object of the persistence file."""

    version: str
    environments: dict[str, EnvironmentRecord]
    workspaceMapping: dict[str, list[str]]  # noqa: N815


def env_key(record: EnvironmentRecord) -> str:
    """Identity of a record: ``wsl:<distro>:<wslPath>``, shared with the producer."""
    return f"{ENV_KEY_NAMESPACE}:{record['distro']}:{record['wslPath']}"


def empty_document() -> PersistenceDocument:
    return {"version": SUPPORTED_VERSION, "environments": {}, "workspaceMapping": {}}


def validate_document(data: object) -> PersistenceDocument:
    """Check the top level shape of a parsed persistence file, raising :class:`ValueError` when it does not fit."""
    if not isinstance(data, dict):
        msg = f"persistence document must be an object, got {type(data).__name__}"
        raise ValueError(msg)  # noqa: TRY004
    for field in ("environments", "workspaceMapping"):
        if not isinstance(data.get(field, {}), dict):
            msg = f"persistence document field {field!r} must be an object"
            raise ValueError(msg)  # noqa: TRY004
    return {
        "version": data.get("version"),
        "environments": data.get("environments", {}),
        "workspaceMapping": data.get("workspaceMapping", {}),
    }


__all__ = [
    "ENV_KEY_NAMESPACE",
    "SUPPORTED_VERSION",
    "EnvironmentRecord",
    "EnvironmentType",
    "PersistenceDocument",
    "empty_document",
    "env_key",
    "validate_document",
]
