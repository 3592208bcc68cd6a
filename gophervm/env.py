"""Access to environment variables through swappable providers."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvProvider(Protocol):
    """Anything that can look up an environment variable by name."""

    def getenv(self, key: str) -> str:
        """Return the value of ``key``, or an empty string when unset."""
        ...


class DefaultProvider:
    """Provider backed by the process environment."""

    def getenv(self, key: str) -> str:
        """Return the value of ``key`` from ``os.environ``, or ``""``."""
        return os.environ.get(key, "")


class MockProvider:
    """In-memory provider, useful for tests and isolated lookups."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: dict[str, str] = dict(env or {})

    def getenv(self, key: str) -> str:
        """Return the stored value of ``key``, or ``""`` when absent."""
        return self._env.get(key, "")

    def setenv(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._env[key] = value

    def clear(self) -> None:
        """Remove every stored variable."""
        self._env = {}