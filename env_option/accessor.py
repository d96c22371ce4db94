"""
ABOUTME: Environment accessors that map a variable name to its raw string value
ABOUTME: Reads the live process environment or an injected mapping
"""

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Union


class EnvironmentAccessor(ABC):
    """Abstract source of raw environment values."""

    @abstractmethod
    def lookup(self, name: str) -> Optional[str]:
        """
        Return the raw value stored under ``name``.

        Returns:
            Optional[str]: The raw string, or None if the name is not set. An
            empty string is a value, not an absence.
        """
        pass


class ProcessEnvironment(EnvironmentAccessor):
    """Reads ``os.environ`` at lookup time."""

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment(EnvironmentAccessor):
    """Reads an injected mapping of names to raw strings."""

    def __init__(self, environ: Mapping[str, str]):
        self._environ = environ

    def lookup(self, name: str) -> Optional[str]:
        return self._environ.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment({len(self._environ)} variables)"


EnvironSource = Union[EnvironmentAccessor, Mapping[str, str], None]


def resolve_accessor(environ: EnvironSource = None) -> EnvironmentAccessor:
    """Return an accessor for ``environ``, defaulting to the process environment."""
    if environ is None:
        return ProcessEnvironment()
    if isinstance(environ, EnvironmentAccessor):
        return environ
    return MappingEnvironment(environ)
