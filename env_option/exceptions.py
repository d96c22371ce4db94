"""
ABOUTME: Exception classes raised when reading typed environment variables
ABOUTME: Separates required-but-missing variables from present-but-unparseable ones
"""

from typing import Optional


class EnvOptionError(Exception):
    """Base error for environment variable retrieval."""

    description = "environment variable error"

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name

    @property
    def cause(self) -> Optional[BaseException]:
        """The underlying error, if any."""
        return None


class MissingError(EnvOptionError):
    """A required environment variable is not set."""

    description = "variable is required"

    def __init__(self, name: str):
        super().__init__(name, f"{name} not found")

    def __reduce__(self):
        return (self.__class__, (self.name,))


class ParseError(EnvOptionError):
    """An environment variable is set but could not be converted."""

    description = "parse error"

    def __init__(self, name: str, cause: BaseException):
        super().__init__(name, f"parsing {name}: {cause}")
        self._cause = cause
        self.__cause__ = cause

    def __reduce__(self):
        return (self.__class__, (self.name, self._cause))

    @property
    def cause(self) -> BaseException:
        return self._cause
