"""
ABOUTME: Absence policies for environment variable lookups
ABOUTME: Decides whether an unset variable yields None, an error, or a default value
"""

from typing import Any


class AbsencePolicy:
    """What to do when a variable is not set."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class OptionalPolicy(AbsencePolicy):
    """Absence is not an error; the lookup yields None."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OptionalPolicy)

    def __hash__(self) -> int:
        return hash(OptionalPolicy)


class RequiredPolicy(AbsencePolicy):
    """Absence raises MissingError."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RequiredPolicy)

    def __hash__(self) -> int:
        return hash(RequiredPolicy)


class Default(AbsencePolicy):
    """
    Absence substitutes a caller-supplied value.

    The value is converted into the target type only when it is used, so a
    textual or integer literal can stand in for the target type.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        object.__setattr__(self, "value", value)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Default) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Default, self.value))

    def __repr__(self) -> str:
        return f"Default({self.value!r})"


OPTIONAL = OptionalPolicy()
REQUIRED = RequiredPolicy()
