"""
ABOUTME: Typed environment variable retrieval with selectable absence policies
ABOUTME: Provides get plus the require, with_default and optional shortcuts
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from .accessor import EnvironSource, resolve_accessor
from .exceptions import MissingError, ParseError
from .parsers import Parser, convert, parser_for
from .policy import OPTIONAL, REQUIRED, AbsencePolicy, Default, OptionalPolicy, RequiredPolicy

T = TypeVar("T")

# Parsers signal malformed input with these; anything else is a bug and propagates.
PARSE_FAILURES = (ValueError, TypeError, ArithmeticError)


def get(
    name: str,
    policy: AbsencePolicy,
    kind: Callable[..., T] = str,
    *,
    parser: Optional[Parser] = None,
    environ: EnvironSource = None,
) -> Optional[T]:
    """
    Read ``name`` from the environment and convert it to ``kind``.

    A set variable is always parsed, whatever the policy. The policy only
    decides what happens when the variable is not set.

    Parameters:
        name (str): Variable name to look up.
        policy (AbsencePolicy): OPTIONAL, REQUIRED or Default(value).
        kind (type): Target type. Defaults to str.
        parser (callable, optional): Overrides the string parser registered for ``kind``.
        environ (EnvironmentAccessor or Mapping, optional): Where to look. Defaults to os.environ.

    Returns:
        The parsed value, the converted default, or None under OPTIONAL.

    Raises:
        MissingError: The variable is not set and the policy is REQUIRED.
        ParseError: The variable is set but could not be parsed.
        ValueError, TypeError: The variable is not set and the Default value cannot
            be converted into ``kind``. This is a caller error, not an environment one.
    """
    raw = resolve_accessor(environ).lookup(name)

    if raw is None:
        if isinstance(policy, OptionalPolicy):
            logging.debug(f"Optional environment variable '{name}' not set")
            return None
        if isinstance(policy, RequiredPolicy):
            logging.debug(f"Required environment variable '{name}' not set")
            raise MissingError(name)
        if isinstance(policy, Default):
            logging.debug(f"Environment variable '{name}' not set, using default")
            return convert(policy.value, kind)
        raise TypeError(f"Unsupported absence policy: {policy!r}")

    parse = parser if parser is not None else parser_for(kind)
    try:
        return parse(raw)
    except PARSE_FAILURES as e:
        # The parser's message can echo the raw value, keep it out of the log.
        logging.debug(
            f"Could not parse environment variable '{name}' as {getattr(kind, '__name__', kind)}"
        )
        raise ParseError(name, e) from e


def require(
    name: str,
    kind: Callable[..., T] = str,
    *,
    parser: Optional[Parser] = None,
    environ: EnvironSource = None,
) -> T:
    """Read a variable that must be set."""
    return get(name, REQUIRED, kind, parser=parser, environ=environ)


def with_default(
    name: str,
    default: Any,
    kind: Optional[Callable[..., T]] = None,
    *,
    parser: Optional[Parser] = None,
    environ: EnvironSource = None,
) -> T:
    """
    Read a variable, falling back to ``default`` when it is not set.

    ``kind`` defaults to the type of ``default``, so ``with_default("PORT", 8080)``
    reads an int. A set but malformed value still raises ParseError.
    """
    if kind is None:
        kind = type(default)
    return get(name, Default(default), kind, parser=parser, environ=environ)


def optional(
    name: str,
    kind: Callable[..., T] = str,
    *,
    parser: Optional[Parser] = None,
    environ: EnvironSource = None,
) -> Optional[T]:
    """Read a variable that may be unset, returning None in that case."""
    return get(name, OPTIONAL, kind, parser=parser, environ=environ)
