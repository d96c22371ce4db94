"""
ABOUTME: String parsers and default-value conversion for typed environment variables
ABOUTME: Maps each target type to the function that turns a raw string into that type
"""

from typing import Any, Callable, Dict

Parser = Callable[[str], Any]

_TRUE = "true"
_FALSE = "false"


def parse_bool(value: str) -> bool:
    """Parse exactly ``"true"`` or ``"false"``."""
    if value == _TRUE:
        return True
    if value == _FALSE:
        return False
    raise ValueError(f"provided string was not `true` or `false`: {value!r}")


_PARSERS: Dict[type, Parser] = {
    bool: parse_bool,
}


def register_parser(kind: type, func: Parser) -> None:
    """Use ``func`` to parse raw strings into ``kind``, replacing any earlier parser."""
    _PARSERS[kind] = func


def parser_for(kind: Callable[..., Any]) -> Parser:
    """
    Return the string parser for ``kind``.

    Registered parsers win; any other type parses by calling the type on the
    raw string, as ``int``, ``float``, ``Decimal`` and ``Path`` do. A plain
    callable is used as the parser itself.
    """
    if isinstance(kind, type):
        return _PARSERS.get(kind, kind)
    return kind


def convert(value: Any, kind: Callable[..., Any]) -> Any:
    """
    Convert a default value into ``kind``.

    Values whose exact type is ``kind`` are returned unchanged. String defaults for types with
    a registered parser go through that parser, so ``Default("false")`` yields
    ``False`` for ``bool``.
    """
    if not isinstance(kind, type):
        return value
    # bool subclasses int, so True must still become 1 for an int target.
    if type(value) is kind:
        return value
    if isinstance(value, str) and kind in _PARSERS:
        return _PARSERS[kind](value)
    return kind(value)
