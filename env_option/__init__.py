"""
ABOUTME: Typed environment variable retrieval with fail, optional and default policies
ABOUTME: Provides absence policies, environment accessors, string parsers and error types
"""

__version__ = "0.1.0"

from .accessor import EnvironmentAccessor, MappingEnvironment, ProcessEnvironment
from .config import get, optional, require, with_default
from .exceptions import EnvOptionError, MissingError, ParseError
from .parsers import convert, parser_for, register_parser
from .policy import OPTIONAL, REQUIRED, AbsencePolicy, Default

__all__ = [
    "get",
    "require",
    "with_default",
    "optional",
    "AbsencePolicy",
    "Default",
    "OPTIONAL",
    "REQUIRED",
    "EnvOptionError",
    "MissingError",
    "ParseError",
    "EnvironmentAccessor",
    "ProcessEnvironment",
    "MappingEnvironment",
    "parser_for",
    "register_parser",
    "convert",
]
