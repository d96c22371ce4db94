"""
ABOUTME: Command-line check for typed environment variables
ABOUTME: Reports which variables are set, defaulted, missing or malformed
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .accessor import MappingEnvironment, ProcessEnvironment
from .config import PARSE_FAILURES, get
from .exceptions import EnvOptionError, MissingError
from .parsers import convert
from .policy import OPTIONAL, REQUIRED, Default

console = Console()
err_console = Console(stderr=True)

TYPES = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "decimal": Decimal,
    "path": Path,
}

MASK = "****"

STATUS_STYLES = {
    "set": "green",
    "default": "cyan",
    "unset": "dim",
    "missing": "bold red",
    "invalid": "bold red",
}


def variable_spec(text: str) -> tuple[str, str]:
    """Parse a ``NAME[:TYPE]`` argument."""
    name, _, type_name = text.partition(":")
    type_name = type_name or "str"
    if not name:
        raise argparse.ArgumentTypeError(f"missing variable name in '{text}'")
    if type_name not in TYPES:
        raise argparse.ArgumentTypeError(
            f"unknown type '{type_name}' (choose from {', '.join(TYPES)})"
        )
    return name, type_name


def default_spec(text: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` argument."""
    name, sep, value = text.partition("=")
    if not name or not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    return name, value


def load_environment(env_file: Path) -> None:
    """Load ``env_file`` into the process environment if it exists."""
    if env_file.exists():
        load_dotenv(env_file)
        logging.debug(f"Loaded environment from {env_file}")
    else:
        logging.debug(f"No {env_file} file found, using system environment variables")


def cli() -> argparse.Namespace:
    """
    Parse and return command-line arguments for the environment check.

    Returns:
        argparse.Namespace: Variables to check, per-variable policies and output options.
    """
    p = argparse.ArgumentParser(
        description="Check that typed environment variables are set and parse correctly"
    )
    p.add_argument(
        "variables",
        nargs="+",
        type=variable_spec,
        metavar="NAME[:TYPE]",
        help=f"Variable to check; TYPE is one of {', '.join(TYPES)} (default str)",
    )
    p.add_argument(
        "--optional",
        action="append",
        default=[],
        metavar="NAME",
        help="Treat NAME as optional instead of required",
    )
    p.add_argument(
        "--default",
        action="append",
        default=[],
        type=default_spec,
        metavar="NAME=VALUE",
        help="Use VALUE when NAME is not set",
    )
    p.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="dotenv file loaded before checking, if present",
    )
    p.add_argument(
        "--reveal",
        action="store_true",
        help="Show values instead of masking them",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format instead of a rich console table",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"env-option {__version__}",
    )
    return p.parse_args()


def check_variable(name: str, type_name: str, policy, environ) -> dict:
    """
    Retrieve one variable and describe the outcome.

    Returns:
        dict: name, type, policy, status, value (None when there is none) and error.
    """
    result = {
        "name": name,
        "type": type_name,
        "policy": policy_label(policy),
        "status": None,
        "value": None,
        "error": None,
    }
    raw = environ.lookup(name)
    present = raw is not None
    snapshot = MappingEnvironment({name: raw} if present else {})
    try:
        value = get(name, policy, TYPES[type_name], environ=snapshot)
    except MissingError as e:
        result["status"] = "missing"
        result["error"] = str(e)
        return result
    except EnvOptionError as e:
        result["status"] = "invalid"
        result["error"] = str(e)
        return result

    if present:
        result["status"] = "set"
    elif value is None:
        result["status"] = "unset"
    else:
        result["status"] = "default"
    result["value"] = None if value is None else str(value)
    return result


def policy_label(policy) -> str:
    if policy is REQUIRED:
        return "required"
    if policy is OPTIONAL:
        return "optional"
    return "default"


def build_policies(a: argparse.Namespace, parser_error) -> dict:
    """Map each checked name to its absence policy."""
    types = dict(a.variables)
    policies = {name: REQUIRED for name in types}
    for name in a.optional:
        if name not in types:
            parser_error(f"--optional {name}: variable is not being checked")
        policies[name] = OPTIONAL
    for name, raw_default in a.default:
        if name not in types:
            parser_error(f"--default {name}: variable is not being checked")
        try:
            policies[name] = Default(convert(raw_default, TYPES[types[name]]))
        except PARSE_FAILURES as e:
            parser_error(f"--default {name}: {e}")
    return policies


def render_table(results: list[dict], reveal: bool) -> None:
    table = Table(
        title="Environment Variables", show_header=True, header_style="bold magenta"
    )
    table.add_column("Variable", style="cyan")
    table.add_column("Type")
    table.add_column("Policy")
    table.add_column("Status")
    table.add_column("Value")

    for r in results:
        status = r["status"]
        if r["error"]:
            shown = r["error"]
        elif r["value"] is None:
            shown = ""
        else:
            shown = r["value"] if reveal else MASK
        table.add_row(
            escape(r["name"]),
            r["type"],
            r["policy"],
            f"[{STATUS_STYLES[status]}]{status}[/]",
            escape(shown),
        )

    console.print(table)


def render_json(results: list[dict], reveal: bool) -> None:
    if not reveal:
        for r in results:
            if r["value"] is not None:
                r["value"] = MASK
    print(json.dumps(results, indent=2))


def main():
    """
    Execute the environment check.

    Parses arguments, configures logging, loads the dotenv file and checks each
    variable. Exits with status 1 if any variable is missing or malformed.
    """
    a = cli()

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    def parser_error(message):
        err_console.print(f"❌ {escape(message)}")
        sys.exit(2)

    try:
        load_environment(a.env_file)
        policies = build_policies(a, parser_error)
        environ = ProcessEnvironment()
        results = [
            check_variable(name, type_name, policies[name], environ)
            for name, type_name in a.variables
        ]
    except KeyboardInterrupt:
        err_console.print("\n❌ Interrupted by user")
        sys.exit(1)

    if a.json:
        render_json(results, a.reveal)
    else:
        render_table(results, a.reveal)

    failed = [r for r in results if r["status"] in ("missing", "invalid")]
    if failed:
        logging.info(f"{len(failed)} of {len(results)} variables failed")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
