"""Command-line front end: ``python -m pbiwrap --param=-c=coll --param=-k=key reports``."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Sequence

from .client import PowerBIWrapper
from .errors import ConfigurationError, ProcessExecutionError
from .settings import CLISettings


def parse_pairs(pairs: Sequence[str] | None) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in pairs or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ConfigurationError(f"expected KEY=VALUE, got {item!r}")
        out[key] = value
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pbiwrap", description="Run powerbi CLI operations and print the parsed result.")
    parser.add_argument("-p", "--param", action="append", metavar="KEY=VALUE", help="Workspace option, e.g. --param=-c=collection")
    parser.add_argument("--binary", help="powerbi executable (default: $POWERBI_CLI_BINARY or powerbi)")
    parser.add_argument("--workdir", help="Working directory for the powerbi process")
    parser.add_argument("--timeout", type=float, help="Seconds before an invocation is abandoned")
    parser.add_argument("--no-apply-config", action="store_true", help="Skip the initial `powerbi config` call")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every invocation to stderr")

    sub = parser.add_subparsers(dest="operation", required=True)
    sub.add_parser("version")
    sub.add_parser("config")
    sub.add_parser("workspaces")
    sub.add_parser("create-workspace")
    sub.add_parser("datasets")
    sub.add_parser("reports")
    delete = sub.add_parser("delete-dataset")
    delete.add_argument("dataset_id")
    imp = sub.add_parser("import")
    imp.add_argument("filepath")
    imp.add_argument("name")
    imp.add_argument("--overwrite", action="store_true")
    imp.add_argument("--import-param", action="append", metavar="KEY=VALUE")
    token = sub.add_parser("create-token")
    token.add_argument("--token-param", action="append", metavar="KEY=VALUE")
    return parser


def resolve_settings(args: argparse.Namespace) -> CLISettings:
    settings = CLISettings.from_env()
    overrides: dict[str, Any] = {}
    if args.binary:
        overrides["binary"] = args.binary
    if args.workdir:
        overrides["working_dir"] = args.workdir
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    return dataclasses.replace(settings, **overrides)


def dispatch(wrapper: PowerBIWrapper, args: argparse.Namespace) -> Any:
    op = args.operation
    if op == "version":
        return wrapper.version()
    if op == "config":
        return wrapper.config()
    if op == "workspaces":
        return wrapper.workspaces()
    if op == "create-workspace":
        return wrapper.create_workspace()
    if op == "datasets":
        return wrapper.datasets()
    if op == "reports":
        return wrapper.reports()
    if op == "delete-dataset":
        return wrapper.delete_dataset(args.dataset_id)
    if op == "import":
        return wrapper.import_file(parse_pairs(args.import_param), args.filepath, args.name, overwrite=args.overwrite)
    return wrapper.create_token(parse_pairs(args.token_param))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        wrapper = PowerBIWrapper(
            parse_pairs(args.param),
            settings=resolve_settings(args),
            apply_config=not args.no_apply_config,
        )
        result = dispatch(wrapper, args)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ProcessExecutionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return exc.returncode if exc.returncode and exc.returncode > 0 else 1

    if isinstance(result, str):
        print(result.rstrip("\n"))
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
