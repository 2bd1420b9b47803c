"""High-level operations over the powerbi CLI."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from . import cli
from .errors import ConfigurationError
from .models import ImportResult, ResourceSummary, ResponseKind
from .parser import Parsed, parse_response
from .settings import CLISettings

logger = logging.getLogger(__name__)


class PowerBIWrapper:
    """Workspace collection bound to one set of powerbi options.

    ``params`` maps CLI flags to values, e.g. ``{"-c": "collection",
    "-k": "access-key", "-w": "workspace-id"}``. They are rendered once into
    ``command`` and appended to every call that needs workspace context.
    """

    def __init__(
        self,
        params: Mapping[str, Any],
        *,
        settings: CLISettings | None = None,
        runner: cli.CommandRunner | None = None,
        apply_config: bool = True,
    ) -> None:
        if not params:
            raise ConfigurationError("Nothing to set! Your config params are empty!")
        self.params = dict(params)
        self.settings = settings or CLISettings()
        self.runner = runner or cli.SubprocessRunner(self.settings)
        self.command_args: tuple[str, ...] = tuple(cli.format_args(self.params))
        self.command = cli.format_input(self.params)
        if apply_config:
            self.execute(["config", *self.command_args])

    def version(self) -> str:
        return parse_response(self.execute(["-V"]))

    def config(self) -> str:
        """Return every configured value, as printed by the CLI."""

        return self.execute(["config"])

    def workspaces(self) -> list[str]:
        return parse_response(self.execute(["get-workspaces"]), ResponseKind.WORKSPACES)

    def create_workspace(self) -> list[str]:
        return parse_response(self.execute(["create-workspace"]), ResponseKind.CREATE_WORKSPACE)

    def datasets(self) -> list[ResourceSummary]:
        return parse_response(self.execute(["get-datasets", *self.command_args]), ResponseKind.DATASETS)

    def delete_dataset(self, dataset_id: str) -> str:
        """Delete a dataset and any reports linked to it."""

        return self.execute(["delete-dataset", *self.command_args, "-d", str(dataset_id)])

    def reports(self) -> list[ResourceSummary]:
        return parse_response(self.execute(["get-reports", *self.command_args]), ResponseKind.REPORTS)

    def import_file(
        self,
        params: Mapping[str, Any],
        filepath: str,
        name: str,
        overwrite: bool = False,
    ) -> list[ImportResult]:
        """Import a PBIX file into the workspace named in ``params``."""

        args = ["import", "-f", str(filepath), "-n", str(name), *cli.format_args(params)]
        if overwrite:
            args.extend(["-o", "true"])
        logger.info(f"importing {filepath} as {name!r}")
        return parse_response(self.execute(args), ResponseKind.IMPORT)

    def create_token(self, params: Mapping[str, Any]) -> str:
        return parse_response(self.execute(["create-embed-token", *cli.format_args(params)]), ResponseKind.CREATE_TOKEN)

    def execute(self, command: str | Sequence[str]) -> str:
        return cli.execute(command, runner=self.runner)

    @staticmethod
    def format_input(options: Mapping[str, Any]) -> str:
        return cli.format_input(options)

    @staticmethod
    def parse_response(response: str | None, kind: ResponseKind | str | None = None) -> Parsed:
        return parse_response(response, kind)
