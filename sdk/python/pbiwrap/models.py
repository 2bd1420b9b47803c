"""Lightweight response models for the powerbi CLI wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypedDict


class ResponseKind(str, Enum):
    """Which extraction to apply to raw CLI output."""

    REPORTS = "reports"
    DATASETS = "datasets"
    IMPORT = "import"
    CREATE_WORKSPACE = "createWorkspace"
    WORKSPACES = "workspaces"
    CREATE_TOKEN = "createToken"


class ResourceSummary(TypedDict):
    id: str
    name: str


class ImportResult(TypedDict):
    id: str


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a single powerbi invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0
