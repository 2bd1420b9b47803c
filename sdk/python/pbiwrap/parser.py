"""Extract structured records from powerbi's human-readable output.

Every informational line the CLI prints starts with ``[ powerbi ] ``. The
output is not a machine format, so each extraction is best effort: text that
does not match degrades to an empty result instead of raising.
"""

from __future__ import annotations

import re
from typing import Union

from .models import ImportResult, ResourceSummary, ResponseKind

_RESOURCE_ID = re.compile(r"\[ powerbi \] ID: (.*) \|")
_RESOURCE_NAME = re.compile(r"Name: (.*)")
_IMPORT_ID = re.compile(r"\[ powerbi \] Import ID: (.*)")
_WORKSPACE_CREATED = re.compile(r"\[ powerbi \] Workspace created:(.*)")
_EMBED_TOKEN = re.compile(r"\[ powerbi \] Embed Token: (.*)")
_SEPARATOR = re.compile(r"^\[ powerbi \] =+\s*$")
_MARKER_LINE = re.compile(r"^\[ powerbi \] (.*)$")

Parsed = Union[str, list]


def parse_resources(response: str) -> list[ResourceSummary]:
    """Pair the i-th ``ID: x |`` with the i-th ``Name: y``."""

    ids = _RESOURCE_ID.findall(response)
    names = _RESOURCE_NAME.findall(response)
    records: list[ResourceSummary] = []
    for index, resource_id in enumerate(ids):
        name = names[index].strip() if index < len(names) else ""
        records.append({"id": resource_id.strip(), "name": name})
    return records


def parse_import(response: str) -> list[ImportResult]:
    match = _IMPORT_ID.search(response)
    if match is None:
        return []
    return [{"id": match.group(1).strip()}]


def parse_created_workspaces(response: str) -> list[str]:
    # Captures are returned as printed, including the space after the colon.
    return _WORKSPACE_CREATED.findall(response)


def parse_workspaces(response: str) -> list[str]:
    """Return workspace names listed after the leading ``====`` header block.

    The header is a run of separator lines around at most one banner line,
    e.g. ``====`` / ``Getting workspaces...`` / ``====``. It ends at the first
    separator followed by an entry, and that entry is kept. Separators later
    in the output are skipped.
    """

    entries: list[tuple[bool, str]] = []
    for line in response.splitlines():
        line = line.rstrip("\r")
        match = _MARKER_LINE.match(line)
        if match is None:
            continue
        entries.append((bool(_SEPARATOR.match(line)), match.group(1).strip()))

    start = 0
    banner_seen = False
    while start < len(entries) and entries[start][0]:
        while start < len(entries) and entries[start][0]:
            start += 1
        # One line enclosed by separators is the banner, not a workspace.
        if not banner_seen and start + 1 < len(entries) and entries[start + 1][0]:
            banner_seen = True
            start += 1
            continue
        break

    return [name for is_separator, name in entries[start:] if name and not is_separator]


def parse_token(response: str) -> str:
    match = _EMBED_TOKEN.search(response)
    if match is None:
        return ""
    return match.group(1).strip()


def parse_response(response: str | None, kind: ResponseKind | str | None = None) -> Parsed:
    """Interpret raw CLI output according to ``kind``.

    With no kind, or a kind this module does not know, the trimmed text is
    returned.
    """

    text = response or ""
    if not kind:
        return text.strip()
    try:
        kind = ResponseKind(kind)
    except ValueError:
        return text.strip()

    if kind in (ResponseKind.REPORTS, ResponseKind.DATASETS):
        return parse_resources(text)
    if kind is ResponseKind.IMPORT:
        return parse_import(text)
    if kind is ResponseKind.CREATE_WORKSPACE:
        return parse_created_workspaces(text)
    if kind is ResponseKind.WORKSPACES:
        return parse_workspaces(text)
    if kind is ResponseKind.CREATE_TOKEN:
        return parse_token(text)
    return text.strip()
