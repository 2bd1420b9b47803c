"""pbiwrap: Python wrapper for the powerbi CLI."""

from .cli import execute, format_args, format_input, run_powerbi
from .client import PowerBIWrapper
from .errors import ConfigurationError, PowerBIError, ProcessExecutionError
from .models import ImportResult, ProcessResult, ResourceSummary, ResponseKind
from .parser import parse_response
from .settings import CLISettings

__all__ = [
    "CLISettings",
    "ConfigurationError",
    "ImportResult",
    "PowerBIError",
    "PowerBIWrapper",
    "ProcessExecutionError",
    "ProcessResult",
    "ResourceSummary",
    "ResponseKind",
    "execute",
    "format_args",
    "format_input",
    "parse_response",
    "run_powerbi",
]
