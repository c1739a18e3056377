"""GitHub Actions runner integration: workflow commands and step outputs."""

import logging
import os
import sys
from typing import TextIO

from rich.console import Console
from rich.table import Table


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str, stream: TextIO | None = None) -> None:
    """Write a `::command::message` line for the runner to pick up."""
    stream = stream or sys.stdout
    stream.write(f"::{command}::{escape_data(message)}\n")
    stream.flush()


class ActionsLogHandler(logging.StreamHandler):
    """Render log records as workflow commands.

    DEBUG lines only show in the job log when step debugging is enabled,
    WARNING and ERROR become annotations, INFO is printed as-is.
    """

    COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self, stream: TextIO | None = None):
        super().__init__(stream or sys.stdout)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def set_outputs(outputs: dict[str, int], console: Console | None = None) -> None:
    """Publish step outputs.

    Appends to the file named by GITHUB_OUTPUT. Outside a runner the values
    are printed as a table instead.
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        table = Table(title="Review states")
        table.add_column("Output")
        table.add_column("Count", justify="right")
        for name, value in outputs.items():
            table.add_row(name, str(value))
        (console or Console()).print(table)
        return

    with open(output_file, "a", encoding="utf-8") as f:
        for name, value in outputs.items():
            f.write(f"{name}={value}\n")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Report the step as failed and exit non-zero."""
    issue_command("error", message, stream)
    sys.exit(1)
