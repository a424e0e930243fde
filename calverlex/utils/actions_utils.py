"""Helpers for running inside a GitHub Actions workflow"""

import logging
import os

import click_log  # type: ignore

# Workflow command used for each log level
ANNOTATIONS = {
    logging.DEBUG: "debug",
    logging.INFO: "notice",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def running_in_actions() -> bool:
    """
    Returns:
        bool: True when the process runs as a GitHub Actions step
    """
    return os.environ.get("GITHUB_ACTIONS") == "true"


def escape_data(message: str) -> str:
    """Escapes a message so a workflow command keeps it on one line"""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFormatter(logging.Formatter):
    """Formats log records as workflow commands, ie. `::notice::Found 3 tags`"""

    def format(self, record: logging.LogRecord) -> str:
        message = escape_data(super().format(record))
        command = ANNOTATIONS.get(record.levelno, "notice")
        return f"::{command}::{message}"


def use_actions_annotations(logger: logging.Logger) -> None:
    """Sends the logger's records to stderr as workflow commands

    Args:
        logger (logging.Logger): the logger click_log was configured on
    """
    handler = click_log.ClickHandler()
    handler.setFormatter(ActionsFormatter())
    logger.handlers = [handler]
    logger.propagate = False


def write_output(name: str, value: str) -> bool:
    """Sets a step output by appending to the file named in GITHUB_OUTPUT

    Args:
        name (str): output name, ie. "tag"
        value (str): output value, must be a single line

    Returns:
        bool: False when GITHUB_OUTPUT isn't set and nothing was written
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return False
    with open(output_path, "a", encoding="utf-8") as file:
        file.write(f"{name}={value}\n")
    return True
