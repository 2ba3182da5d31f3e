"""Diagnostics sinks used when the ``debug`` option is set."""

from __future__ import annotations

import logging
from typing import Protocol


logger = logging.getLogger("mapwrite")


class Diagnostics(Protocol):
    def log(self, message: str) -> None:
        ...

    def warn(self, message: str) -> None:
        ...


class LoggingDiagnostics:
    """Forwards diagnostics to a stdlib logger.

    With ``verbose`` the logger is opened up to INFO, and a stderr handler is
    attached when nothing upstream handles its records.
    """

    def __init__(self, target: logging.Logger | None = None, *, verbose: bool = False) -> None:
        self.logger = target or logger
        if verbose:
            enable_info(self.logger)

    def log(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)


def enable_info(target: logging.Logger) -> None:
    if target.getEffectiveLevel() > logging.INFO:
        target.setLevel(logging.INFO)
    if not target.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        target.addHandler(handler)


class RecordingDiagnostics:
    """Keeps every message in memory, keyed by channel."""

    def __init__(self) -> None:
        self.history: dict[str, list[str]] = {"log": [], "warn": []}

    def log(self, message: str) -> None:
        self.history["log"].append(message)

    def warn(self, message: str) -> None:
        self.history["warn"].append(message)
