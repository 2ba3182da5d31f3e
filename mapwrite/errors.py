"""Structured diagnostics and exception hierarchy for mapwrite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


PLUGIN_NAME = "mapwrite"


@dataclass(frozen=True)
class Diagnostic:
    """Machine-readable diagnostic emitted by write failures."""

    code: str
    message: str
    hint: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the diagnostic for JSON output."""
        return {
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }


class WriteError(Exception):
    """Base error carrying a stable code and an optional hint."""

    def __init__(self, code: str, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint

    def to_diagnostic(self) -> Diagnostic:
        """Convert exception into serializable diagnostic."""
        return Diagnostic(code=self.code, message=self.message, hint=self.hint)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class NotAnArtifact(WriteError):
    """Raised when the first argument is not an Artifact."""

    def __init__(self, hint: str = "") -> None:
        super().__init__("MW001", f"{PLUGIN_NAME}: Not an artifact", hint)


class NoSourceMapFound(WriteError):
    """Raised when the artifact carries no source map."""

    def __init__(self, hint: str = "") -> None:
        super().__init__("MW002", f"{PLUGIN_NAME}: No sourcemap found", hint)


class InvalidArguments(WriteError):
    """Raised when positional arguments, or the map they carry, have the wrong shape."""

    def __init__(self, hint: str = "") -> None:
        super().__init__("MW003", f"{PLUGIN_NAME}: Invalid arguments", hint)


class InvalidOption(WriteError):
    """Raised when the options argument or one of its values has the wrong type."""

    def __init__(self, name: str = "options", hint: str = "") -> None:
        super().__init__("MW004", f"{PLUGIN_NAME}: Invalid argument: {name}", hint)
        self.name = name


class HookError(WriteError):
    """Raised when a module:function hook spec cannot be loaded."""


class CLIError(WriteError):
    """Raised by CLI usage or orchestration failures."""


def format_diagnostic(diag: Diagnostic) -> str:
    """Format diagnostic into a stable human-readable line."""
    hint = f" Hint: {diag.hint}" if diag.hint else ""
    return f"{diag.code}: {diag.message}{hint}"
