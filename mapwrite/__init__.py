"""mapwrite: attach source maps to build artifacts."""

from __future__ import annotations

from typing import Any


__all__ = [
    "Artifact",
    "Computed",
    "FileStat",
    "InvalidArguments",
    "InvalidOption",
    "Literal",
    "NoSourceMapFound",
    "NotAnArtifact",
    "WriteError",
    "WriteOptions",
    "WriteResult",
    "write",
    "write_source_map",
]


_LAZY_EXPORTS = {
    "Artifact": "mapwrite.artifact",
    "FileStat": "mapwrite.artifact",
    "Computed": "mapwrite.options",
    "Literal": "mapwrite.options",
    "WriteOptions": "mapwrite.options",
    "WriteResult": "mapwrite.writer",
    "InvalidArguments": "mapwrite.errors",
    "InvalidOption": "mapwrite.errors",
    "NoSourceMapFound": "mapwrite.errors",
    "NotAnArtifact": "mapwrite.errors",
    "WriteError": "mapwrite.errors",
}


def write(*args: Any, **kwargs: Any) -> None:
    from mapwrite.writer import write as _write

    return _write(*args, **kwargs)


def write_source_map(*args: Any, **kwargs: Any):
    from mapwrite.writer import write_source_map as _write_source_map

    return _write_source_map(*args, **kwargs)


def __getattr__(name: str):
    module_name = _LAZY_EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(name)
    import importlib

    return getattr(importlib.import_module(module_name), name)
