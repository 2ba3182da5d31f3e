"""Serialization helpers for source maps and written artifacts."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from mapwrite.artifact import Artifact


def map_to_json(source_map: dict[str, Any]) -> str:
    """Serialize a source map to compact JSON, preserving key order."""
    return json.dumps(source_map, separators=(",", ":"), ensure_ascii=False)


def output_path(artifact: Artifact, output_root: str | Path | None = None) -> Path:
    """Location an artifact is written to, mirroring its base-relative path."""
    if output_root is None:
        return Path(artifact.path)
    return Path(os.path.normpath(os.path.join(output_root, artifact.relative)))


def write_artifact(artifact: Artifact, output_root: str | Path | None = None) -> Path:
    """Write artifact contents to disk and return the written path."""
    target = output_path(artifact, output_root)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(artifact.contents)
    return target
