"""Best-effort loading of missing ``sourcesContent`` entries."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any

from mapwrite.artifact import Artifact
from mapwrite.diagnostics import Diagnostics, LoggingDiagnostics
from mapwrite.errors import PLUGIN_NAME


MAX_READ_WORKERS = 8


def load_missing_content(
    source_map: dict[str, Any],
    artifact: Artifact,
    *,
    source_root: str | None = None,
    debug: bool = False,
    diagnostics: Diagnostics | None = None,
) -> None:
    """Fill absent or empty ``sourcesContent`` entries from disk, in place.

    Sources resolve against ``artifact.base`` joined with the explicit
    ``source_root``. Unreadable sources keep a ``None`` slot. When the map had
    no ``sourcesContent`` at all, trailing ``None`` slots are dropped, so the
    result may be shorter than ``sources``; a supplied array keeps every slot.
    """
    had_content = "sourcesContent" in source_map
    sources: list[str] = list(source_map.get("sources") or [])
    content: list[str | None] = list(source_map.get("sourcesContent") or [])
    if len(content) < len(sources):
        content.extend([None] * (len(sources) - len(content)))

    missing = [index for index in range(len(sources)) if not content[index]]
    if missing:
        sink = diagnostics or LoggingDiagnostics(verbose=debug)
        candidates = [os.path.join(artifact.base, source_root or "", sources[index]) for index in missing]
        if debug:
            for index in missing:
                sink.log(f'{PLUGIN_NAME}: No source content for "{sources[index]}". Loading from file.')

        with ThreadPoolExecutor(max_workers=min(MAX_READ_WORKERS, len(missing))) as pool:
            loaded = list(pool.map(read_source, candidates))

        for index, candidate, text in zip(missing, candidates, loaded):
            if text is None:
                if debug:
                    sink.warn(f"{PLUGIN_NAME}: source file not found: {candidate}")
                continue
            content[index] = text

    if not had_content:
        while content and content[-1] is None:
            content.pop()
    source_map["sourcesContent"] = content


def read_source(path: str) -> str | None:
    """Read a UTF-8 source file without its BOM, or None when unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError):
        return None
