"""In-memory build artifact container."""

from __future__ import annotations

import json
import os
import stat as stat_module
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class FileStat:
    """Subset of ``os.stat_result`` carried by emitted artifacts."""

    mode: int
    size: int = 0
    mtime: float = 0.0

    @classmethod
    def regular_file(cls, size: int, permissions: int = 0o644) -> "FileStat":
        return cls(mode=stat_module.S_IFREG | permissions, size=size, mtime=time.time())

    @classmethod
    def from_os(cls, result: os.stat_result) -> "FileStat":
        return cls(mode=result.st_mode, size=result.st_size, mtime=result.st_mtime)

    def is_file(self) -> bool:
        return stat_module.S_ISREG(self.mode)

    def is_dir(self) -> bool:
        return stat_module.S_ISDIR(self.mode)

    def is_symlink(self) -> bool:
        return stat_module.S_ISLNK(self.mode)

    def is_block_device(self) -> bool:
        return stat_module.S_ISBLK(self.mode)

    def is_char_device(self) -> bool:
        return stat_module.S_ISCHR(self.mode)

    def is_fifo(self) -> bool:
        return stat_module.S_ISFIFO(self.mode)

    def is_socket(self) -> bool:
        return stat_module.S_ISSOCK(self.mode)


@dataclass
class Artifact:
    """A build product: path, base directory, contents and optional source map.

    ``path`` is the artifact's current absolute location and ``base`` the
    directory its ``relative`` path is measured from. ``cwd`` anchors
    destination paths such as ``WriteOptions.dest_path``.
    """

    path: str
    base: str
    contents: bytes
    cwd: str = field(default_factory=os.getcwd)
    source_map: dict[str, Any] | None = None
    stat: FileStat | None = None

    def __post_init__(self) -> None:
        self.path = os.path.normpath(os.path.abspath(self.path))
        self.base = os.path.normpath(os.path.abspath(self.base))
        self.cwd = os.path.normpath(os.path.abspath(self.cwd))

    @property
    def relative(self) -> str:
        """Path relative to ``base`` using host separators."""
        return os.path.relpath(self.path, self.base)

    @property
    def extension(self) -> str:
        """Last dot-suffix of the relative path, without the dot."""
        name = os.path.basename(self.relative)
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        *,
        base: str | Path | None = None,
        cwd: str | Path | None = None,
        map_path: str | Path | None = None,
    ) -> "Artifact":
        """Load an artifact and an optional JSON source map from disk."""
        file_path = Path(path).resolve()
        source_map = None
        if map_path is not None:
            source_map = json.loads(Path(map_path).read_text(encoding="utf-8"))
        return cls(
            path=str(file_path),
            base=str(Path(base).resolve() if base is not None else file_path.parent),
            contents=file_path.read_bytes(),
            cwd=str(Path(cwd).resolve() if cwd is not None else Path.cwd()),
            source_map=source_map,
            stat=FileStat.from_os(file_path.stat()),
        )


def is_artifact(value: Any) -> bool:
    """True when ``value`` can be handed to the writer."""
    return isinstance(value, Artifact)
