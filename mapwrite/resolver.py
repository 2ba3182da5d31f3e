"""Map location, ``file`` and ``sourceRoot`` resolution.

All reasoning happens in terms of final destinations: when ``dest_path`` is
set the artifact and its map are assumed to be copied under
``cwd/dest_path`` with their base-relative layout preserved, and every
relative reference is computed between those destination locations.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from mapwrite.artifact import Artifact
from mapwrite.options import WriteOptions, resolve
from mapwrite.paths import is_absolute_root, join, relative, url_path


@dataclass(frozen=True)
class MapLocation:
    """Resolved references for one artifact/map pair.

    ``map_path`` and ``url`` are None in inline mode. ``source_root`` is None
    when the map should carry no ``sourceRoot`` key.
    """

    file: str
    source_root: str | None
    map_path: str | None = None
    url: str | None = None

    @property
    def inline(self) -> bool:
        return self.map_path is None


def destination_file(artifact: Artifact, options: WriteOptions) -> str:
    """Absolute path the artifact will have once written."""
    if options.dest_path:
        return os.path.normpath(os.path.join(artifact.cwd, options.dest_path, artifact.relative))
    return artifact.path


def map_relative_path(artifact: Artifact, dest_dir: str, options: WriteOptions) -> str:
    """Base-relative path of the map file, after the ``map_file`` rewrite."""
    map_file = os.path.join(dest_dir, artifact.relative) + ".map"
    if options.map_file is not None:
        map_file = options.map_file(map_file)
    return map_file


def resolve_source_root(
    explicit: str | None,
    map_dir: str,
    artifact: Artifact,
) -> str | None:
    """Compute the stored ``sourceRoot`` relative to the map's directory."""
    root_prefix = relative(map_dir, artifact.base)
    if explicit is None:
        return root_prefix or None
    if is_absolute_root(explicit):
        return explicit
    return join(root_prefix, explicit)


def resolve_map_location(
    artifact: Artifact,
    dest_dir: str | None,
    options: WriteOptions,
    source_root: str | None,
) -> MapLocation:
    """Resolve map path, comment URL, ``file`` and ``sourceRoot``.

    ``dest_dir`` is the map directory relative to the artifact's base, or
    None to embed the map inline. ``source_root`` is the explicit root
    option already resolved for this artifact.
    """
    dest_file = destination_file(artifact, options)

    if dest_dir is None:
        map_dir = os.path.dirname(dest_file)
        return MapLocation(
            file=relative(map_dir, dest_file),
            source_root=resolve_source_root(source_root, map_dir, artifact),
        )

    map_file = map_relative_path(artifact, dest_dir, options)
    map_path = os.path.normpath(os.path.join(artifact.base, map_file))
    if options.dest_path:
        dest_map_path = os.path.normpath(os.path.join(artifact.cwd, options.dest_path, map_file))
    else:
        dest_map_path = map_path
    map_dir = os.path.dirname(dest_map_path)

    url = relative(os.path.dirname(dest_file), dest_map_path)
    prefix = resolve(options.source_mapping_url_prefix, artifact)
    if prefix:
        url = prefix + url_path(url)
    override = resolve(options.source_mapping_url, artifact)
    if override is not None:
        url = override

    return MapLocation(
        file=relative(map_dir, dest_file),
        source_root=resolve_source_root(source_root, map_dir, artifact),
        map_path=map_path,
        url=url,
    )
