"""Source map writing: validation, mode selection and output assembly."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from mapwrite.artifact import Artifact, FileStat, is_artifact
from mapwrite.comment import data_uri, detect_newline, format_comment
from mapwrite.diagnostics import Diagnostics
from mapwrite.errors import InvalidArguments, InvalidOption, NoSourceMapFound, NotAnArtifact, WriteError
from mapwrite.options import WriteOptions, resolve
from mapwrite.paths import to_posix
from mapwrite.resolver import resolve_map_location
from mapwrite.serialization import map_to_json
from mapwrite.source_content import load_missing_content


@dataclass
class WriteResult:
    """Updated artifact plus the emitted map artifact in external mode."""

    artifact: Artifact
    map_artifact: Artifact | None = None

    @property
    def outputs(self) -> list[Artifact]:
        if self.map_artifact is None:
            return [self.artifact]
        return [self.artifact, self.map_artifact]

    def __iter__(self) -> Iterator[Artifact | None]:
        yield self.artifact
        yield self.map_artifact


def write_source_map(
    artifact: Artifact,
    dest_dir: str | None = None,
    options: WriteOptions | Mapping[str, Any] | None = None,
    *,
    diagnostics: Diagnostics | None = None,
) -> WriteResult:
    """Attach ``artifact.source_map`` to the artifact.

    With ``dest_dir`` None the map is embedded as a data URI. Otherwise the
    map is emitted as a second artifact under ``dest_dir`` (relative to the
    artifact's base) and referenced by a relative URL. The artifact's
    ``contents`` and ``source_map`` are updated in place and the same object
    is returned in the result.
    """
    _validate_artifact(artifact)
    if dest_dir is not None and not isinstance(dest_dir, str):
        raise InvalidArguments(hint="The destination directory must be a string.")
    opts = coerce_options(options)

    source_map = copy.deepcopy(artifact.source_map)
    if not all(isinstance(source, str) for source in source_map.get("sources") or []):
        raise InvalidArguments(hint="Every entry of the map's sources must be a string.")
    source_map["sources"] = [to_posix(source) for source in source_map.get("sources") or []]

    source_root = resolve(opts.source_root, artifact)
    if source_root is not None and not isinstance(source_root, str):
        raise InvalidOption("source_root", hint="A source_root callable must return a string or None.")

    if opts.include_content:
        load_missing_content(
            source_map,
            artifact,
            source_root=source_root,
            debug=opts.debug,
            diagnostics=diagnostics,
        )
    else:
        source_map.pop("sourcesContent", None)

    if opts.map_sources is not None:
        source_map["sources"] = [opts.map_sources(source) for source in source_map["sources"]]

    location = resolve_map_location(artifact, dest_dir, opts, source_root)
    source_map["file"] = location.file
    if location.source_root is None:
        source_map.pop("sourceRoot", None)
    else:
        source_map["sourceRoot"] = location.source_root

    payload = map_to_json(source_map)
    map_artifact = None
    if location.inline:
        url = data_uri(payload, opts.charset)
    else:
        url = location.url
        contents = payload.encode("utf-8")
        map_artifact = Artifact(
            path=location.map_path,
            base=artifact.base,
            cwd=artifact.cwd,
            contents=contents,
            stat=FileStat.regular_file(len(contents)),
        )

    if opts.add_comment:
        newline = detect_newline(artifact.contents.decode("utf-8", errors="replace"))
        comment = format_comment(artifact.extension, url, newline)
        if comment:
            artifact.contents = artifact.contents + comment.encode("utf-8")

    artifact.source_map = source_map
    return WriteResult(artifact=artifact, map_artifact=map_artifact)


def write(artifact: Any, *args: Any, diagnostics: Diagnostics | None = None) -> None:
    """Callback form: ``write(artifact, [dest_dir], [options], callback)``.

    Input errors are delivered as ``callback(error, None)``; on success the
    callback receives ``(None, [artifact])`` or ``(None, [artifact, map_artifact])``.
    """
    if not args or not callable(args[-1]):
        raise InvalidArguments(hint="Pass a completion callback as the last argument.")
    *positional, callback = args

    try:
        _validate_artifact(artifact)
        dest_dir, options = _parse_positional(positional)
        result = write_source_map(artifact, dest_dir, options, diagnostics=diagnostics)
    except WriteError as err:
        callback(err, None)
        return
    callback(None, result.outputs)


def coerce_options(options: WriteOptions | Mapping[str, Any] | None) -> WriteOptions:
    """Normalize the options argument into WriteOptions."""
    if options is None:
        return WriteOptions()
    if isinstance(options, WriteOptions):
        return options
    if isinstance(options, Mapping):
        return WriteOptions.from_mapping(options)
    raise InvalidOption("options", hint="Options must be a mapping or WriteOptions.")


def _validate_artifact(artifact: Any) -> None:
    if not is_artifact(artifact):
        raise NotAnArtifact(hint="Pass a mapwrite.Artifact instance.")
    if artifact.source_map is None:
        raise NoSourceMapFound(hint="Attach a source map to artifact.source_map before writing.")


def _parse_positional(positional: list[Any]) -> tuple[str | None, Any]:
    if not positional:
        return None, None

    if len(positional) == 1:
        value = positional[0]
        if isinstance(value, str):
            return value, None
        if isinstance(value, (Mapping, WriteOptions)):
            return None, value
        raise InvalidArguments(hint="Expected a destination directory or an options mapping.")

    if len(positional) == 2:
        dest_dir, options = positional
        if dest_dir is not None and not isinstance(dest_dir, str):
            raise InvalidArguments(hint="The destination directory must be a string.")
        if not isinstance(options, (Mapping, WriteOptions)):
            raise InvalidOption("options", hint="Options must be a mapping or WriteOptions.")
        return dest_dir, options

    raise InvalidArguments(hint="Expected at most a destination directory and options.")
