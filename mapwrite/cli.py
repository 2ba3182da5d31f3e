"""Command-line interface for mapwrite."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from mapwrite.artifact import Artifact
from mapwrite.comment import decode_data_uri, find_source_mapping_url
from mapwrite.errors import CLIError, Diagnostic, WriteError, format_diagnostic
from mapwrite.hooks import load_hook
from mapwrite.options import WriteOptions
from mapwrite.serialization import write_artifact
from mapwrite.writer import write_source_map


def build_parser() -> argparse.ArgumentParser:
    """Build argparse command tree for the mapwrite CLI."""
    parser = argparse.ArgumentParser(prog="mapwrite", description="Attach source maps to build artifacts")
    subparsers = parser.add_subparsers(dest="command", required=True)

    write_parser = subparsers.add_parser("write", help="Annotate an artifact with its source map")
    write_parser.add_argument("input", help="Artifact file (e.g. bundle.js)")
    write_parser.add_argument("--map", help="Source map JSON file (default: <input>.map when present)")
    write_parser.add_argument("--base", help="Base directory for relative paths (default: input directory)")
    write_parser.add_argument("--cwd", help="Directory --dest-path is resolved against (default: current)")
    write_parser.add_argument("--dest-dir", help="Write an external map under this directory, relative to base")
    write_parser.add_argument("--dest-path", help="Final artifact directory, relative to --cwd")
    root_group = write_parser.add_mutually_exclusive_group()
    root_group.add_argument("--source-root", help="Explicit sourceRoot")
    root_group.add_argument("--source-root-fn", help="module:function computing sourceRoot from the artifact")
    url_group = write_parser.add_mutually_exclusive_group()
    url_group.add_argument("--url-prefix", help="Prefix for the external map URL (e.g. a CDN host)")
    url_group.add_argument("--url-fn", help="module:function computing the full map URL from the artifact")
    write_parser.add_argument("--map-file-fn", help="module:function rewriting the map file path")
    write_parser.add_argument("--map-sources-fn", help="module:function rewriting each source path")
    write_parser.add_argument("--no-content", action="store_true", help="Strip sourcesContent")
    write_parser.add_argument("--no-comment", action="store_true", help="Do not append a sourceMappingURL comment")
    write_parser.add_argument("--charset", default="utf8", help="Charset named in inline data URIs")
    write_parser.add_argument("--debug", action="store_true", help="Log missing source content to stderr")
    write_parser.add_argument("-o", "--output", help="Output directory mirroring paths relative to base")

    inspect_parser = subparsers.add_parser("inspect", help="Print the source map an artifact references")
    inspect_parser.add_argument("input", help="Annotated artifact file")

    return parser


def run(argv: list[str] | None = None) -> int:
    """Run CLI and return shell exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "write":
            if args.debug:
                logging.basicConfig(level=logging.INFO, stream=sys.stderr, format="%(message)s")
            if args.dest_dir is not None and not args.output:
                raise CLIError(
                    code="CLI010",
                    message="External source maps need an output directory.",
                    hint="Pass -o <directory> together with --dest-dir.",
                )

            artifact = _load_artifact(args)
            result = write_source_map(artifact, args.dest_dir, _build_options(args))

            if args.output:
                for item in result.outputs:
                    if Path(item.relative).parts[:1] == ("..",):
                        raise CLIError(
                            code="CLI011",
                            message=f"Output '{item.path}' lies outside the base directory.",
                            hint="Keep --dest-dir and --map-file-fn inside the artifact's base.",
                        )
                for item in result.outputs:
                    print(write_artifact(item, args.output))
            else:
                sys.stdout.write(result.artifact.contents.decode("utf-8"))
            return 0

        if args.command == "inspect":
            text = _require_file(Path(args.input)).read_bytes().decode("utf-8")
            url = find_source_mapping_url(text)
            if url is None:
                raise CLIError(
                    code="CLI004",
                    message=f"No sourceMappingURL annotation in '{args.input}'.",
                )
            if url.startswith("data:"):
                payload = json.loads(decode_data_uri(url))
                print(json.dumps(payload, indent=2, sort_keys=True))
            else:
                print(url)
            return 0

        raise argparse.ArgumentTypeError(f"Unsupported command '{args.command}'.")

    except WriteError as err:
        diag = err.to_diagnostic()
        print(format_diagnostic(diag), file=sys.stderr)
        return 1
    except argparse.ArgumentTypeError as err:
        diag = Diagnostic(code="CLI001", message=str(err), hint="Run mapwrite --help for usage.")
        print(format_diagnostic(diag), file=sys.stderr)
        return 2
    except Exception as err:  # pragma: no cover - defensive fallback
        diag = Diagnostic(code="CLI999", message=f"Internal error: {err}", hint="Run with --debug")
        print(format_diagnostic(diag), file=sys.stderr)
        return 3


def _load_artifact(args: argparse.Namespace) -> Artifact:
    input_path = _require_file(Path(args.input))

    map_path = Path(args.map) if args.map else input_path.with_name(input_path.name + ".map")
    if args.map and not map_path.is_file():
        raise CLIError(code="CLI002", message=f"Source map '{map_path}' does not exist.")

    try:
        return Artifact.from_path(
            input_path,
            base=args.base,
            cwd=args.cwd,
            map_path=map_path if map_path.is_file() else None,
        )
    except json.JSONDecodeError as exc:
        raise CLIError(
            code="CLI003",
            message=f"Source map '{map_path}' is not valid JSON: {exc}",
        ) from exc


def _build_options(args: argparse.Namespace) -> WriteOptions:
    source_root = load_hook(args.source_root_fn) if args.source_root_fn else args.source_root
    return WriteOptions(
        include_content=not args.no_content,
        add_comment=not args.no_comment,
        source_root=source_root,
        source_mapping_url=load_hook(args.url_fn) if args.url_fn else None,
        source_mapping_url_prefix=args.url_prefix,
        map_file=load_hook(args.map_file_fn) if args.map_file_fn else None,
        map_sources=load_hook(args.map_sources_fn) if args.map_sources_fn else None,
        dest_path=args.dest_path,
        charset=args.charset,
        debug=args.debug,
    )


def _require_file(path: Path) -> Path:
    if not path.is_file():
        raise CLIError(code="CLI002", message=f"Input file '{path}' does not exist.")
    return path


if __name__ == "__main__":
    raise SystemExit(run())
