"""sourceMappingURL annotation formatting."""

from __future__ import annotations

import base64
import re


JS_EXTENSIONS = frozenset({"js", "mjs", "cjs", "jsx"})
CSS_EXTENSIONS = frozenset({"css"})

DATA_URI_PREFIX = "data:application/json;charset={charset};base64,"


def detect_newline(text: str) -> str:
    """Return the dominant line ending of ``text``, defaulting to LF."""
    crlf = text.count("\r\n")
    lf = text.count("\n") - crlf
    return "\r\n" if crlf > lf else "\n"


def format_comment(extension: str, url: str, newline: str = "\n") -> str:
    """Build the trailing annotation for a file extension, or ``''``."""
    ext = extension.lower().lstrip(".")
    if ext in JS_EXTENSIONS:
        return f"{newline}//# sourceMappingURL={url}{newline}"
    if ext in CSS_EXTENSIONS:
        return f"{newline}/*# sourceMappingURL={url} */{newline}"
    return ""


def data_uri(payload: str, charset: str = "utf8") -> str:
    """Encode a JSON payload as a base64 data URI."""
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return DATA_URI_PREFIX.format(charset=charset) + encoded


_URL_PATTERN = re.compile(r"(?://|/\*)# sourceMappingURL=(\S+?)(?: \*/)?\s*$")


def find_source_mapping_url(text: str) -> str | None:
    """Return the URL of the trailing sourceMappingURL annotation, if any."""
    match = _URL_PATTERN.search(text.rstrip("\r\n") + "\n")
    if match is None:
        return None
    return match.group(1)


def decode_data_uri(uri: str) -> str:
    """Decode a base64 JSON data URI produced by ``data_uri``."""
    header, sep, encoded = uri.partition(",")
    if not sep or not header.startswith("data:application/json") or not header.endswith(";base64"):
        raise ValueError(f"Not a base64 JSON data URI: {uri[:40]}")
    return base64.b64decode(encoded).decode("utf-8")
