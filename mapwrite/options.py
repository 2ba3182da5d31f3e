"""Write options and literal-or-computed option values."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Generic, Mapping, TypeVar, Union

from mapwrite.errors import InvalidOption


T = TypeVar("T")


@dataclass(frozen=True)
class Literal(Generic[T]):
    """Option value fixed at configuration time."""

    value: T


@dataclass(frozen=True)
class Computed(Generic[T]):
    """Option value derived from the artifact being written."""

    func: Callable[[Any], T]


Dynamic = Union[Literal[T], Computed[T]]


def resolve(value: Dynamic[T] | None, artifact: Any) -> T | None:
    """Resolve a dynamic option for one artifact. Unset resolves to None."""
    if value is None:
        return None
    if isinstance(value, Computed):
        return value.func(artifact)
    return value.value


def as_dynamic(value: Any) -> Dynamic[Any] | None:
    """Wrap a raw literal or callable into the tagged form."""
    if value is None or isinstance(value, (Literal, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Literal(value)


@dataclass(frozen=True)
class WriteOptions:
    """Switches controlling how a source map is written and referenced."""

    include_content: bool = True
    add_comment: bool = True
    source_root: Dynamic[str | None] | None = None
    source_mapping_url: Dynamic[str] | None = None
    source_mapping_url_prefix: Dynamic[str] | None = None
    map_file: Callable[[str], str] | None = None
    map_sources: Callable[[str], str] | None = None
    dest_path: str | None = None
    charset: str = "utf8"
    debug: bool = False

    def __post_init__(self) -> None:
        for name in ("source_root", "source_mapping_url", "source_mapping_url_prefix"):
            object.__setattr__(self, name, as_dynamic(getattr(self, name)))
        self.validate()

    def validate(self) -> None:
        """Raise InvalidOption for the first value with an unsupported type."""
        for name in ("include_content", "add_comment", "debug"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOption(name, hint=f"'{name}' must be a boolean.")
        for name in ("map_file", "map_sources"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                raise InvalidOption(name, hint=f"'{name}' must be a callable taking a path.")
        for name in ("source_root", "source_mapping_url", "source_mapping_url_prefix"):
            value = getattr(self, name)
            if isinstance(value, Literal) and value.value is not None and not isinstance(value.value, str):
                raise InvalidOption(name, hint=f"'{name}' must be a string or a callable.")
        if self.dest_path is not None and not isinstance(self.dest_path, str):
            raise InvalidOption("dest_path", hint="'dest_path' must be a string.")
        if not isinstance(self.charset, str) or not self.charset:
            raise InvalidOption("charset", hint="'charset' must be a non-empty string.")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "WriteOptions":
        """Build options from snake_case or camelCase keys."""
        known = {item.name for item in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise InvalidOption(str(key), hint=f"Unknown option '{key}'.")
            kwargs[name] = value
        return cls(**kwargs)


OPTION_ALIASES = {
    "includeContent": "include_content",
    "addComment": "add_comment",
    "sourceRoot": "source_root",
    "sourceMappingURL": "source_mapping_url",
    "sourceMappingURLPrefix": "source_mapping_url_prefix",
    "mapFile": "map_file",
    "mapSources": "map_sources",
    "destPath": "dest_path",
}
