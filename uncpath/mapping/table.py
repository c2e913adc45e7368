"""
Mapping table for uncpath.

An ordered list of host/share -> mount point entries. Sources are appended
in the order they are loaded and lookup returns the first match, so the
first source loaded wins when two sources name the same host/share.
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Iterator, Mapping

from ..config import (
    DEFAULT_MAPPINGS,
    ENV_VAR,
    MAPPING_FIELDS,
    MAPPING_FILE_ENCODING,
    MAPPING_TEXT_FORMAT,
    MAPPING_TEXT_SEPARATOR,
)
from ..errors import ConfigSourceError, InvalidMappingError


@dataclass(frozen=True)
class MountMapping:
    """A share and the local directory it is mounted on."""

    host: str
    share: str
    mount_point: str

    @property
    def unc(self) -> str:
        """Windows UNC form of the share, e.g. \\\\server\\shared."""
        return f"\\\\{self.host}\\{self.share}"

    def matches(self, host: str, share: str) -> bool:
        """Case-insensitive comparison on host and share."""
        return (
            self.host.casefold() == host.casefold()
            and self.share.casefold() == share.casefold()
        )

    def to_dict(self) -> dict:
        """Convert to the JSON wire shape."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MountMapping":
        """Build from one JSON object. Unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        values = {}
        for name in MAPPING_FIELDS:
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            if not isinstance(data[name], str):
                raise ValueError(f"field `{name}` must be a string")
            values[name] = data[name]
        return cls(**values)


def parse_mappings_json(content: str) -> list[MountMapping]:
    """
    Decode a JSON array of mapping objects.

    Example:
        [{"host": "server", "share": "shared", "mount_point": "/mnt/shared"}]

    Raises:
        ValueError: malformed JSON or a malformed mapping object
            (json.JSONDecodeError is a ValueError).
        RecursionError: JSON nested too deeply to decode.
    """
    data = json.loads(content)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [MountMapping.from_dict(item) for item in data]


class MappingTable:
    """Insertion-ordered host/share -> mount point lookup."""

    def __init__(self):
        self._mappings: list[MountMapping] = []

    @classmethod
    def with_defaults(cls) -> "MappingTable":
        """Create a table seeded with the example mappings."""
        table = cls()
        for host, share, mount_point in DEFAULT_MAPPINGS:
            table.add_mapping(host, share, mount_point)
        return table

    def __len__(self) -> int:
        return len(self._mappings)

    def __iter__(self) -> Iterator[MountMapping]:
        return iter(self._mappings)

    def __repr__(self) -> str:
        return f"MappingTable({len(self._mappings)} mappings)"

    @property
    def mappings(self) -> tuple[MountMapping, ...]:
        """All mappings in insertion order."""
        return tuple(self._mappings)

    def add_mapping(self, host: str, share: str, mount_point: str) -> MountMapping:
        """Append a single mapping."""
        mapping = MountMapping(host=host, share=share, mount_point=mount_point)
        self._mappings.append(mapping)
        return mapping

    def add_from_text(self, text: str) -> MountMapping:
        """
        Append a mapping written as host:share:mount_point.

        Raises:
            InvalidMappingError: text does not split into exactly three fields.
        """
        parts = text.split(MAPPING_TEXT_SEPARATOR)
        if len(parts) != 3:
            raise InvalidMappingError(
                text, f"Expected format: {MAPPING_TEXT_FORMAT}, got: {text}"
            )
        return self.add_mapping(*parts)

    def load_from_env(
        self, var_name: str = ENV_VAR, environ: Mapping[str, str] | None = None
    ) -> int:
        """
        Append mappings from a JSON array held in an environment variable.

        A missing variable is not an error. Returns the number of mappings added.
        """
        if environ is None:
            environ = os.environ
        content = environ.get(var_name)
        if content is None:
            return 0
        return self._extend_from_json(content, source=f"environment variable {var_name}")

    def load_from_file(self, path: Path | str) -> int:
        """Append mappings from a JSON file. Returns the number added."""
        path = Path(path)
        try:
            content = path.read_text(encoding=MAPPING_FILE_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigSourceError(str(path), str(e)) from e
        return self._extend_from_json(content, source=str(path))

    def _extend_from_json(self, content: str, source: str) -> int:
        # Decode everything first so a bad source adds nothing
        try:
            mappings = parse_mappings_json(content)
        except (ValueError, RecursionError) as e:
            raise ConfigSourceError(source, str(e)) from e
        self._mappings.extend(mappings)
        return len(mappings)

    def find_mapping(self, host: str, share: str) -> MountMapping | None:
        """Find the first mapping for host/share (case-insensitive)."""
        for mapping in self._mappings:
            if mapping.matches(host, share):
                return mapping
        return None

    def find_mount_point(self, host: str, share: str) -> str | None:
        """Find the mount point for host/share, or None."""
        mapping = self.find_mapping(host, share)
        return mapping.mount_point if mapping else None

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize in the same shape load_from_file reads."""
        return json.dumps(
            [m.to_dict() for m in self._mappings], indent=indent, ensure_ascii=False
        )
