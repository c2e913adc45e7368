"""Parser for UNC path references."""

import re
from dataclasses import dataclass, field, asdict

from . import patterns
from ..errors import InvalidFormatError


@dataclass(frozen=True)
class UncPath:
    """A share reference split into host, share and residual path."""

    host: str
    share: str
    path: str = ""  # forward-slash separated, empty for the share root
    kind: str = field(default="", compare=False)  # windows, smb or unix

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class _Grammar:
    """Internal: one supported notation."""

    kind: str
    label: str
    prefix: str
    pattern: re.Pattern
    backslashes: bool = False


# Dispatch order matters: smb:// must be tried before //
GRAMMARS = [
    _Grammar("windows", "Windows UNC", patterns.WINDOWS_UNC_PREFIX, patterns.WINDOWS_UNC, True),
    _Grammar("smb", "SMB URL", patterns.SMB_URL_PREFIX, patterns.SMB_URL),
    _Grammar("unix", "Unix-style UNC", patterns.UNIX_STYLE_PREFIX, patterns.UNIX_STYLE),
]


def parse_unc_path(text: str) -> UncPath:
    """
    Parse a UNC path from one of the supported notations.

    Supported:
        \\\\host\\share\\path   (Windows UNC)
        smb://host/share/path  (SMB URL)
        //host/share/path      (Unix-style)

    Host and share keep the case they were written in.

    Raises:
        InvalidFormatError: no prefix matched, or the matched grammar
            could not find a host and a share.
    """
    text = text.strip()

    for grammar in GRAMMARS:
        if text.startswith(grammar.prefix):
            return _parse_with(grammar, text)

    raise InvalidFormatError(
        text, f"Path does not match any supported UNC format: {text}"
    )


def _parse_with(grammar: _Grammar, text: str) -> UncPath:
    match = grammar.pattern.match(text)
    if not match:
        raise InvalidFormatError(text, f"Invalid {grammar.label} format: {text}")

    host, share, rest = match.group(1), match.group(2), match.group(3) or ""
    if grammar.backslashes:
        rest = rest.replace("\\", "/")

    return UncPath(host=host, share=share, path=rest, kind=grammar.kind)


def is_unc_path(text: str) -> bool:
    """Check if text parses as any supported UNC notation."""
    try:
        parse_unc_path(text)
    except InvalidFormatError:
        return False
    return True
