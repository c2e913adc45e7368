"""Exceptions raised by uncpath."""


class UncPathError(Exception):
    """Base class for all uncpath errors."""


class InvalidFormatError(UncPathError):
    """Input does not match a supported UNC grammar."""

    def __init__(self, text: str, detail: str):
        self.text = text
        super().__init__(f"Invalid UNC path format: {detail}")


class MappingNotFoundError(UncPathError):
    """No table entry matches the parsed host/share."""

    def __init__(self, host: str, share: str):
        self.host = host
        self.share = share
        super().__init__(f"No mapping found for host/share: {host}/{share}")


class InvalidMappingError(UncPathError):
    """Mapping text is not host:share:mount_point."""

    def __init__(self, text: str, detail: str):
        self.text = text
        super().__init__(f"Invalid mapping configuration: {detail}")


class ConfigSourceError(UncPathError):
    """Reading or decoding a mapping source failed.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load mappings from {source}: {reason}")
