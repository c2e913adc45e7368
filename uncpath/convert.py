"""UNC to POSIX path conversion."""

from .errors import MappingNotFoundError
from .mapping import MappingTable
from .parsers import parse_unc_path


def join_mount_point(mount_point: str, path: str) -> str:
    """Join a mount point with a residual path (no other normalization)."""
    if not path or path == "/":
        return mount_point
    # All trailing slashes go, so a mount point of "/" joins to "/a"
    return mount_point.rstrip("/") + path


def convert_to_posix(text: str, table: MappingTable) -> str:
    """
    Convert a UNC path to a local POSIX path using the mapping table.

    Raises:
        InvalidFormatError: text is not a supported UNC notation.
        MappingNotFoundError: no mapping for the parsed host/share.
    """
    unc_path = parse_unc_path(text)

    mount_point = table.find_mount_point(unc_path.host, unc_path.share)
    if mount_point is None:
        raise MappingNotFoundError(unc_path.host, unc_path.share)

    return join_mount_point(mount_point, unc_path.path)
