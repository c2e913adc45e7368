"""Compiled regex patterns for UNC path parsing."""

import re

# =============================================================================
# Prefixes (checked in this order, first match wins)
# =============================================================================

WINDOWS_UNC_PREFIX = "\\\\"
SMB_URL_PREFIX = "smb://"
UNIX_STYLE_PREFIX = "//"

# =============================================================================
# Grammars: group 1 = host, group 2 = share, group 3 = residual path
# =============================================================================

# \\server\share\folder\file.txt
WINDOWS_UNC = re.compile(r"^\\\\([^\\]+)\\([^\\]+)(.*)$")

# smb://server/share/folder/file.txt
SMB_URL = re.compile(r"^smb://([^/]+)/([^/]+)(.*)$")

# //server/share/folder/file.txt
UNIX_STYLE = re.compile(r"^//([^/]+)/([^/]+)(.*)$")
