"""Configuration constants for uncpath."""

# Environment variable holding a JSON array of mappings
ENV_VAR = "UNCPATH_MAPPINGS"

# Example mappings seeded unless --no-defaults is given.
# These are illustrations, not production defaults.
DEFAULT_MAPPINGS = [
    ("server", "shared", "/mnt/shared"),
    ("nas", "data", "/mnt/nas"),
]

# Mapping text given on the command line: host:share:mount_point
MAPPING_TEXT_SEPARATOR = ":"
MAPPING_TEXT_FORMAT = "host:share:mount_point"

# Field names of one mapping object in the JSON wire format
MAPPING_FIELDS = ("host", "share", "mount_point")

# Encoding used when reading mapping files
MAPPING_FILE_ENCODING = "utf-8"

# Header printed by --list
LIST_HEADER = "Configured mappings:"
