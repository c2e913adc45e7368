"""Mapping table module for uncpath."""

from .table import MappingTable, MountMapping, parse_mappings_json

__all__ = ["MappingTable", "MountMapping", "parse_mappings_json"]
