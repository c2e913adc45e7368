"""Parsers module for uncpath."""

from .unc_parser import parse_unc_path, is_unc_path, UncPath

__all__ = ["parse_unc_path", "is_unc_path", "UncPath"]
