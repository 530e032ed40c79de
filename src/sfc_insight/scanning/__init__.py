"""Filesystem discovery and reading of component files."""

from .traversal import merge_blacklist, read_source_unit, walk_component_files

__all__ = [
    "merge_blacklist",
    "read_source_unit",
    "walk_component_files",
]
