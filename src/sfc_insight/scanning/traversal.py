"""Depth-first discovery of component files.

Visitation order is the order ``os.listdir`` returns at each level. That
order depends on the platform and filesystem and is not sorted, but it is
stable for an unchanged tree on the same machine.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import COMPONENT_EXTENSION, merge_blacklist
from ..exceptions import FileAccessError, RootInaccessibleError
from ..logging_config import get_logger
from ..models import SourceUnit

logger = get_logger(__name__)


def walk_component_files(
    root: Path,
    blacklist: Iterable[str] = (),
    extension: str = COMPONENT_EXTENSION,
) -> Iterator[Path]:
    """Yield component file paths under ``root``, depth first.

    Directories whose base name is blacklisted are pruned, the root
    included. Symlinked directories are followed, but each real directory is
    walked at most once, so symlink loops terminate.

    Raises:
        RootInaccessibleError: If ``root`` itself cannot be listed
    """
    skip = merge_blacklist(blacklist)
    root = Path(root)
    if root.name in skip:
        logger.debug(f"Skipped (blacklist): {root}")
        return

    try:
        names = os.listdir(root)
        visited = {_directory_key(root)}
    except OSError as e:
        raise RootInaccessibleError(root, e.strerror or str(e)) from e

    yield from _walk_entries(root, names, skip, extension, visited)


def _directory_key(directory: Path) -> tuple[int, int]:
    """Identity of the real directory behind ``directory``, symlinks resolved."""
    info = os.stat(directory)
    return info.st_dev, info.st_ino


def _walk_entries(
    directory: Path,
    names: list[str],
    skip: frozenset[str],
    extension: str,
    visited: set[tuple[int, int]],
) -> Iterator[Path]:
    for name in names:
        item = directory / name
        if item.is_dir():
            if name in skip:
                logger.debug(f"Skipped (blacklist): {item}")
                continue
            try:
                key = _directory_key(item)
                if key in visited:
                    logger.debug(f"Skipped (already visited): {item}")
                    continue
                children = os.listdir(item)
            except OSError as e:
                logger.warning(f"Cannot list directory {item}: {e.strerror or e}")
                continue
            visited.add(key)
            yield from _walk_entries(item, children, skip, extension, visited)
        elif name.endswith(extension):
            yield item


def read_source_unit(filepath: Path) -> SourceUnit:
    """Read a component file as UTF-8 text.

    Undecodable bytes are replaced rather than failing the read.

    Raises:
        FileAccessError: If the file cannot be opened or read
    """
    try:
        with open(filepath, encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        raise FileAccessError(filepath, e.strerror or str(e)) from e
    return SourceUnit(path=str(filepath), content=content)
