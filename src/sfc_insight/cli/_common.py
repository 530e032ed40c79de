"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ScanConfig, load_config, parse_blacklist

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def resolve_config(
    config: Optional[Path] = None,
    folder: Optional[Path] = None,
    blacklist: Optional[str] = None,
    complexity: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> ScanConfig:
    """Build scan configuration from CLI options.

    Flags left at their defaults do not override file or environment values.
    """
    overrides = {}
    if folder is not None:
        overrides["folder"] = str(folder)
    if blacklist is not None:
        overrides["blacklist"] = parse_blacklist(blacklist)
    if complexity:
        overrides["complexity"] = True
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
