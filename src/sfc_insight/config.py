"""Configuration loading and management for SFC Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Project config (./sfc-insight.toml)
    3. Explicit config file (--config)
    4. Environment variables (SFC_INSIGHT_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(complexity=True, blacklist=("dist",))
    >>> sorted(merge_blacklist(config.blacklist))
    ['dist', 'node_modules']
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, SfcInsightError

Verbosity = Literal["quiet", "normal", "verbose"]

# Directory basenames that are never descended into, whatever the caller passes.
DEFAULT_BLACKLIST: frozenset[str] = frozenset({"node_modules"})

COMPONENT_EXTENSION = ".vue"

PROJECT_CONFIG_NAME = "sfc-insight.toml"
ENV_PREFIX = "SFC_INSIGHT_"


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and tier boundaries for Options component complexity.

    Attributes:
        Structural signals (flat bonus when present):
            mixins_weight: ``mixins: [`` array literal
            watch_immediate_weight: watcher block with ``immediate: true``
            watch_deep_weight: watcher block with ``deep: true``
            filters_weight: ``filters: {`` object literal

        Counted signals (bonus per occurrence):
            lifecycle_hook_weight: each lifecycle hook call/definition
            computed_entry_weight: each approximate computed entry
            method_entry_weight: each approximate method entry
            simple_watch_weight: each ``watch: { ... }`` block

        Tier boundaries:
            high_threshold: score at or above this is HIGH
            medium_threshold: score at or above this (and below high) is MEDIUM
    """

    mixins_weight: int = 30
    watch_immediate_weight: int = 20
    watch_deep_weight: int = 20
    filters_weight: int = 15

    lifecycle_hook_weight: int = 5
    computed_entry_weight: int = 3
    method_entry_weight: int = 2
    simple_watch_weight: int = 4

    high_threshold: int = 30
    medium_threshold: int = 10

    def __post_init__(self) -> None:
        """Validate scoring configuration."""
        for field_name in self.__dataclass_fields__:
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigError(field_name, value, "must be an integer")
            if value < 0:
                raise InvalidConfigError(field_name, value, "must be non-negative")

        if self.medium_threshold > self.high_threshold:
            raise InvalidConfigError(
                "medium_threshold",
                self.medium_threshold,
                f"must not exceed high_threshold ({self.high_threshold})",
            )


# Default scoring configuration (singleton)
DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for one scan run.

    Attributes:
        folder: Root directory to scan
        blacklist: Extra directory basenames to skip (merged with DEFAULT_BLACKLIST)
        complexity: Score Options components and report tiers
        extension: Component file extension (case-sensitive suffix match)
        verbosity: Logging verbosity level
        scoring: Complexity weights and tier boundaries
    """

    folder: str = "."
    blacklist: tuple[str, ...] = ()
    complexity: bool = False
    extension: str = COMPONENT_EXTENSION
    verbosity: Verbosity = "normal"
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for key in ("folder", "extension", "verbosity"):
            value = getattr(self, key)
            if not isinstance(value, str):
                raise InvalidConfigError(key, value, "must be a string")
        if not self.folder:
            raise InvalidConfigError("folder", self.folder, "must not be empty")
        if not self.extension.startswith("."):
            raise InvalidConfigError("extension", self.extension, "must start with '.'")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )
        # Lists from TOML are normalised so the dataclass stays hashable.
        blacklist = self.blacklist
        if isinstance(blacklist, str):
            blacklist = parse_blacklist(blacklist)
        object.__setattr__(self, "blacklist", tuple(blacklist))


def merge_blacklist(extra: Iterable[str] = ()) -> frozenset[str]:
    """Union of the built-in blacklist and caller-supplied directory names."""
    return DEFAULT_BLACKLIST | frozenset(extra)


def parse_blacklist(value: Optional[str]) -> tuple[str, ...]:
    """Split a comma-separated list of directory names, dropping blanks."""
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options never mask file values.

    Returns:
        Validated ScanConfig instance

    Raises:
        SfcInsightError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except SfcInsightError:
            raise
        except Exception as e:
            raise SfcInsightError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise SfcInsightError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except SfcInsightError:
            raise
        except Exception as e:
            raise SfcInsightError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    # Handle [scoring] section from TOML
    scoring = merged.pop("scoring", None)
    if scoring is not None:
        if isinstance(scoring, dict):
            try:
                merged["scoring"] = ScoringConfig(**scoring)
            except TypeError as e:
                raise SfcInsightError(f"Invalid [scoring] config: {e}")
        elif isinstance(scoring, ScoringConfig):
            merged["scoring"] = scoring
        else:
            raise InvalidConfigError("scoring", scoring, "expected a table")

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        raise SfcInsightError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SFC_INSIGHT_* environment variables.

    Supported environment variables:
        SFC_INSIGHT_FOLDER: str
        SFC_INSIGHT_BLACKLIST: comma-separated directory names
        SFC_INSIGHT_COMPLEXITY: bool (true/false/1/0)
        SFC_INSIGHT_EXTENSION: str
        SFC_INSIGHT_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any SFC_INSIGHT_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the field type is not env-configurable

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is tuple:
        return parse_blacklist(value)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        SfcInsightError: If no TOML reader is available
        Exception: If TOML parsing fails
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise SfcInsightError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
