"""Configuration utilities for docdispatch.

This module provides the BatchSender configuration object, project root
discovery and loading of the ``[tool.docdispatch]`` table from
``pyproject.toml``.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

from dateutil.relativedelta import relativedelta

from docdispatch.core.exceptions import ConfigLoadError, ConfigurationError
from docdispatch.core.freshness import ONE_MONTH, FreshnessWindow, is_positive


logger = logging.getLogger(__name__)

DEFAULT_ACCEPTED_FORMATS: frozenset[str] = frozenset({"4.0", "3.1"})


@dataclass(frozen=True, slots=True)
class SenderConfig:
    """Validation rules applied by BatchSender.

    Attributes:
        accepted_formats: Format version tags that may be sent.
        freshness_window: Maximum age of an item, measured from its
            creation timestamp. Defaults to one calendar month.

    Example:
        >>> from datetime import timedelta
        >>> config = SenderConfig(freshness_window=timedelta(days=7))
        >>> "4.0" in config.accepted_formats
        True
    """

    accepted_formats: frozenset[str] = DEFAULT_ACCEPTED_FORMATS
    freshness_window: FreshnessWindow = field(default_factory=lambda: ONE_MONTH)

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        # Accept any iterable of strings but store an immutable set
        object.__setattr__(self, "accepted_formats", frozenset(self.accepted_formats))
        if not self.accepted_formats:
            raise ConfigurationError(
                "accepted_formats cannot be empty", setting="accepted_formats"
            )
        if not isinstance(self.freshness_window, timedelta | relativedelta):
            raise ConfigurationError(
                "freshness_window must be a timedelta or relativedelta",
                setting="freshness_window",
            )
        if not is_positive(self.freshness_window):
            raise ConfigurationError(
                "freshness_window must be positive", setting="freshness_window"
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> SenderConfig:
        """Build a config from a ``[tool.docdispatch]`` style mapping.

        Recognized keys are ``accepted-formats`` (list of strings),
        ``freshness-months`` and ``freshness-days`` (integers). The two
        freshness keys may be combined. Missing keys keep their defaults.

        Args:
            data: The parsed table.

        Returns:
            A validated SenderConfig.

        Raises:
            ConfigurationError: If a value has the wrong type or is invalid.
        """
        kwargs: dict[str, Any] = {}

        formats = data.get("accepted-formats")
        if formats is not None:
            if not isinstance(formats, list) or not all(
                isinstance(f, str) for f in formats
            ):
                raise ConfigurationError(
                    "accepted-formats must be a list of strings",
                    setting="accepted-formats",
                )
            kwargs["accepted_formats"] = frozenset(formats)

        months = data.get("freshness-months")
        days = data.get("freshness-days")
        for key, value in (("freshness-months", months), ("freshness-days", days)):
            if value is not None and (
                not isinstance(value, int) or isinstance(value, bool)
            ):
                raise ConfigurationError(f"{key} must be an integer", setting=key)
        if months is not None or days is not None:
            kwargs["freshness_window"] = relativedelta(
                months=months or 0, days=days or 0
            )

        return cls(**kwargs)


def find_project_root(start: Path | None = None) -> Path:
    """Find the project root directory by walking up from start directory.

    Searches for marker files in the following priority order:
    1. .docdispatch - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.

    Returns:
        Path to project root directory. Returns start directory if no markers found.
    """
    if start is None:
        start = Path.cwd()

    markers = [".docdispatch", "pyproject.toml", ".git"]
    current = start.resolve()

    for parent in [current, *current.parents]:
        for marker in markers:
            if (parent / marker).exists():
                return parent

    return start.resolve()


def load_config(root: Path | None = None) -> SenderConfig:
    """Load SenderConfig from ``pyproject.toml`` at the project root.

    Args:
        root: Project root. If None, discovered with find_project_root().

    Returns:
        The configured SenderConfig, or defaults when there is no
        pyproject.toml or it has no ``[tool.docdispatch]`` table.

    Raises:
        ConfigLoadError: If pyproject.toml exists but is not valid TOML.
        ConfigurationError: If the table holds invalid values.
    """
    if root is None:
        root = find_project_root()

    pyproject = root / "pyproject.toml"
    if not pyproject.is_file():
        logger.debug("No pyproject.toml under %s, using default config", root)
        return SenderConfig()

    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(
            f"Could not parse {pyproject}", config_path=pyproject, cause=e
        ) from e

    table = data.get("tool", {}).get("docdispatch")
    if table is None:
        return SenderConfig()

    config = SenderConfig.from_mapping(table)
    logger.debug("Loaded config from %s: %s", pyproject, config)
    return config
