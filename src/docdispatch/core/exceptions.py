"""Domain exceptions for docdispatch.

All library errors inherit from DocdispatchError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Pipeline gate failures are not exceptions: a rejected item is simply
reported as skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class DocdispatchError(Exception):
    """Base class for all docdispatch exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(DocdispatchError):
    """Raised for invalid configuration values.

    Attributes:
        setting: Name of the offending setting, if known.
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """Point at the setting that needs fixing."""
        if self.setting:
            return f"Check the value of '{self.setting}'"
        return None


class ConfigLoadError(ConfigurationError):
    """Raised when a configuration file cannot be read or parsed.

    Attributes:
        config_path: Path to the file that failed to load.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        config_path: Path,
        cause: Exception | None = None,
    ) -> None:
        self.config_path = config_path
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file syntax."""
        return f"Check {self.config_path.name} for TOML syntax errors"
