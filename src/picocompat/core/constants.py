# src/picocompat/core/constants.py
"""Process-wide legacy constants.

API v0 plugins read a handful of directory constants (ROOT_DIR,
PLUGINS_DIR, ...) that the host stopped defining long ago. They are
defined once per process; later definitions are silently ignored, the
same way a constant cannot be redefined.

Usage:
    from picocompat.core.constants import get_constants

    constants = get_constants()
    constants.define("ROOT_DIR", "/srv/site/")
    constants.define("ROOT_DIR", "/elsewhere/")  # no-op, returns False
    constants["ROOT_DIR"]  # "/srv/site/"
"""

import threading
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from picocompat.core.logging import get_logger

if TYPE_CHECKING:
    from picocompat.core.config import CompatSettings

logger = get_logger(__name__)

# Constants API v0 plugins may rely on, in definition order
CONFIG_CONSTANT_NAMES: tuple[str, ...] = (
    "ROOT_DIR",
    "CONFIG_DIR",
    "LIB_DIR",
    "PLUGINS_DIR",
    "THEMES_DIR",
    "CONTENT_DIR",
    "CONTENT_EXT",
    "CACHE_DIR",
)


class LegacyConstants(Mapping[str, Any]):
    """Write-once mapping of named constants.

    Read access follows the Mapping protocol. The only write operation is
    define(), which never overwrites an existing name.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._lock = threading.Lock()

    def define(self, name: str, value: Any) -> bool:
        """Define a constant unless it already exists.

        Args:
            name: Constant name
            value: Constant value

        Returns:
            True if the constant was defined, False if it already existed
        """
        with self._lock:
            if name in self._values:
                return False
            self._values[name] = value
        logger.debug("Legacy constant defined", name=name, value=value)
        return True

    def is_defined(self, name: str) -> bool:
        return name in self._values

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


def define_config_constants(constants: LegacyConstants, settings: "CompatSettings") -> None:
    """Define the directory constants API v0 plugins expect.

    ROOT_DIR, LIB_DIR, PLUGINS_DIR, THEMES_DIR, CONTENT_EXT and CACHE_DIR
    were removed with API v1, CONTENT_DIR existed in API v0 only and
    CONFIG_DIR existed for a short time in between.
    """
    values = {
        "ROOT_DIR": settings.root_dir,
        "CONFIG_DIR": settings.config_dir,
        "LIB_DIR": settings.resolved_lib_dir,
        "PLUGINS_DIR": settings.plugins_dir,
        "THEMES_DIR": settings.themes_dir,
        "CONTENT_DIR": settings.content_dir,
        "CONTENT_EXT": settings.content_ext,
        "CACHE_DIR": settings.cache_dir,
    }
    for name in CONFIG_CONSTANT_NAMES:
        constants.define(name, values[name])


# Module-level singleton
_constants: LegacyConstants | None = None


def get_constants() -> LegacyConstants:
    """Get the process-wide constants (created on first use)."""
    global _constants

    if _constants is None:
        _constants = LegacyConstants()
    return _constants
