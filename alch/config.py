"""Display capabilities, fixed once per process.

The host decides at startup whether the display handles a wide gamut
(media query, platform API, user setting) and hands the answer to
``configure_display``. The first read freezes the configuration; after
that it never changes for the session.

Code that wants to stay independent of this process state can build a
``ColorConverter`` with an explicit ``GamutPolicy`` instead.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from alch.colorspace.gamut import GamutPolicy, policy_for
from alch.errors import DisplayConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayConfig:
    """Capabilities of the display colors are produced for."""
    wide_gamut: bool = False

    @property
    def gamut_policy(self) -> GamutPolicy:
        return policy_for(self.wide_gamut)


_lock = threading.Lock()
_config: DisplayConfig | None = None


def configure_display(wide_gamut: bool) -> DisplayConfig:
    """Record the display capability. Call once, before any conversion.

    Repeating the same value is harmless; a different value raises
    ``DisplayConfigError``.
    """
    global _config
    requested = DisplayConfig(wide_gamut=bool(wide_gamut))
    with _lock:
        if _config is None:
            _config = requested
            logger.info("Display configured: wide_gamut=%s", requested.wide_gamut)
        elif _config != requested:
            raise DisplayConfigError(
                f"Display already configured with wide_gamut={_config.wide_gamut}, "
                f"cannot change to {requested.wide_gamut}"
            )
        return _config


def get_display_config() -> DisplayConfig:
    """Current display configuration, freezing the sRGB default if unset."""
    global _config
    if _config is None:
        with _lock:
            if _config is None:
                _config = DisplayConfig()
                logger.info("Display not configured, assuming sRGB only")
    return _config


def active_gamut_policy() -> GamutPolicy:
    """Gamut policy of the configured display."""
    return get_display_config().gamut_policy


def _reset_display_config() -> None:
    """Forget the configuration. Test hook only."""
    global _config
    with _lock:
        _config = None
