"""Saved-color list with two-way sync to the editor's current color.

ColorList owns the palette and the selection. The editor owns one
``CurrentColor`` whose coordinates are what the sliders show:

- Selecting a color copies its coordinates into the current color
  immediately.
- Edits to the current color are written back to the selected entry
  after a short debounce. The editor calls ``current_changed()`` after
  each edit and ``poll_debounce()`` once per frame; the write happens
  once the edits have been quiet for ``debounce`` seconds.
- Switching selection (or adding a color) first flushes a pending write
  so the last edit lands on the color it was made on.
"""

from __future__ import annotations

import enum
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from alch import defaults
from alch.errors import ColorListError
from alch.types import AdaptiveLchColor, create_default_color, create_sample_palette

logger = logging.getLogger(__name__)

_SYNCED_FIELDS = ("nits", "lightness", "chroma", "hue")


@dataclass
class CurrentColor:
    """The color being edited. Mutated in place by the editor."""
    nits: float = defaults.DEFAULT_NITS
    lightness: float = defaults.DEFAULT_LIGHTNESS
    chroma: float = defaults.DEFAULT_CHROMA
    hue: float = defaults.DEFAULT_HUE


class ColorListEvent(enum.Enum):
    """What changed, passed to subscribers."""

    COLORS = "colors"  # added, removed, reordered or renamed
    SELECTION = "selection"  # selected index changed, current color reloaded
    SYNCED = "synced"  # current color written back to the selected entry


def _copy_coordinates(source, target) -> None:
    for name in _SYNCED_FIELDS:
        setattr(target, name, getattr(source, name))


class ColorList:
    """Palette of ``AdaptiveLchColor`` with a single selection.

    Mutations run under a re-entrant lock; subscribers are notified
    after it is released. The list is never allowed to become empty.
    """

    def __init__(
        self,
        current: CurrentColor,
        colors: Optional[list[AdaptiveLchColor]] = None,
        *,
        debounce: float = defaults.COLOR_SYNC_DEBOUNCE,
        _clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.current = current
        self.colors: list[AdaptiveLchColor] = (
            list(colors) if colors else create_sample_palette()
        )
        self.selected_index = 0
        self._debounce = debounce
        self._clock = _clock
        self._lock = threading.RLock()
        self._pending_since: Optional[float] = None
        self._subscribers: list[Callable[[ColorListEvent], None]] = []

        _copy_coordinates(self.colors[0], self.current)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def selected(self) -> Optional[AdaptiveLchColor]:
        if 0 <= self.selected_index < len(self.colors):
            return self.colors[self.selected_index]
        return None

    def has_pending_sync(self) -> bool:
        return self._pending_since is not None

    # ------------------------------------------------------------------
    # List editing
    # ------------------------------------------------------------------

    def add_color(self) -> AdaptiveLchColor:
        """Append a color built from the current coordinates and select it."""
        with self._lock:
            self._flush_locked()
            color = create_default_color(
                self.current.nits,
                self.current.lightness,
                self.current.chroma,
                self.current.hue,
            )
            self.colors.append(color)
            self.selected_index = len(self.colors) - 1
            logger.debug("Added %s (%s)", color.name, color.id)
        self._notify(ColorListEvent.COLORS)
        self._notify(ColorListEvent.SELECTION)
        return color

    def delete_color(self, index: int) -> bool:
        """Remove the color at ``index``. The last remaining color stays."""
        with self._lock:
            if len(self.colors) <= 1 or not 0 <= index < len(self.colors):
                return False
            self._flush_locked()
            previous = self.selected
            removed = self.colors.pop(index)

            if self.selected_index >= len(self.colors):
                self.selected_index = len(self.colors) - 1
            elif self.selected_index > index:
                self.selected_index -= 1

            selection_changed = self.selected is not previous
            if selection_changed:
                _copy_coordinates(self.selected, self.current)
            logger.debug("Deleted %s (%s)", removed.name, removed.id)

        self._notify(ColorListEvent.COLORS)
        if selection_changed:
            self._notify(ColorListEvent.SELECTION)
        return True

    def move_color_up(self, index: int) -> bool:
        """Swap the color at ``index`` with its predecessor."""
        with self._lock:
            if not 0 < index < len(self.colors):
                return False
            self._swap_locked(index - 1, index)
        self._notify(ColorListEvent.COLORS)
        return True

    def move_color_down(self, index: int) -> bool:
        """Swap the color at ``index`` with its successor."""
        with self._lock:
            if not 0 <= index < len(self.colors) - 1:
                return False
            self._swap_locked(index, index + 1)
        self._notify(ColorListEvent.COLORS)
        return True

    def update_color_name(self, index: int, name: str) -> bool:
        with self._lock:
            if not 0 <= index < len(self.colors):
                return False
            self.colors[index].name = name
        self._notify(ColorListEvent.COLORS)
        return True

    # ------------------------------------------------------------------
    # Selection and sync
    # ------------------------------------------------------------------

    def select(self, index: int) -> None:
        """Select ``index`` and load its coordinates into the current color."""
        with self._lock:
            if not 0 <= index < len(self.colors):
                raise ColorListError(
                    f"Color index {index} out of range for {len(self.colors)} colors"
                )
            self._flush_locked()
            self.selected_index = index
            _copy_coordinates(self.colors[index], self.current)
        self._notify(ColorListEvent.SELECTION)

    def current_changed(self) -> None:
        """Note an edit to the current color; restarts the debounce window."""
        with self._lock:
            self._pending_since = self._clock()

    def poll_debounce(self) -> bool:
        """Write back the current color if edits have been quiet long enough.

        Returns whether a write happened.
        """
        with self._lock:
            if self._pending_since is None:
                return False
            if self._clock() - self._pending_since < self._debounce:
                return False
            synced = self._flush_locked()
        if synced:
            self._notify(ColorListEvent.SYNCED)
        return synced

    def flush_pending(self) -> bool:
        """Write back a pending edit immediately."""
        with self._lock:
            synced = self._flush_locked()
        if synced:
            self._notify(ColorListEvent.SYNCED)
        return synced

    def subscribe(self, callback: Callable[[ColorListEvent], None]) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[ColorListEvent], None]) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _swap_locked(self, i: int, j: int) -> None:
        """Swap two neighbours, keeping the selection on the same color."""
        colors = self.colors
        colors[i], colors[j] = colors[j], colors[i]
        if self.selected_index == i:
            self.selected_index = j
        elif self.selected_index == j:
            self.selected_index = i

    def _flush_locked(self) -> bool:
        if self._pending_since is None:
            return False
        self._pending_since = None
        selected = self.selected
        if selected is None:
            return False
        _copy_coordinates(self.current, selected)
        return True

    def _notify(self, event: ColorListEvent) -> None:
        """Call all subscribers, isolating exceptions."""
        for cb in list(self._subscribers):
            try:
                cb(event)
            except Exception:
                logger.warning(
                    "Subscriber %r raised for %s", cb, event, exc_info=True,
                )
