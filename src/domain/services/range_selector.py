"""Dual-handle index range selector.

State machine over an ordered series whose length N is known only after a
fetch completes:

    uninitialized ──load(n > 0)──▶ initialized ──load(n')──▶ initialized (clamped)
                                        │
                    begin_drag(handle) ─┼─ drag_to(pos)* ─ end_drag()

Invariants after every transition (for N > MIN_WINDOW):
    0 ≤ start_index ≤ end_index ≤ N − 1
    end_index − start_index ≥ MIN_WINDOW

For series with N − 1 < MIN_WINDOW the bounds take precedence and the
selection covers the whole series.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TypeVar

from src.domain.models.enums import DefaultWindow, DragHandle
from src.domain.models.selection import SelectionRange

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_WINDOW = 30


class RangeSelector:
    """Selection state for one view's time slider.

    The default window applies only to the first load; afterwards the
    user's selection is preserved and clamped into the new bounds.
    """

    def __init__(
        self,
        default_window: DefaultWindow = DefaultWindow.FULL,
        min_window: int = MIN_WINDOW,
    ) -> None:
        self.default_window = default_window
        self.min_window = min_window
        self._length = 0
        self._range: SelectionRange | None = None
        self._dragging: DragHandle | None = None

    # ------------------------------------------------------------------ #
    # State                                                                #
    # ------------------------------------------------------------------ #

    @property
    def initialized(self) -> bool:
        return self._range is not None

    @property
    def length(self) -> int:
        return self._length

    @property
    def dragging(self) -> DragHandle | None:
        return self._dragging

    @property
    def selection(self) -> SelectionRange | None:
        return self._range

    def load(self, length: int) -> SelectionRange | None:
        """Adopt a new series length.

        First non-empty load initializes to the default window.  Later loads
        clamp end_index to the new maximum, then pull start_index down only if
        the minimum window would otherwise be violated.  A range narrower than
        the minimum window (left over from a short series) is widened once
        the series is long enough.  A zero length leaves
        the current state untouched.
        """
        if length <= 0:
            return self._range

        self._length = length
        max_index = length - 1

        if self._range is None:
            start, end = self.default_window.initial_range(length)
            self._range = SelectionRange(start_index=start, end_index=end)
            logger.debug("Range initialized to [%d, %d] (%s)", start, end, self.default_window.value)
            return self._range

        start, end = self._range.start_index, self._range.end_index
        if end > max_index:
            end = max_index
        if start > end - self.min_window:
            start = max(0, min(start, end - self.min_window))
        # A range adopted from a short series widens once the series allows it.
        if end - start < self.min_window and max_index >= self.min_window:
            end = min(max_index, start + self.min_window)
            start = max(0, min(start, end - self.min_window))
        self._range = SelectionRange(start_index=start, end_index=end)
        return self._range

    # ------------------------------------------------------------------ #
    # Drag gestures                                                        #
    # ------------------------------------------------------------------ #

    def begin_drag(self, handle: DragHandle | str) -> None:
        self._dragging = DragHandle(handle)

    def end_drag(self) -> None:
        self._dragging = None

    def pointer_index(self, relative_position: float) -> int:
        """Map a horizontal fraction across the track to a series index."""
        fraction = min(max(relative_position, 0.0), 1.0)
        return math.floor(fraction * self._length)

    def drag_to(self, relative_position: float) -> SelectionRange | None:
        """Move the handle being dragged; ignored when no drag is active."""
        if self._dragging is None or self._range is None:
            return self._range
        return self.move_handle(self._dragging, self.pointer_index(relative_position))

    def move_handle(self, handle: DragHandle | str, index: int) -> SelectionRange | None:
        """Place one handle at `index`, clamped against bounds and the other handle.

        start = max(0, min(index, end − MIN_WINDOW))
        end   = min(N − 1, max(index, start + MIN_WINDOW))
        """
        if self._range is None:
            return None

        handle = DragHandle(handle)
        start, end = self._range.start_index, self._range.end_index
        if handle == DragHandle.START:
            start = max(0, min(index, end - self.min_window))
        else:
            end = min(self._length - 1, max(index, start + self.min_window))
        self._range = SelectionRange(start_index=start, end_index=end)
        return self._range

    # ------------------------------------------------------------------ #
    # Derived values                                                       #
    # ------------------------------------------------------------------ #

    def effective_range(self, length: int | None = None) -> tuple[int, int]:
        """(start, end) to display; the default window before initialization."""
        length = self._length if length is None else length
        if self._range is None:
            return self.default_window.initial_range(length)
        return self._range.start_index, self._range.end_index

    def handle_positions(self) -> tuple[float, float]:
        """Left/right handle positions as percentages of the track width.

        Denominator is max(N − 1, 1) so degenerate series never divide by zero.
        """
        if self._length == 0:
            return 0.0, 0.0
        start, end = self.effective_range()
        max_index = self._length - 1
        start = max(0, min(start, max_index))
        end = max(0, min(end, max_index))
        denominator = max(max_index, 1)
        return start / denominator * 100.0, end / denominator * 100.0

    def window(self, series: Sequence[T]) -> list[T]:
        """Inclusive slice of `series` covered by the selection."""
        if not series:
            return []
        start, end = self.effective_range(len(series))
        return list(series[max(0, start): min(len(series), end + 1)])
