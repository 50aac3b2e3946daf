"""Start/end range selection driven by successive day picks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from date_range import DateRange


@dataclass(frozen=True)
class SelectionState:
    """Empty (no start), partial (start only) or complete (start and end)."""

    start: date | None = None
    end: date | None = None

    @property
    def is_empty(self) -> bool:
        return self.start is None

    @property
    def is_partial(self) -> bool:
        return self.start is not None and self.end is None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, day: date) -> bool:
        """True if ``day`` is part of the highlighted selection."""
        if self.is_complete:
            return self.start <= day <= self.end
        if self.is_partial:
            return day == self.start
        return False

    def as_date_range(self) -> DateRange | None:
        if not self.is_complete:
            return None
        return DateRange(self.start, self.end)


EMPTY = SelectionState()


def advance(state: SelectionState, day: date) -> SelectionState:
    """Return the state after picking ``day``.

    A pick on or after a pending start completes the range; an earlier pick
    becomes the new start. Any pick after a complete range starts over.
    """
    if state.is_partial and day >= state.start:
        return SelectionState(state.start, day)
    return SelectionState(day)


class RangeSelection:
    """Mutable holder for the selection of one range-mode picker."""

    def __init__(self) -> None:
        self.state: SelectionState = EMPTY

    def pick(self, day: date) -> SelectionState:
        self.state = advance(self.state, day)
        return self.state

    def contains(self, day: date) -> bool:
        return self.state.contains(day)

    def clear(self) -> None:
        self.state = EMPTY
