"""
Overlap detection between a requested range and existing bookings.

Boundaries are inclusive at day granularity: a booking ending on the 15th
conflicts with a request starting on the 15th.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Sequence

import numpy as np

from fleetrate.rental.schema.ranges import DateRange, OccupiedRange
from fleetrate.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityResult:
    """Outcome of an availability check.

    Attributes:
        available: True when no occupied range overlaps the candidate
        conflicts: Overlapping occupied ranges, in the order given
    """

    available: bool
    conflicts: List[OccupiedRange] = field(default_factory=list)

    @property
    def conflict_ids(self) -> List[str]:
        return [c.id for c in self.conflicts]


def ranges_overlap(a: DateRange, b: DateRange) -> bool:
    """Inclusive overlap predicate; symmetric in its arguments."""
    return a.start_date <= b.end_date and a.end_date >= b.start_date


def is_available(candidate: DateRange, occupied: Sequence[OccupiedRange]) -> AvailabilityResult:
    """Check a candidate range against occupied ranges.

    Args:
        candidate: Requested rental range
        occupied: Existing bookings for the vehicle (not modified)

    Returns:
        AvailabilityResult listing every conflicting booking
    """
    conflicts = [occ for occ in occupied if ranges_overlap(candidate, occ)]
    if conflicts:
        logger.debug(
            "%s conflicts with %s", candidate, ", ".join(c.id or str(c) for c in conflicts)
        )
    return AvailabilityResult(available=not conflicts, conflicts=conflicts)


def is_day_occupied(day: DateLike, occupied: Sequence[OccupiedRange]) -> bool:
    """True if ``day`` falls inside any occupied range, endpoints included."""
    d = to_date(day)
    return any(occ.start_date <= d <= occ.end_date for occ in occupied)


class AvailabilityChecker:
    """Answers repeated availability queries against one set of bookings.

    The occupied ranges are captured once as ``datetime64[D]`` arrays so each
    query is a single vectorized comparison.
    """

    def __init__(self, occupied: Sequence[OccupiedRange]):
        self._occupied = tuple(occupied)
        self._starts = np.array([o.start_date for o in self._occupied], dtype="datetime64[D]")
        self._ends = np.array([o.end_date for o in self._occupied], dtype="datetime64[D]")

    @property
    def occupied(self) -> tuple:
        return self._occupied

    def __len__(self) -> int:
        return len(self._occupied)

    def overlap_mask(self, candidate: DateRange) -> np.ndarray:
        """Boolean mask of occupied ranges overlapping ``candidate``."""
        start = np.datetime64(candidate.start_date, "D")
        end = np.datetime64(candidate.end_date, "D")
        return (start <= self._ends) & (end >= self._starts)

    def check(self, candidate: DateRange) -> AvailabilityResult:
        """Same result as :func:`is_available` for the captured bookings."""
        mask = self.overlap_mask(candidate)
        conflicts = [self._occupied[i] for i in np.flatnonzero(mask)]
        return AvailabilityResult(available=not conflicts, conflicts=conflicts)

    def is_day_occupied(self, day: DateLike) -> bool:
        d = np.datetime64(to_date(day), "D")
        return bool(np.any((self._starts <= d) & (d <= self._ends)))

    def occupied_days(self, window: DateRange) -> List[date]:
        """Every day inside ``window`` that is covered by a booking."""
        days = np.arange(
            np.datetime64(window.start_date, "D"),
            np.datetime64(window.end_date, "D") + np.timedelta64(1, "D"),
        )
        if not len(self._occupied) or not len(days):
            return []
        covered = (days[:, None] >= self._starts) & (days[:, None] <= self._ends)
        return days[covered.any(axis=1)].tolist()
