"""Grid layout of a family tree around a start person."""

import logging

from graph import neighbour_layers
from models import Layer, LayerKnowledge, MinMax
from store import PersonStore, StoreError

logger = logging.getLogger("famgrid.layout")

# Levels walked on top of max_hops; spouses share a row and do not use up
# a hop.
EXTRA_LEVELS = 3


class StaleRelationError(StoreError):
    def __init__(self, person_id: int):
        super().__init__(f"Layout reached removed person {person_id} through a stale relation")
        self.person_id = person_id


class RowIntervals:
    """
    Claimed column span per row, for rows -max_hops..max_hops.

    Each claimed row keeps the nearest free column on either side of its
    span. Rows >= 0 and rows < 0 live in separate lists.
    """

    def __init__(self, max_hops: int):
        self.max_hops = max_hops
        self._pos: list[MinMax | None] = [None] * (max_hops + 1)
        self._neg: list[MinMax | None] = [None] * max_hops

    def _lookup(self, row: int) -> tuple[list[MinMax | None], int]:
        if abs(row) > self.max_hops:
            raise IndexError(f"Row {row} is outside +/-{self.max_hops}")
        if row < 0:
            return self._neg, -row - 1
        return self._pos, row

    def interval(self, row: int) -> MinMax | None:
        rows, i = self._lookup(row)
        return rows[i]

    def claim(self, row: int, col: int) -> int:
        """Claim a column on `row` as close to `col` as allowed and return it."""
        rows, i = self._lookup(row)
        mm = rows[i]
        if mm is None:
            rows[i] = MinMax(col - 1, col + 1)
            return col

        if mm.min < col < mm.max:
            # Taken: snap to the nearer free edge, ties go right
            if mm.max - col <= col - mm.min:
                col = mm.max
                mm.max += 1
            else:
                col = mm.min
                mm.min -= 1
        elif col <= mm.min:
            mm.min = col - 1
        else:
            mm.max = col + 1
        return col


def compute_layout(store: PersonStore, start: int, max_hops: int) -> list[Layer]:
    """
    Place `start` at (0, 0) and everyone reachable within `max_hops` rows.

    The relationship graph is walked level by level. Each person is placed
    at most once, the first time it is popped; people whose row falls
    outside +/-max_hops are dropped and not expanded further.

    Args:
        store: The persons and their relations
        start: ID of the person at the origin
        max_hops: Maximum distance in rows from the start person

    Returns:
        Placements in the order they were resolved, start first
    """
    if max_hops < 0:
        raise ValueError(f"max_hops must be non-negative, got {max_hops}")

    origin = Layer(0, 0, start, LayerKnowledge.KNOWN_BOTH)
    intervals = RowIntervals(max_hops)
    intervals.claim(0, 0)
    placed = [origin]
    visited = {start}

    current = neighbour_layers(origin, store.get(start).rels)
    next_layers: list[Layer] = []

    for _ in range(EXTRA_LEVELS + max_hops):
        while current:
            candidate = current.pop()
            if candidate.person_id in visited:
                continue
            visited.add(candidate.person_id)

            if not store.is_active(candidate.person_id):
                raise StaleRelationError(candidate.person_id)
            if abs(candidate.row) > max_hops:
                continue

            col = intervals.claim(candidate.row, candidate.col)
            layer = Layer(candidate.row, col, candidate.person_id, candidate.known)
            placed.append(layer)

            person = store.get_unchecked(layer.person_id)
            next_layers.extend(neighbour_layers(layer, person.rels))
        current, next_layers = next_layers, current

    logger.debug(
        "laid out %d of %d visited persons from %d (max_hops=%d)",
        len(placed),
        len(visited),
        start,
        max_hops,
    )
    return placed
