"""Bounded, ordered sets of fallback family identifiers."""

from __future__ import annotations

from collections.abc import Iterator

from fontindex.types import FamilyId


MAX_FALLBACKS = 16


class Fallbacks:
    """Insertion-ordered, deduplicated set of families with a fixed capacity.

    Sizes stay tiny, so membership is a linear scan over the stored ids.
    Once frozen, ``push`` refuses every family.
    """

    __slots__ = ("_capacity", "_frozen", "_ids")

    def __init__(self, capacity: int = MAX_FALLBACKS) -> None:
        if capacity < 1:
            raise ValueError("Fallback capacity must be at least 1.")
        self._capacity = capacity
        self._ids: list[FamilyId] = []
        self._frozen = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> Fallbacks:
        """Reject further pushes and return ``self``."""
        self._frozen = True
        return self

    def copy(self) -> Fallbacks:
        """Return an unfrozen copy with the same capacity and families."""
        clone = Fallbacks(self._capacity)
        clone._ids = list(self._ids)
        return clone

    def push(self, family: FamilyId) -> bool:
        """Append ``family``; return False when it is a duplicate or cannot be stored."""
        if self._frozen or len(self._ids) >= self._capacity or family in self._ids:
            return False
        self._ids.append(family)
        return True

    def get(self) -> tuple[FamilyId, ...]:
        return tuple(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[FamilyId]:
        return iter(tuple(self._ids))

    def __contains__(self, family: object) -> bool:
        return family in self._ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fallbacks):
            return NotImplemented
        return self._ids == other._ids

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        ids = ", ".join(str(int(family)) for family in self._ids)
        return f"Fallbacks([{ids}])"


__all__ = ["MAX_FALLBACKS", "Fallbacks"]
