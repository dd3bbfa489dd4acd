"""
Ranked company preferences.

Members rank the three sponsors they would most like to work for.  The
three ranks draw from the same pool of companies and no company may hold
two ranks at once.  ``choose`` is the only way a selection changes: it
puts a company at a rank and clears whichever other rank held that same
company, so the member is forced to pick a different one there.

An empty string means "no company chosen" and is never treated as a
duplicate.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

RANKS: Tuple[int, ...] = (1, 2, 3)


def _check_rank(rank: int) -> None:
    if rank not in RANKS:
        raise ValueError(f"Rank must be one of {RANKS}, got {rank!r}")


def _normalize(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


class RankedSelection:
    """Immutable mapping from rank (1..3) to a company identifier."""

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[int, object]] = None) -> None:
        values = values or {}
        for rank in values:
            _check_rank(rank)
        self._values: Tuple[str, ...] = tuple(_normalize(values.get(rank)) for rank in RANKS)

    @classmethod
    def from_submission(cls, submission) -> "RankedSelection":
        """Selection stored on a resume book submission, empty if there is none."""
        if submission is None:
            return cls()
        return cls(
            {
                1: submission.preferred_company_1_id,
                2: submission.preferred_company_2_id,
                3: submission.preferred_company_3_id,
            }
        )

    def __getitem__(self, rank: int) -> str:
        _check_rank(rank)
        return self._values[rank - 1]

    def items(self) -> Iterator[Tuple[int, str]]:
        return zip(RANKS, self._values)

    def as_dict(self) -> Dict[str, str]:
        return {str(rank): value for rank, value in self.items()}

    def duplicate_ranks(self) -> List[int]:
        """Ranks whose non-empty value also appears at an earlier rank."""
        seen = set()
        duplicates = []
        for rank, value in self.items():
            if not value:
                continue
            if value in seen:
                duplicates.append(rank)
            seen.add(value)
        return duplicates

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedSelection):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"RankedSelection({dict(self.items())!r})"


def choose(state: RankedSelection, rank: int, value: object) -> RankedSelection:
    """Return a copy of ``state`` with ``value`` placed at ``rank``.

    Any other rank already holding ``value`` is cleared.  Choosing the
    empty value only clears ``rank``.
    """
    _check_rank(rank)
    value = _normalize(value)
    values = {}
    for current_rank, current in state.items():
        if current_rank == rank:
            values[current_rank] = value
        elif value and current == value:
            values[current_rank] = ""
        else:
            values[current_rank] = current
    return RankedSelection(values)
