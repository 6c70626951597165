"""Approximate substring matching for repository names.

``match`` finds the span of ``target`` that best resembles ``keyword``.
Characters may be dropped from either end of the keyword ("windowing"); each
dropped character costs one point on top of the span's edit distance.

Windows are explored in a fixed order, and that order is also the tie-break:
``(left, right)`` trims of total ``k`` are tried as ``(k, 0), (k-1, 1), ...,
(0, k)`` before moving to ``k + 1``. Within one window, candidate spans are
generated for every occurrence of the clipped keyword's first character
paired with every later occurrence of its last character, starts ascending
then ends ascending. The first candidate with the minimum total distance wins.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """Matched code-point span ``[start, start + length)`` of the target."""

    start: int
    length: int
    distance: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class NoMatch:
    pass


NO_MATCH = NoMatch()

MatchResult = Match | NoMatch


def levenshtein(a: str, b: str) -> int:
    """Return the edit distance between ``a`` and ``b`` over code points."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        current = [i]
        for j, ch_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ch_a != ch_b),
                )
            )
        previous = current
    return previous[-1]


def exclusion_windows(keyword_length: int) -> Iterator[tuple[int, int]]:
    """Yield ``(left, right)`` trims in exploration order.

    Stops before a window would leave no characters of the keyword.
    """
    for penalty in range(keyword_length):
        for left in range(penalty, -1, -1):
            yield left, penalty - left


def _positions(target: str, ch: str) -> list[int]:
    return [idx for idx, candidate in enumerate(target) if candidate == ch]


def _candidate_spans(clipped: str, target: str) -> Iterator[tuple[int, int]]:
    starts = _positions(target, clipped[0])
    if not starts:
        return
    if len(clipped) == 1:
        for start in starts:
            yield start, start
        return
    ends = _positions(target, clipped[-1])
    for start in starts:
        for end in ends:
            if start < end:
                yield start, end


def match(keyword: str, target: str) -> MatchResult:
    """Return the best approximate match of ``keyword`` inside ``target``.

    An empty keyword never matches. A keyword that occurs verbatim in the
    target always yields distance ``0`` at its first occurrence.
    """
    if not keyword:
        return NO_MATCH

    best: Match | None = None
    inspected: set[tuple[int, int]] = set()
    for left, right in exclusion_windows(len(keyword)):
        penalty = left + right
        # Every candidate of this window costs at least ``penalty``.
        if best is not None and best.distance <= penalty:
            break

        clipped = keyword[left : len(keyword) - right]
        for start, end in _candidate_spans(clipped, target):
            if (start, end) in inspected:
                continue
            inspected.add((start, end))
            distance = levenshtein(target[start : end + 1], clipped) + penalty
            if best is None or distance < best.distance:
                best = Match(start=start, length=end - start + 1, distance=distance)

    return best if best is not None else NO_MATCH


__all__ = [
    "Match",
    "MatchResult",
    "NO_MATCH",
    "NoMatch",
    "exclusion_windows",
    "levenshtein",
    "match",
]
