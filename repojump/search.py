"""Keyword search over scanned repositories.

Names and keywords go through the same ``normalize`` step so naming variants
(``Foo_Bar`` vs ``foo-bar``) rank identically.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass

from .logging import get_logger
from .matcher import Match, match
from .scanner import Repo

logger = get_logger(__name__)


@dataclass(frozen=True)
class FoundRepo:
    repo: Repo
    matched: Match


def normalize(text: str) -> str:
    """Lowercase and fold ``_`` to ``-`` and ``+`` to ``=``."""
    return text.lower().replace("_", "-").replace("+", "=")


class SearchIndex:
    """Read-only repository collection searchable by keyword.

    The collection is fixed at construction, so concurrent ``search`` calls
    need no locking.
    """

    def __init__(self, repos: Iterable[Repo]) -> None:
        self._repos: tuple[Repo, ...] = tuple(repos)
        self._normalized_names: tuple[str, ...] = tuple(normalize(repo.name) for repo in self._repos)

    def __len__(self) -> int:
        return len(self._repos)

    @property
    def repos(self) -> tuple[Repo, ...]:
        return self._repos

    def search(self, keyword: str) -> list[FoundRepo]:
        """Return matching repos ordered by ascending match distance.

        The sort is stable, so equal distances keep collection order.
        """
        started = time.perf_counter()
        needle = normalize(keyword)
        found: list[FoundRepo] = []
        for repo, name in zip(self._repos, self._normalized_names):
            result = match(needle, name)
            if isinstance(result, Match):
                found.append(FoundRepo(repo=repo, matched=result))
        found.sort(key=lambda item: item.matched.distance)
        logger.debug(
            "search finished",
            keyword=keyword,
            matches=len(found),
            elapsed_ms=round((time.perf_counter() - started) * 1000.0, 2),
        )
        return found


__all__ = ["FoundRepo", "SearchIndex", "normalize"]
