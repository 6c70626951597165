"""Repository discovery across configured scan roots.

Each root is listed on its own worker thread. A root that cannot be listed
is reported in ``ScanResult.not_found`` instead of failing the scan, and a
bad entry inside a readable root is skipped.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from .logging import get_logger

MAX_SCAN_WORKERS = 8
MAX_CONSECUTIVE_ENTRY_ERRORS = 8

logger = get_logger(__name__)


@dataclass(frozen=True)
class Repo:
    path: Path
    name: str


@dataclass(frozen=True)
class Found:
    root: Path
    repos: list[Repo]


@dataclass(frozen=True)
class NotFound:
    root: Path


ScanOutcome = Found | NotFound


class ScanResult(NamedTuple):
    repos: list[Repo]
    not_found: list[Path]


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def list_root(root: Path, *, directories_only: bool = False) -> ScanOutcome:
    """List the immediate entries of one scan root as repositories."""
    listing_root = root.expanduser().absolute()
    try:
        entries = os.scandir(listing_root)
    except OSError as exc:
        logger.warning("scan root unreadable", root=str(root), error=str(exc))
        return NotFound(root)

    repos: list[Repo] = []
    consecutive_errors = 0
    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as exc:
                consecutive_errors += 1
                logger.debug("skipping unreadable entry", root=str(root), error=str(exc))
                if consecutive_errors >= MAX_CONSECUTIVE_ENTRY_ERRORS:
                    logger.warning("abandoning scan root after repeated entry errors", root=str(root))
                    break
                continue
            consecutive_errors = 0
            if directories_only and not _is_directory(entry):
                continue
            repos.append(Repo(path=listing_root / entry.name, name=entry.name))

    repos.sort(key=lambda repo: (repo.name.casefold(), repo.name))
    logger.debug("scan root listed", root=str(root), repos=len(repos))
    return Found(root, repos)


def unique_roots(roots: Iterable[Path]) -> list[Path]:
    """Drop repeated roots, keeping the first occurrence order."""
    seen: set[Path] = set()
    out: list[Path] = []
    for root in roots:
        root = Path(root)
        if root in seen:
            continue
        seen.add(root)
        out.append(root)
    return out


def scan(roots: Iterable[Path], *, directories_only: bool = False) -> ScanResult:
    """Scan every root concurrently and merge the outcomes.

    Only set membership of the result is meaningful; ordering follows root
    order but is not part of the contract.
    """
    targets = unique_roots(roots)
    if not targets:
        return ScanResult(repos=[], not_found=[])

    max_workers = min(MAX_SCAN_WORKERS, len(targets))
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="repojump-scan") as executor:
        futures = [
            executor.submit(list_root, root, directories_only=directories_only)
            for root in targets
        ]
        outcomes = [future.result() for future in futures]

    repos: list[Repo] = []
    not_found: list[Path] = []
    for outcome in outcomes:
        if isinstance(outcome, NotFound):
            not_found.append(outcome.root)
        else:
            repos.extend(outcome.repos)

    logger.info("scan finished", roots=len(targets), repos=len(repos), not_found=len(not_found))
    return ScanResult(repos=repos, not_found=not_found)


__all__ = [
    "Found",
    "NotFound",
    "Repo",
    "ScanOutcome",
    "ScanResult",
    "list_root",
    "scan",
    "unique_roots",
]
