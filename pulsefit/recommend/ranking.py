# -*- coding: utf-8 -*-
"""Filter-then-rank helper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Ranked(Generic[T]):
    item: T
    score: float


def rank(
    candidates: Iterable[T],
    *,
    eligible: Callable[[T], bool],
    score: Callable[[T], float],
    limit: Optional[int] = None,
) -> List[Ranked[T]]:
    scored = [Ranked(item=c, score=score(c)) for c in candidates if eligible(c)]
    # sorted() is stable with reverse=True, so ties keep upstream order.
    scored = sorted(scored, key=lambda r: r.score, reverse=True)
    if limit is not None:
        scored = scored[: max(limit, 0)]
    return scored
