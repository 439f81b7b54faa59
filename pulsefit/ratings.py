# -*- coding: utf-8 -*-
"""Rating aggregate shared by recipes and workout plans."""

from __future__ import annotations

import math
from typing import Dict

from pydantic import BaseModel, Field

from .errors import InvalidRatingError

MIN_RATING = 1.0
MAX_RATING = 5.0


def _empty_distribution() -> Dict[int, int]:
    return {star: 0 for star in range(1, 6)}


class RatingAggregate(BaseModel):
    average: float = Field(0.0, ge=0)
    count: int = Field(0, ge=0)
    distribution: Dict[int, int] = Field(default_factory=_empty_distribution)

    def add_rating(self, rating: float) -> "RatingAggregate":
        """Fold one rating into the running mean.

        Raises InvalidRatingError (leaving the aggregate untouched) outside [1.0, 5.0].
        """
        if rating is None or not (MIN_RATING <= rating <= MAX_RATING):
            raise InvalidRatingError(rating)
        bucket = int(math.floor(rating + 0.5))
        total = self.average * self.count + rating
        self.count += 1
        self.average = total / self.count
        self.distribution[bucket] = self.distribution.get(bucket, 0) + 1
        return self
