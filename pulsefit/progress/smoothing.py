# -*- coding: utf-8 -*-
"""Daily calorie totals and their 7-day rolling mean."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from ..nutrition.models import NutritionEntry
from .models import DailyCalories

ROLLING_DAYS = 7


def _clean(value: float) -> Optional[float]:
    if value is None or np.isnan(value):
        return None
    return round(float(value), 2)


def rolling_calories(entries: Iterable[NutritionEntry], today: date, window_days: int) -> List[DailyCalories]:
    """
    One row per calendar day in (today - window_days, today].

    Days without a logged calorie value stay empty and are skipped by the rolling mean
    rather than counted as zero intake.
    """
    start = today - timedelta(days=window_days - 1)
    rows = [
        {"date": pd.Timestamp(e.date), "calories": e.calories}
        for e in entries
        if e.calories is not None and start <= e.date <= today
    ]
    index = pd.date_range(start=pd.Timestamp(start), end=pd.Timestamp(today), freq="D")
    if rows:
        df = pd.DataFrame(rows)
        daily = df.groupby("date")["calories"].sum().reindex(index)
    else:
        daily = pd.Series(np.nan, index=index, dtype=float)
    rolling = daily.rolling(window=ROLLING_DAYS, min_periods=1).mean()

    return [
        DailyCalories(date=ts.date(), calories=_clean(total), rolling_mean_7d=_clean(mean))
        for ts, total, mean in zip(index, daily.to_numpy(), rolling.to_numpy())
    ]
