# -*- coding: utf-8 -*-
"""
Pantry freshness classifier

Pure, per item. Finished items are the caller's business: nothing here looks at the
`finished` flag.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Optional

from .models import Freshness, PantryItem


def days_until_expiry(expiry_date: Optional[date], today: date) -> Optional[int]:
    """Whole days from today to expiry; None for an item that never expires."""
    if expiry_date is None:
        return None
    return (expiry_date - today).days


def expiry_sort_key(item: PantryItem, today: date) -> float:
    days = days_until_expiry(item.expiry_date, today)
    return math.inf if days is None else float(days)


def is_expired(item: PantryItem, today: date) -> bool:
    days = days_until_expiry(item.expiry_date, today)
    return days is not None and days < 0


def is_near_expiry(item: PantryItem, today: date, threshold_days: int) -> bool:
    days = days_until_expiry(item.expiry_date, today)
    return days is not None and 0 <= days <= threshold_days


def is_running_low(item: PantryItem) -> bool:
    if item.quantity is None or item.minimum_quantity is None:
        return False
    return item.quantity <= item.minimum_quantity


def classify(item: PantryItem, today: date, threshold_days: int) -> Freshness:
    return Freshness(
        days_until_expiry=days_until_expiry(item.expiry_date, today),
        expired=is_expired(item, today),
        near_expiry=is_near_expiry(item, today, threshold_days),
        running_low=is_running_low(item),
    )
