# -*- coding: utf-8 -*-
"""Pantry — storage and orchestration."""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Iterable, List, Optional

from ..barcode import ProductInfo, lookup_product
from ..config import settings
from ..errors import NotFoundError, PulseFitError
from ..notifications import expiry_alert_message, send_notification
from ..profiles.storage import get_profile
from ..records import RecordMeta, RecordStore
from .freshness import (
    classify,
    days_until_expiry,
    expiry_sort_key,
    is_expired,
    is_near_expiry,
    is_running_low,
)
from .models import (
    ExpiryAlert,
    NutritionPer100g,
    PantryAnalytics,
    PantryFields,
    PantryItem,
    PantryItemView,
    PantryUpdate,
)

logger = logging.getLogger(__name__)

pantry_items: RecordStore[PantryItem] = RecordStore("pantry_item", PantryItem)

SHOPPING_EXPIRY_DAYS = 7


# ---------- Pure list operations ----------

def sort_pantry(items: Iterable[PantryItem], today: date) -> List[PantryItem]:
    """Expired first, then by expiry ascending; items without expiry last."""
    return sorted(
        items,
        key=lambda i: (0 if is_expired(i, today) else 1, expiry_sort_key(i, today)),
    )


def expiring_items(items: Iterable[PantryItem], today: date, threshold_days: int) -> List[PantryItem]:
    found = [
        i for i in items
        if not i.finished and (is_expired(i, today) or is_near_expiry(i, today, threshold_days))
    ]
    return sorted(found, key=lambda i: expiry_sort_key(i, today))


def low_stock_items(items: Iterable[PantryItem]) -> List[PantryItem]:
    return [i for i in items if not i.finished and is_running_low(i)]


def shopping_list(items: Iterable[PantryItem], today: date) -> List[str]:
    items = list(items)
    names = {i.name for i in low_stock_items(items)}
    names.update(i.name for i in expiring_items(items, today, SHOPPING_EXPIRY_DAYS))
    return sorted(names)


def pantry_analytics(items: Iterable[PantryItem], today: date) -> PantryAnalytics:
    items = list(items)
    active = [i for i in items if not i.finished]
    categories = Counter(i.category for i in active if i.category)
    return PantryAnalytics(
        total_items=len(active),
        expired_items=sum(1 for i in items if is_expired(i, today)),
        expiring_within_week=sum(1 for i in items if is_near_expiry(i, today, settings.near_expiry_days)),
        low_stock_items=sum(1 for i in items if is_running_low(i)),
        category_breakdown=dict(categories),
        estimated_total_value=round(
            sum(i.estimated_value for i in active if i.estimated_value is not None), 2
        ),
    )


def enrich_from_product(item: PantryItem, product: Optional[ProductInfo]) -> PantryItem:
    """Fill fields the user left empty; never overwrite."""
    if product is None:
        return item
    if item.brand is None:
        item.brand = product.brand
    if item.category is None:
        item.category = product.category
    if item.image_url is None:
        item.image_url = product.image_url
    if item.nutrition_per_100g is None and product.calories_per_100g is not None:
        item.nutrition_per_100g = NutritionPer100g(
            calories=product.calories_per_100g,
            protein=product.protein_per_100g,
            carbs=product.carbs_per_100g,
            fat=product.fat_per_100g,
        )
    return item


# ---------- Storage-backed operations ----------

def list_items(user_id: str, today: Optional[date] = None) -> List[PantryItemView]:
    today = today or date.today()
    return [
        PantryItemView(item=i, freshness=classify(i, today, settings.near_expiry_days))
        for i in sort_pantry(pantry_items.fetch_records(user_id), today)
    ]


def user_items(user_id: str) -> List[PantryItem]:
    return pantry_items.fetch_records(user_id)


def add_item(user_id: str, fields: PantryFields) -> PantryItem:
    logger.info("Adding pantry item for user: %s - %s", user_id, fields.name)
    item = PantryItem(meta=RecordMeta(owner_id=user_id), **fields.model_dump())
    if item.barcode:
        try:
            enrich_from_product(item, lookup_product(item.barcode))
        except PulseFitError as exc:
            logger.warning("Failed to look up product info for barcode %s: %s", item.barcode, exc.message)
    saved = pantry_items.persist(item)
    logger.info("Pantry item added with ID: %s", saved.meta.id)
    return saved


def scan_barcode(user_id: str, barcode: str) -> PantryItem:
    product = lookup_product(barcode)
    if product is None:
        raise NotFoundError(f"Product not found for barcode: {barcode}")
    item = PantryItem(
        meta=RecordMeta(owner_id=user_id),
        name=product.name or barcode,
        quantity=1.0,
        unit="piece",
        barcode=barcode,
    )
    enrich_from_product(item, product)
    return pantry_items.persist(item)


def update_item(user_id: str, item_id: str, updates: PantryUpdate) -> PantryItem:
    item = pantry_items.require(item_id, owner_id=user_id)
    changes = updates.model_dump(exclude_none=True)
    return pantry_items.persist(item.model_copy(update=changes))


def mark_finished(user_id: str, item_id: str) -> PantryItem:
    item = pantry_items.require(item_id, owner_id=user_id)
    item.finished = True
    return pantry_items.persist(item)


def delete_item(user_id: str, item_id: str) -> None:
    pantry_items.require(item_id, owner_id=user_id)
    pantry_items.delete(item_id)


def expiry_alert_type(days: Optional[int], threshold: int) -> Optional[str]:
    """`expired` for days < 0, `expires_tomorrow` for 1, `expires_soon` up to the threshold."""
    if days is None:
        return None
    if days < 0:
        return "expired"
    if days == 1:
        return "expires_tomorrow"
    if days <= threshold:
        return "expires_soon"
    return None


def send_expiry_alerts(user_id: str, today: Optional[date] = None) -> List[ExpiryAlert]:
    """
    Notify about expired items and items expiring within the alert window.

    Delivery problems are logged, never raised.
    """
    today = today or date.today()
    threshold = settings.expiry_alert_days
    profile = get_profile(user_id)
    recipient = profile.email if profile is not None else None
    if not recipient:
        logger.warning("No email on profile for user %s; skipping expiry alerts", user_id)

    alerts: List[ExpiryAlert] = []
    for item in expiring_items(user_items(user_id), today, threshold):
        days = days_until_expiry(item.expiry_date, today)
        alert_type = expiry_alert_type(days, threshold)
        if alert_type is None:
            continue
        sent = False
        if recipient:
            subject, body = expiry_alert_message(
                item.name,
                item.expiry_date,
                days,
                alert_type,
                first_name=profile.display_name,
            )
            try:
                send_notification(recipient, subject, body)
                sent = True
            except Exception as exc:
                logger.error("Failed to send expiry alert to %s: %s", recipient, exc)
        alerts.append(
            ExpiryAlert(
                item_id=item.meta.id,
                item_name=item.name,
                alert_type=alert_type,
                days_until_expiry=days,
                sent=sent,
            )
        )
    return alerts
