# -*- coding: utf-8 -*-
"""Pantry — API endpoints."""

from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query

from ..deps import get_current_user_id
from .models import (
    ExpiryAlert,
    PantryAnalytics,
    PantryFields,
    PantryItem,
    PantryItemView,
    PantryUpdate,
    ScanRequest,
    ShoppingList,
)
from .service import (
    add_item,
    delete_item,
    expiring_items,
    list_items,
    low_stock_items,
    mark_finished,
    pantry_analytics,
    scan_barcode,
    send_expiry_alerts,
    shopping_list,
    update_item,
    user_items,
)

router = APIRouter(prefix="/api/pantry", tags=["Pantry"])


@router.get("", response_model=List[PantryItemView], summary="Pantry, expired first then by expiry")
def get_pantry(user_id: str = Depends(get_current_user_id)):
    return list_items(user_id)


@router.post("/items", response_model=PantryItem, summary="Add a pantry item")
def post_item(request: PantryFields, user_id: str = Depends(get_current_user_id)):
    return add_item(user_id, request)


@router.post("/scan", response_model=PantryItem, summary="Add an item from a barcode")
def post_scan(request: ScanRequest, user_id: str = Depends(get_current_user_id)):
    return scan_barcode(user_id, request.barcode)


@router.put("/items/{item_id}", response_model=PantryItem, summary="Update a pantry item")
def put_item(item_id: str, request: PantryUpdate, user_id: str = Depends(get_current_user_id)):
    return update_item(user_id, item_id, request)


@router.post("/items/{item_id}/finished", response_model=PantryItem, summary="Mark an item finished")
def post_finished(item_id: str, user_id: str = Depends(get_current_user_id)):
    return mark_finished(user_id, item_id)


@router.delete("/items/{item_id}", summary="Remove a pantry item")
def remove_item(item_id: str, user_id: str = Depends(get_current_user_id)):
    delete_item(user_id, item_id)
    return {"ok": True}


@router.get("/expiring", response_model=List[PantryItem], summary="Expired or near-expiry items")
def get_expiring(
    days: int = Query(default=7, ge=0, le=365),
    user_id: str = Depends(get_current_user_id),
):
    return expiring_items(user_items(user_id), date.today(), days)


@router.get("/low-stock", response_model=List[PantryItem], summary="Items at or below their minimum")
def get_low_stock(user_id: str = Depends(get_current_user_id)):
    return low_stock_items(user_items(user_id))


@router.get("/shopping-list", response_model=ShoppingList, summary="Low-stock and soon-expiring items")
def get_shopping_list(user_id: str = Depends(get_current_user_id)):
    return ShoppingList(items=shopping_list(user_items(user_id), date.today()))


@router.get("/analytics", response_model=PantryAnalytics, summary="Pantry counts and value")
def get_analytics(user_id: str = Depends(get_current_user_id)):
    return pantry_analytics(user_items(user_id), date.today())


@router.post("/expiry-alerts", response_model=List[ExpiryAlert], summary="Send expiry notifications")
def post_expiry_alerts(user_id: str = Depends(get_current_user_id)):
    return send_expiry_alerts(user_id)
