# -*- coding: utf-8 -*-
"""Product lookup by barcode (Open Food Facts compatible)."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel

from .config import settings
from .errors import UpstreamUnavailableError, ValidationError

logger = logging.getLogger(__name__)

_BARCODE_RE = re.compile(r"^\d{8,14}$")


class ProductInfo(BaseModel):
    barcode: str
    name: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
    calories_per_100g: Optional[float] = None
    protein_per_100g: Optional[float] = None
    carbs_per_100g: Optional[float] = None
    fat_per_100g: Optional[float] = None


def validate_barcode(barcode: Optional[str]) -> bool:
    return bool(barcode) and bool(_BARCODE_RE.match(barcode.strip()))


def _as_float(value: Any) -> Optional[float]:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _parse_product(barcode: str, product: Dict[str, Any]) -> ProductInfo:
    nutriments = product.get("nutriments") or {}
    categories = product.get("categories") or ""
    category = categories.split(",")[0].strip() if categories else None
    return ProductInfo(
        barcode=barcode,
        name=product.get("product_name") or None,
        brand=(product.get("brands") or "").split(",")[0].strip() or None,
        category=category or None,
        image_url=product.get("image_url") or None,
        calories_per_100g=_as_float(nutriments.get("energy-kcal_100g")),
        protein_per_100g=_as_float(nutriments.get("proteins_100g")),
        carbs_per_100g=_as_float(nutriments.get("carbohydrates_100g")),
        fat_per_100g=_as_float(nutriments.get("fat_100g")),
    )


def lookup_product(barcode: str) -> Optional[ProductInfo]:
    """None when the product is unknown; UpstreamUnavailableError when the lookup fails."""
    barcode = (barcode or "").strip()
    if not validate_barcode(barcode):
        raise ValidationError(f"Invalid barcode: {barcode!r}")
    url = settings.product_lookup_url.format(barcode=barcode)
    try:
        with httpx.Client(timeout=settings.product_timeout, follow_redirects=True) as client:
            resp = client.get(url)
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            data = resp.json()
    except httpx.HTTPStatusError as exc:
        raise UpstreamUnavailableError(f"Product lookup error: {exc.response.status_code}") from exc
    except httpx.RequestError as exc:
        raise UpstreamUnavailableError(f"Product lookup unreachable: {exc}") from exc
    except ValueError as exc:
        raise UpstreamUnavailableError(f"Product lookup returned non-JSON response: {exc}") from exc

    product = data.get("product") if isinstance(data, dict) else None
    if not product or data.get("status") == 0:
        logger.info("Barcode %s not found", barcode)
        return None
    return _parse_product(barcode, product)
