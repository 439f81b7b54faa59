# -*- coding: utf-8 -*-
"""Notification outbox.

Every message lands in the `notifications` table; when a webhook is configured it is
also posted there, and the row is marked delivered on success.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple
from uuid import uuid4

import httpx
from pydantic import BaseModel

from .app_db import db_conn
from .config import settings
from .records import utc_now

logger = logging.getLogger(__name__)


class Notification(BaseModel):
    id: str
    recipient: str
    subject: str
    body: str
    created_at: str
    delivered: bool = False


def _deliver(notification: Notification) -> bool:
    url = settings.notify_webhook_url
    if not url:
        return False
    try:
        with httpx.Client(timeout=10, follow_redirects=True) as client:
            resp = client.post(url, json=notification.model_dump())
            resp.raise_for_status()
        return True
    except httpx.HTTPError as exc:
        logger.error("Notification %s not delivered: %s", notification.id, exc)
        return False


def send_notification(recipient: str, subject: str, body: str) -> Notification:
    notification = Notification(
        id=str(uuid4()),
        recipient=recipient,
        subject=subject,
        body=body,
        created_at=utc_now().isoformat(),
    )
    notification.delivered = _deliver(notification)
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT INTO notifications (id, recipient, subject, body, created_at, delivered) VALUES (?, ?, ?, ?, ?, ?)",
            (
                notification.id,
                notification.recipient,
                notification.subject,
                notification.body,
                notification.created_at,
                1 if notification.delivered else 0,
            ),
        )
    logger.info("Queued notification %s for %s", notification.id, recipient)
    return notification


def list_notifications(recipient: str) -> List[Notification]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM notifications WHERE recipient = ? ORDER BY created_at ASC",
            (recipient,),
        ).fetchall()
    return [
        Notification(
            id=row["id"],
            recipient=row["recipient"],
            subject=row["subject"],
            body=row["body"],
            created_at=row["created_at"],
            delivered=bool(row["delivered"]),
        )
        for row in rows
    ]


# ---------- Pantry expiry templates ----------

def expiry_alert_message(
    item_name: str,
    expiry: Optional[date],
    days: Optional[int],
    alert_type: str,
    first_name: Optional[str] = None,
) -> Tuple[str, str]:
    """Subject and body for an expiry alert (`expires_tomorrow`, `expires_soon` or `expired`)."""
    when = expiry.isoformat() if expiry else "unknown date"
    if alert_type == "expires_tomorrow":
        subject = f"{item_name} expires tomorrow!"
        text = f"Your {item_name} is expiring tomorrow ({when}). Consider using it in a recipe today!"
    elif alert_type == "expires_soon":
        subject = f"{item_name} expires in {days} days"
        text = f"Your {item_name} will expire in {days} days ({when}). Plan to use it soon to avoid waste!"
    elif alert_type == "expired":
        subject = f"{item_name} has expired"
        text = f"Your {item_name} expired on {when}. Please check and remove it from your pantry for safety."
    else:
        subject = f"Pantry Alert: {item_name}"
        text = f"Please check your {item_name} in your pantry."
    greeting = f"Hi {first_name},\n\n" if first_name else "Hi,\n\n"
    return subject, greeting + text + "\n\nBest regards,\nPulseFit"
