# -*- coding: utf-8 -*-
"""Tracking — start / append / end orchestration."""

from __future__ import annotations

import logging
from datetime import timezone

from ..errors import TrackingConflictError, TrackingNotActiveError
from ..records import utc_now
from ..routes import LocationSample, compute_route_metrics
from ..workouts.models import SESSION_COMPLETED, SESSION_GPS_TRACKING
from ..workouts.storage import get_user_session, save_session
from . import storage
from .models import ActiveTracking, PointAck, TrackingResult, TrackingStatus

logger = logging.getLogger(__name__)


def start_tracking(user_id: str, session_id: str) -> ActiveTracking:
    """Claim the user's single tracking slot for `session_id`; restarting the same session is a no-op."""
    session = get_user_session(user_id, session_id)
    active = storage.claim_active(user_id, session_id, utc_now())
    if active.session_id != session_id:
        raise TrackingConflictError(
            f"GPS tracking already active for session {active.session_id}"
        )
    if session.status != SESSION_GPS_TRACKING:
        session.status = SESSION_GPS_TRACKING
        session.start_time = active.started_at
        save_session(session)
        logger.info("Started GPS tracking for user %s, session %s", user_id, session_id)
    return active


def add_point(user_id: str, session_id: str, sample: LocationSample) -> PointAck:
    accepted = storage.append_point(user_id, session_id, sample)
    if accepted is None:
        raise TrackingNotActiveError(f"No active GPS tracking for session {session_id}")
    if not accepted:
        logger.debug("Duplicate GPS point ignored for session %s", session_id)
    return PointAck(
        session_id=session_id,
        accepted=accepted,
        total_points=storage.count_points(session_id),
    )


def end_tracking(user_id: str, session_id: str) -> TrackingResult:
    route = storage.release_active(user_id, session_id)
    if route is None:
        raise TrackingNotActiveError(f"No active GPS tracking for session {session_id}")
    session = get_user_session(user_id, session_id)
    metrics = compute_route_metrics(route)

    ended = utc_now()
    session.gps_route = route
    session.end_time = ended
    if session.start_time is not None:
        started = session.start_time
        if started.tzinfo is None:
            started = started.replace(tzinfo=timezone.utc)
        session.duration = int((ended - started).total_seconds() // 60)
    session.status = SESSION_COMPLETED
    session.completed = True
    save_session(session)
    logger.info(
        "Ended GPS tracking for session %s: %s points, %.2f m",
        session_id,
        metrics.total_points,
        metrics.total_distance,
    )
    return TrackingResult(session=session, metrics=metrics)


def tracking_status(user_id: str) -> TrackingStatus:
    active = storage.get_active(user_id)
    if active is None:
        return TrackingStatus(active=False)
    return TrackingStatus(active=True, session_id=active.session_id, started_at=active.started_at)
