# -*- coding: utf-8 -*-
"""Route metrics — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class LocationSample(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    altitude: Optional[float] = Field(None, description="meters")
    speed: Optional[float] = Field(None, description="instantaneous speed as reported by the device")
    accuracy: Optional[float] = Field(None, ge=0)
    timestamp: Optional[datetime] = None

    def dedupe_key(self) -> str:
        stamp = self.timestamp.isoformat() if self.timestamp else ""
        return f"{stamp}|{self.latitude!r}|{self.longitude!r}"


class RouteMetrics(BaseModel):
    total_distance: float = Field(0.0, description="meters")
    average_speed: float = 0.0
    max_speed: float = 0.0
    elevation_gain: float = Field(0.0, description="meters")
    elevation_loss: float = Field(0.0, description="meters")
    total_points: int = 0
