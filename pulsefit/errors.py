# -*- coding: utf-8 -*-
"""Error taxonomy shared by the core and the orchestration layer."""

from __future__ import annotations


class PulseFitError(Exception):
    """Base class for domain errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(PulseFitError):
    status_code = 404


class ValidationError(PulseFitError):
    status_code = 400


class InvalidRatingError(ValidationError):
    def __init__(self, rating: float) -> None:
        super().__init__(f"Rating must be between 1.0 and 5.0, got {rating}")
        self.rating = rating


class TrackingConflictError(PulseFitError):
    status_code = 409


class TrackingNotActiveError(PulseFitError):
    status_code = 409


class UpstreamUnavailableError(PulseFitError):
    """A collaborator (text generation, product lookup) failed or timed out."""

    status_code = 502
