"""Async client for the Tracker Network (tracker.gg) player stats API."""

from .tracker import (
    GAMES,
    BadRequest,
    Game,
    InvalidKeyError,
    LegalRestriction,
    NotFound,
    PlayerProfile,
    RateLimited,
    ServiceUnavailable,
    Tracker,
    TrackerError,
    Unauthorized,
    UnknownGameError,
    UpstreamError,
)

__version__ = "1.0.0"

__all__ = [
    "Tracker",
    "Game",
    "GAMES",
    "PlayerProfile",
    "TrackerError",
    "InvalidKeyError",
    "UnknownGameError",
    "BadRequest",
    "Unauthorized",
    "NotFound",
    "RateLimited",
    "LegalRestriction",
    "ServiceUnavailable",
    "UpstreamError",
]
