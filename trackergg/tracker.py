# trackergg/tracker.py
# -- async client for the Tracker Network public API
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import EllipsisType
from typing import Any, TypedDict
from urllib.parse import quote

import httpx

BASE = "https://public-api.tracker.gg/v2"
REQUEST_TIMEOUT = 15.0
KEY_HEADER = "TRN-Api-Key"

log = logging.getLogger("tracker")


# ------------------------ errors ------------------------
class TrackerError(RuntimeError):
    status: int | None = None
    message = "Tracker Network error"

    def __init__(self, message: str | None = None, status: int | None = None):
        self.message = message or self.message
        if status is not None:
            self.status = status
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidKeyError(TrackerError):
    message = "Must provide a valid Tracker Network API key"


class UnknownGameError(TrackerError, KeyError):
    message = "Unknown game"

    def __str__(self) -> str:
        return self.message


class BadRequest(TrackerError):
    status = 400
    message = "Bad request"


class Unauthorized(TrackerError):
    status = 401
    message = "API key invalid"


class NotFound(TrackerError):
    status = 404
    message = "Not found"


class RateLimited(TrackerError):
    status = 429
    message = "Rate limited"


class LegalRestriction(TrackerError):
    status = 451
    message = "Unavailable for legal reasons"


class ServiceUnavailable(TrackerError):
    status = 503
    message = "Tracker Network: Service Unavailable"


class UpstreamError(TrackerError):
    pass


STATUS_ERRORS: dict[int, type[TrackerError]] = {
    cls.status: cls
    for cls in (BadRequest, Unauthorized, NotFound, RateLimited, LegalRestriction, ServiceUnavailable)
}


def error_for(exc: Exception) -> TrackerError:
    """Translate an httpx failure into the matching TrackerError."""
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        cls = STATUS_ERRORS.get(status)
        if cls:
            return cls()
        return UpstreamError(f"Tracker Network error ({status})", status=status)
    if isinstance(exc, httpx.TimeoutException):
        return UpstreamError("Tracker Network: request timed out")
    return UpstreamError(f"Tracker Network: request failed ({type(exc).__name__})")


# ------------------------ games ------------------------
def path_segment(value: str) -> str:
    # dot segments would be collapsed by URL normalization
    s = quote(value, safe="")
    if s in (".", ".."):
        return s.replace(".", "%2E")
    return s


@dataclass(frozen=True)
class Game:
    id: str
    label: str
    slug: str
    platforms: tuple[str, ...]

    def profile_path(self, platform: str, platform_user_id: str) -> str:
        return f"/{self.slug}/standard/profile/{path_segment(platform)}/{path_segment(platform_user_id)}"


# platforms are what the upstream documents; they are not checked here
GAMES: dict[str, Game] = {
    g.id: g
    for g in (
        Game("div2", "Div2", "division-2", ("uplay", "psn", "xbl")),
        Game("apex", "Apex", "apex", ("origin", "xbl", "psn")),
        Game("csgo", "CSGO", "csgo", ("steam",)),
        Game("splitgate", "Splitgate", "splitgate", ("steam", "xbl", "psn")),
        Game("hyperscape", "Hyperscape", "hyper-scape", ("uplay", "psn", "xbl")),
    )
}

PROFILE_FIELDS = ("platformInfo", "userInfo", "metadata", "segments")


class ProfileData(TypedDict):
    platformInfo: Any
    userInfo: Any
    metadata: Any
    segments: Any


class PlayerProfile(TypedDict):
    data: ProfileData


def resolve_game(game: str | Game) -> Game:
    if isinstance(game, Game):
        return game
    try:
        return GAMES[game]
    except KeyError:
        raise UnknownGameError(f"Unknown game: {game!r}") from None


def unwrap_profile(body: Any) -> PlayerProfile:
    try:
        inner = body["data"]["data"]
    except (KeyError, TypeError):
        raise UpstreamError("Tracker Network: unexpected response shape") from None
    if not isinstance(inner, dict):
        raise UpstreamError("Tracker Network: unexpected response shape")
    return {"data": {f: inner.get(f) for f in PROFILE_FIELDS}}


# ------------------------ client ------------------------
class Tracker:
    """Tracker Network stats client.

    One instance per API key. Every query opens its own httpx.AsyncClient, so an
    instance can be shared between concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float | None = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key or not isinstance(api_key, str):
            raise InvalidKeyError()
        self.__key = api_key
        self._timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"<Tracker timeout={self._timeout!r}>"

    @classmethod
    def from_env(cls, **kwargs) -> Tracker:
        from . import config

        if not config.TRN_API_KEY:
            raise RuntimeError("TRN_API_KEY is missing")
        kwargs.setdefault("timeout", config.TRACKER_TIMEOUT)
        return cls(config.TRN_API_KEY, **kwargs)

    async def get_profile(
        self,
        game: str | Game,
        platform: str,
        platform_user_id: str,
        *,
        timeout: float | None | EllipsisType = ...,
    ) -> PlayerProfile:
        g = resolve_game(game)
        url = f"{BASE}{g.profile_path(platform, platform_user_id)}"
        t = self._timeout if timeout is ... else timeout

        try:
            async with httpx.AsyncClient(timeout=t, transport=self._transport) as client:
                r = await client.get(url, headers={KEY_HEADER: self.__key})
            r.raise_for_status()
            body = r.json()
        except httpx.HTTPError as e:
            log.warning(f"[tracker] error trying to receive {g.label} data: {type(e).__name__}: {e}")
            raise error_for(e) from e
        except ValueError as e:
            log.warning(f"[tracker] {g.label} response was not JSON: {type(e).__name__}: {e}")
            raise UpstreamError("Tracker Network: response was not JSON") from e

        try:
            profile = unwrap_profile(body)
        except UpstreamError as e:
            log.warning(f"[tracker] error trying to receive {g.label} data: {e}")
            raise
        log.debug(f"[tracker] fetched {g.label} profile {platform}/{platform_user_id}")
        return profile

    async def get_div2_data(self, platform: str, platform_user_id: str, **kw) -> PlayerProfile:
        """Division 2 stats. platform: 'uplay', 'psn' or 'xbl'; id is the handle on it."""
        return await self.get_profile("div2", platform, platform_user_id, **kw)

    async def get_apex_data(self, platform: str, platform_user_id: str, **kw) -> PlayerProfile:
        """Apex Legends stats. platform: 'origin', 'xbl' or 'psn'."""
        return await self.get_profile("apex", platform, platform_user_id, **kw)

    async def get_csgo_data(self, platform: str, platform_user_id: str, **kw) -> PlayerProfile:
        """CS:GO stats. platform must be 'steam'; id is a Steam ID, community URL or vanity name."""
        return await self.get_profile("csgo", platform, platform_user_id, **kw)

    async def get_splitgate_data(self, platform: str, platform_user_id: str, **kw) -> PlayerProfile:
        """Splitgate stats. platform: 'steam', 'xbl' or 'psn'; id is a SteamID64, gamertag or PSN id."""
        return await self.get_profile("splitgate", platform, platform_user_id, **kw)

    async def get_hyperscape_data(self, platform: str, platform_user_id: str, **kw) -> PlayerProfile:
        """Hyper Scape stats. platform: 'uplay', 'psn' or 'xbl'."""
        return await self.get_profile("hyperscape", platform, platform_user_id, **kw)
