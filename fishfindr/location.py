"""Device location providers.

A provider answers one question: what is the last known fix? The reporter
only ever talks to that interface, so tests and desktop runs can swap in a
static provider.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol

from plyer import gps as plyer_gps
from plyer.utils import platform

try:
    # Available only on Android
    from android.permissions import request_permissions, Permission, check_permission
except ImportError:
    request_permissions = None
    Permission = None
    check_permission = None

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fix:
    latitude: float
    longitude: float
    timestamp: datetime
    accuracy: Optional[float] = None
    speed: Optional[float] = None


class LocationProvider(Protocol):
    def current_location(self) -> Optional[Fix]:
        ...


class StaticLocationProvider:
    """Returns whatever fix it was given (``None`` means no fix yet)."""

    def __init__(self, fix: Optional[Fix] = None):
        self.fix = fix

    def current_location(self) -> Optional[Fix]:
        return self.fix


def _optional_float(value) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class GPSLocationProvider:
    """Caches the most recent fix delivered by the platform GPS."""

    def __init__(self, gps=None, min_time_ms: int = 1000, min_distance_m: float = 0):
        self._gps = gps if gps is not None else plyer_gps
        self.min_time_ms = min_time_ms
        self.min_distance_m = min_distance_m
        self._last_fix: Optional[Fix] = None
        self.active = False
        self.status: Optional[str] = None

    def current_location(self) -> Optional[Fix]:
        return self._last_fix

    def ensure_permissions(self) -> None:
        if platform != "android" or not (request_permissions and Permission and check_permission):
            return
        wanted = [Permission.ACCESS_FINE_LOCATION, Permission.ACCESS_COARSE_LOCATION]
        missing = [p for p in wanted if not check_permission(p)]
        if missing:
            logger.info("Requesting location permissions: %s", missing)
            request_permissions(missing)

    def start(self) -> bool:
        if self.active:
            return True
        self.ensure_permissions()
        try:
            self._gps.configure(on_location=self.on_location, on_status=self.on_status)
            # minTime in ms, minDistance in meters
            self._gps.start(minTime=self.min_time_ms, minDistance=self.min_distance_m)
        except NotImplementedError:
            logger.warning("GPS is not available on platform %r", platform)
            return False
        self.active = True
        logger.info("GPS started")
        return True

    def stop(self) -> None:
        if not self.active:
            return
        try:
            self._gps.stop()
        except NotImplementedError:
            pass
        self.active = False

    def on_location(self, **kwargs) -> None:
        # kwargs vary by provider; normalize common fields
        lat = kwargs.get("lat")
        if lat is None:
            lat = kwargs.get("latitude")
        lon = kwargs.get("lon")
        if lon is None:
            lon = kwargs.get("longitude")
        lat, lon = _optional_float(lat), _optional_float(lon)
        if lat is None or lon is None:
            logger.debug("Ignoring invalid fix: %r", kwargs)
            return
        self._last_fix = Fix(
            latitude=lat,
            longitude=lon,
            timestamp=datetime.now(timezone.utc),
            accuracy=_optional_float(kwargs.get("accuracy")),
            speed=_optional_float(kwargs.get("speed")),
        )

    def on_status(self, status_type, status) -> None:
        self.status = status
        logger.debug("GPS status %s: %s", status_type, status)
