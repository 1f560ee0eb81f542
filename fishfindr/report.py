"""Location reporting.

``Reporter.submit_current_location`` reads the last known fix, turns it into
a :class:`LocationReport` and hands the JSON body to the sync manager. It
never raises for missing ambient data; the outcome is a :class:`ReportResult`.
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from . import sync_manager
from .config import ReporterConfig
from .location import Fix, LocationProvider

logger = logging.getLogger(__name__)

NO_FIX_AVAILABLE = "no_fix_available"
NOT_CONFIGURED = "not_configured"


def format_timestamp(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class LocationReport:
    id: str
    latitude: float
    longitude: float
    timestamp: str

    @classmethod
    def from_fix(cls, fix: Fix) -> "LocationReport":
        return cls(
            id=str(uuid.uuid4()),
            latitude=fix.latitude,
            longitude=fix.longitude,
            timestamp=format_timestamp(fix.timestamp),
        )

    def to_body(self, swap_axes: bool = False) -> Dict[str, Any]:
        latitude, longitude = self.latitude, self.longitude
        if swap_axes:
            latitude, longitude = longitude, latitude
        return {
            "id": self.id,
            "latitude": latitude,
            "longitude": longitude,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ReportResult:
    report: Optional[LocationReport] = None
    dispatch: Optional[threading.Thread] = None
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, report: LocationReport, dispatch: threading.Thread) -> "ReportResult":
        return cls(report=report, dispatch=dispatch)

    @classmethod
    def failed(cls, reason: str) -> "ReportResult":
        return cls(failure=reason)


class Reporter:
    def __init__(self, provider: LocationProvider, config: ReporterConfig):
        self.provider = provider
        self.config = config

    def submit_current_location(self) -> ReportResult:
        if not self.config.is_configured:
            logger.warning("Reporting endpoint or credentials not configured")
            return ReportResult.failed(NOT_CONFIGURED)

        fix = self.provider.current_location()
        if fix is None:
            logger.warning("No location fix available yet")
            return ReportResult.failed(NO_FIX_AVAILABLE)

        report = LocationReport.from_fix(fix)
        body = report.to_body(swap_axes=self.config.swap_axes)
        logger.debug("Submitting report %s", report.id)
        thread = sync_manager.dispatch(self.config, body)
        return ReportResult.success(report, thread)
