import logging
import os
from datetime import UTC, datetime, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

LOCALTIME_PATH = Path("/etc/localtime")


def host_timezone(localtime_path: Path = LOCALTIME_PATH) -> tzinfo:
    """
    Resolve the host's zone with its DST rules.

    Order: the TZ variable, then the system zone file. Hosts with neither
    run in UTC.
    """
    name = os.environ.get("TZ", "").lstrip(":")
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("TZ=%r is not a known zone, trying %s", name, localtime_path)

    if localtime_path.exists():
        with localtime_path.open("rb") as f:
            return ZoneInfo.from_file(f, key="localtime")

    logger.info("No host timezone found, using UTC")
    return UTC


class SystemClock:
    """Wall clock in the configured display timezone (host zone by default)."""

    def __init__(self, tz_name: str | None = None) -> None:
        self._tz: tzinfo = ZoneInfo(tz_name) if tz_name else host_timezone()

    @property
    def timezone(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def now_utc(self) -> datetime:
        return datetime.now(UTC)
