from datetime import date, datetime
from zoneinfo import ZoneInfo

from tanker.config import get_settings


def local_today() -> date:
    """Current calendar day in the configured TIMEZONE."""
    return datetime.now(ZoneInfo(get_settings().TIMEZONE)).date()
