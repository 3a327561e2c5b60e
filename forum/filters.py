# forum/filters.py
# Purpose: Jinja filters registered by create_app.
from __future__ import annotations

import datetime as dt

TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


def formatted_time(ts) -> str:
    """Render unix seconds (or a datetime) as 'YYYY/MM/DD HH:MM:SS', local time."""
    if ts is None or ts == "":
        return ""
    if isinstance(ts, dt.datetime):
        return ts.strftime(TIME_FORMAT)
    return dt.datetime.fromtimestamp(float(ts)).strftime(TIME_FORMAT)
