# sysly/formatter.py
"""RFC 5424 line assembly."""

from datetime import datetime, timedelta
from typing import Optional, Union

from .priority import Facility, Severity, priority

# RFC 5424 NILVALUE
NIL = '-'

VERSION = 1


def format_timestamp(timestamp: datetime) -> str:
    """Render a datetime as an RFC 3339 timestamp.

    Naive datetimes are taken to be local time. A zero UTC offset is
    written as ``Z``.
    """
    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        timestamp = timestamp.astimezone()

    timespec = 'microseconds' if timestamp.microsecond else 'seconds'
    rendered = timestamp.isoformat(timespec=timespec)

    if timestamp.utcoffset() == timedelta(0):
        rendered = rendered[:-len('+00:00')] + 'Z'
    return rendered


def _field(value: Optional[Union[str, int]]) -> str:
    if value is None or value == '':
        return NIL
    return str(value)


def format_line(
    facility: Facility,
    severity: Severity,
    timestamp: datetime,
    host: Optional[str] = None,
    app: Optional[str] = None,
    pid: Optional[Union[str, int]] = None,
    msgid: Optional[str] = None,
    message: str = '',
) -> str:
    """Build a syslog line: ``<PRI>1 TIMESTAMP HOST APP-NAME PROCID MSGID MSG``.

    Absent header fields are written as the NIL token so every line carries
    the same number of fields. Neither the header tokens nor the message are
    validated or escaped.
    """
    pri = priority(facility, severity)
    return (
        f"<{pri}>{VERSION} {format_timestamp(timestamp)} "
        f"{_field(host)} {_field(app)} {_field(pid)} {_field(msgid)} {message}"
    )
