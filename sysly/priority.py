# sysly/priority.py
"""Syslog facility and severity codes, and the priority calculation."""

from enum import IntEnum


class Facility(IntEnum):
    """Syslog facilities, pre-shifted into the upper bits of the priority."""
    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CLOCK = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3

    @property
    def code(self) -> int:
        """Unshifted RFC 5424 facility number."""
        return self.value >> 3

    @classmethod
    def from_name(cls, name: str) -> 'Facility':
        """Look up a facility by name or common alias."""
        key = name.strip().lower()
        key = FACILITY_ALIASES.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown facility: {name}") from None


class Severity(IntEnum):
    """Syslog severities, 0 being the most severe."""
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def from_name(cls, name: str) -> 'Severity':
        """Look up a severity by name or common alias."""
        key = name.strip().lower()
        key = SEVERITY_ALIASES.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown severity: {name}") from None


FACILITY_ALIASES = {
    'kernel': 'kern',
    'lineprinter': 'lpr',
    'cron': 'clock',
}

SEVERITY_ALIASES = {
    'emerg': 'emergency',
    'panic': 'emergency',
    'crit': 'critical',
    'err': 'error',
    'warn': 'warning',
    'informational': 'info',
}


def priority(facility: Facility, severity: Severity) -> int:
    """Combine a facility and severity into the PRI value of a syslog header."""
    return int(facility) | int(severity)
