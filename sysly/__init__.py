# sysly/__init__.py
"""
sysly - an RFC 5424 syslog client.

Formats syslog lines with facility, severity and header metadata and sends
them to a collector over UDP or a local Unix stream socket.
"""

__version__ = '1.0.0'

from .priority import Facility, Severity, priority
from .formatter import NIL, format_line, format_timestamp
from .transports import Transport, UDPTransport, UnixStreamTransport
from .syslog import Syslog
from .config import load_config, create_logger, AppConfig
from .errors import SyslyError, TransportSetupError, ConfigError

__all__ = [
    'Facility',
    'Severity',
    'priority',
    'NIL',
    'format_line',
    'format_timestamp',
    'Transport',
    'UDPTransport',
    'UnixStreamTransport',
    'Syslog',
    'load_config',
    'create_logger',
    'AppConfig',
    'SyslyError',
    'TransportSetupError',
    'ConfigError',
]
